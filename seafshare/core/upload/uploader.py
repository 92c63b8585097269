"""
Multipart file upload to a resolved upload URL.
"""
import json
from pathlib import Path
from typing import Optional, Union

from ..api.protocols import HttpTransport
from ..exceptions import EmptyResponseError, MalformedResponseError
from ..logging import get_logger
from .file_service import AsyncFileReader, FileValidator
from .models import UploadResult

logger = get_logger('seafshare.upload.file')

PARENT_DIR = '/'


def parse_upload_results(content: Union[bytes, str]) -> UploadResult:
    """
    Pick the result entry from the upload response.

    The service answers with a JSON array holding one entry per uploaded
    file; the last entry wins.

    Raises:
        EmptyResponseError: If the array is empty
        MalformedResponseError: If the body is not an array of
            {"id": str, "name": str, "size": int} objects
    """
    try:
        entries = json.loads(content)
    except ValueError as e:
        raise MalformedResponseError(f"Upload response is not JSON: {e}") from e

    if not isinstance(entries, list):
        raise MalformedResponseError("Upload response is not a JSON array")

    if not entries:
        raise EmptyResponseError("File upload failed: empty response")

    last = entries[-1]
    if not isinstance(last, dict):
        raise MalformedResponseError("Upload response entry is not an object")

    try:
        return UploadResult.from_dict(last)
    except KeyError as e:
        raise MalformedResponseError(f"Upload response entry is missing {e}") from e
    except TypeError as e:
        raise MalformedResponseError(f"Upload response entry is invalid: {e}") from e


async def upload_file(
    session: HttpTransport,
    url: str,
    file_path: Union[str, Path],
    reader: Optional[AsyncFileReader] = None
) -> UploadResult:
    """
    Upload one file into the share's root folder.

    Args:
        session: Transport holding the authenticated cookies
        url: Upload URL from get_upload_url()
        file_path: Local file to send
        reader: File reader (AsyncFileReader by default)

    Returns:
        The entry the service reports for the stored file

    Raises:
        FileNotFoundError: If the file does not exist
        NetworkError: On transport failure or error status
        EmptyResponseError: If the service reports no entry
        MalformedResponseError: If the response has an unexpected shape
    """
    path, file_size = FileValidator().validate(file_path)
    reader = reader or AsyncFileReader()
    content = await reader.read_file(path)

    logger.info(f"Uploading {path.name} ({file_size} bytes)")
    body = await session.post_multipart(
        url,
        fields={'parent_dir': PARENT_DIR},
        files={'file': (path.name, content)}
    )
    result = parse_upload_results(body)
    logger.info(f"Upload complete: {result.name} ({result.size} bytes)")
    return result
