"""
Upload URL resolution.

Asks the share's AJAX endpoint for a short-lived upload URL tied to the
current cookie session.
"""
import json
import time
from typing import Callable, Union

from ..api.protocols import HttpTransport
from ..api.urls import upload_link_url
from ..exceptions import MalformedResponseError
from ..logging import get_logger

logger = get_logger('seafshare.upload.resolver')

AJAX_HEADERS = {'X-Requested-With': 'XMLHttpRequest'}


def parse_upload_url(content: Union[bytes, str]) -> str:
    """
    Extract the upload URL from a '{"url": ...}' response.

    Raises:
        MalformedResponseError: If the body is not a JSON object with a
            non-empty string 'url'
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise MalformedResponseError(f"Upload link response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError("Upload link response is not a JSON object")

    url = data.get('url')
    if not isinstance(url, str) or not url:
        raise MalformedResponseError("Upload link response has no 'url'")

    return url


async def get_upload_url(
    session: HttpTransport,
    token: str,
    session_id: str,
    clock: Callable[[], float] = time.time
) -> str:
    """
    Request a one-time upload URL.

    Args:
        session: Transport holding the authenticated cookies
        token: Share token
        session_id: Id returned by extract_session_id()
        clock: Wall clock in seconds, used for the cache-busting parameter

    Returns:
        The resolved upload URL

    Raises:
        NetworkError: On transport failure or error status
        MalformedResponseError: If the response has no usable 'url'
    """
    params = {
        'r': session_id,
        '_': str(int(clock() * 1000)),
    }
    logger.info("Requesting upload URL")
    body = await session.get(
        upload_link_url(session.base_url, token),
        params=params,
        headers=AJAX_HEADERS
    )
    url = parse_upload_url(body)
    logger.debug(f"Upload URL resolved: {url}")
    return url
