"""
Upload coordinator.

Runs the share upload pipeline over a single transport:

    fetch page -> extract form token -> submit password
        -> extract session id -> resolve upload URL -> upload file

Each step consumes the previous step's output. There are no retries; the
first error ends the run.
"""
import time
from pathlib import Path
from typing import Callable, Optional, Union

from ..api.protocols import HttpTransport
from ..exceptions import ShareError
from ..logging import get_logger
from ..share import (
    fetch,
    extract_form_token,
    submit_password,
    extract_session_id,
    SessionIdExtractor,
)
from .file_service import AsyncFileReader, FileValidator
from .models import PipelineStage, UploadResult
from .resolver import get_upload_url
from .uploader import upload_file

logger = get_logger('seafshare.upload.coordinator')


class UploadCoordinator:
    """
    Coordinates one upload into a password-protected share.

    The transport is injected so that tests can replace the network, and
    the session id rule so that a page template change only touches the
    extractor.

    Errors raised by a step get their `stage` set to the state the run was
    trying to reach, and the coordinator ends in PipelineStage.FAILED.
    """

    def __init__(
        self,
        transport: HttpTransport,
        session_id_extractor: Optional[SessionIdExtractor] = None,
        file_reader: Optional[AsyncFileReader] = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize upload coordinator.

        Args:
            transport: Cookie-preserving HTTP transport, used for every step
            session_id_extractor: Rule for finding the upload session id
            file_reader: Reader for the local payload
            clock: Wall clock for the cache-busting timestamp
        """
        self._transport = transport
        self._extractor = session_id_extractor
        self._file_reader = file_reader or AsyncFileReader()
        self._validator = FileValidator()
        self._clock = clock
        self._stage = PipelineStage.START

    @property
    def stage(self) -> PipelineStage:
        """Current pipeline state."""
        return self._stage

    def _advance(self, stage: PipelineStage) -> None:
        logger.info(f"Pipeline: {self._stage.value} -> {stage.value}")
        self._stage = stage

    async def upload(
        self,
        token: str,
        file_path: Union[str, Path],
        password: str
    ) -> UploadResult:
        """
        Upload a local file into the share named by token.

        Args:
            token: Share token
            file_path: Local file to upload
            password: Share password

        Returns:
            The result entry reported by the service

        Raises:
            FileNotFoundError: If the file does not exist (before any request)
            ShareError: Any failure of a pipeline step
        """
        if self._stage is not PipelineStage.START:
            raise RuntimeError("UploadCoordinator runs a single upload only")

        path, file_size = self._validator.validate(file_path)
        logger.info(f"Starting upload of {path.name} ({file_size} bytes) to share {token}")

        target = PipelineStage.PAGE_FETCHED
        try:
            page = await fetch(self._transport, token)
            self._advance(target)

            target = PipelineStage.FORM_TOKEN_EXTRACTED
            csrf_token = extract_form_token(page)
            self._advance(target)

            target = PipelineStage.PASSWORD_SUBMITTED
            page = await submit_password(self._transport, token, csrf_token, password)
            self._advance(target)

            target = PipelineStage.SESSION_ID_EXTRACTED
            session_id = extract_session_id(page, self._extractor)
            self._advance(target)

            target = PipelineStage.UPLOAD_URL_RESOLVED
            upload_url = await get_upload_url(
                self._transport, token, session_id, clock=self._clock
            )
            self._advance(target)

            target = PipelineStage.UPLOADED
            result = await upload_file(
                self._transport, upload_url, path, reader=self._file_reader
            )
            self._advance(target)
        except ShareError as e:
            if e.stage is None:
                e.stage = target.value
            logger.error(f"Upload failed before reaching '{target.value}': {e}")
            self._stage = PipelineStage.FAILED
            raise
        except Exception:
            self._stage = PipelineStage.FAILED
            raise

        return result
