"""
ShareClient - High-level async client for password-protected shares.

Example:
    >>> async with ShareClient() as client:
    ...     result = await client.upload("abc123", "report.pdf", "secret")
    ...     print(result.as_line())
"""
from pathlib import Path
from typing import Optional, Union

from .core.api import APIConfig, ShareSession
from .core.logging import get_logger
from .core.share import SessionIdExtractor
from .core.upload import UploadCoordinator, UploadResult

logger = get_logger('seafshare.client')


class ShareClient:
    """
    Uploads local files into password-protected shared folders.

    Every upload() call runs on a fresh ShareSession, closed when the call
    returns, so cookies never leak from one upload to another. Entering and
    leaving the client holds no resources.
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session_id_extractor: Optional[SessionIdExtractor] = None
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (uses defaults if not provided)
            session_id_extractor: Override for the session id matching rule
        """
        self._config = config or APIConfig.default()
        self._extractor = session_id_extractor

    @property
    def config(self) -> APIConfig:
        return self._config

    async def __aenter__(self) -> 'ShareClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass

    async def upload(
        self,
        token: str,
        file_path: Union[str, Path],
        password: str
    ) -> UploadResult:
        """
        Upload a file into the root of a shared folder.

        Args:
            token: Share token from the share link
            file_path: Local file to upload
            password: Share password

        Returns:
            UploadResult with the id, name and size the service reports

        Raises:
            FileNotFoundError: If the local file does not exist
            ShareError: If any pipeline step fails
        """
        async with ShareSession(token, self._config) as session:
            coordinator = UploadCoordinator(session, session_id_extractor=self._extractor)
            result = await coordinator.upload(token, file_path, password)
        logger.info(f"Uploaded {result.name} as {result.id}")
        return result
