"""
Upload session id extraction.

The authenticated share page does not expose the upload session id as data;
it only appears inside an inline script as part of the upload-link URL.
The matching rule sits behind SessionIdExtractor so it can be replaced
when the page template changes.
"""
import re
from typing import Optional, Pattern, Protocol

from bs4 import BeautifulSoup

from ..exceptions import InvalidCredentialsError
from ..logging import get_logger

logger = get_logger('seafshare.share.session_id')

UUID_PATTERN = r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

UPLOAD_LINK_PATTERN = re.compile(
    r"'/ajax/u/d/[0-9a-f]{20}/upload/\?r=(" + UUID_PATTERN + r")'"
)


class SessionIdExtractor(Protocol):
    """Finds the upload session id in a script body."""

    def search(self, script_text: str) -> Optional[str]:
        """Return the session id found in script_text, or None."""
        ...


class PatternSessionIdExtractor:
    """
    Regex-based extractor.

    Matches the single-quoted upload-link literal the share page template
    renders, e.g. '/ajax/u/d/<20 hex>/upload/?r=<uuid>'.
    """

    def __init__(self, pattern: Pattern[str] = UPLOAD_LINK_PATTERN):
        self._pattern = pattern

    @property
    def pattern(self) -> Pattern[str]:
        return self._pattern

    def search(self, script_text: str) -> Optional[str]:
        match = self._pattern.search(script_text)
        return match.group(1) if match else None


def extract_session_id(
    doc: BeautifulSoup,
    extractor: Optional[SessionIdExtractor] = None
) -> str:
    """
    Scan inline scripts in document order for the upload session id.

    Args:
        doc: Page returned by the password submission
        extractor: Matching rule (PatternSessionIdExtractor by default)

    Returns:
        The first session id found

    Raises:
        InvalidCredentialsError: If no script contains one. The service
            renders the same kind of page for a wrong password or a bad
            token, so this is how both show up.
    """
    extractor = extractor or PatternSessionIdExtractor()

    for index, script in enumerate(doc.find_all('script')):
        session_id = extractor.search(script.get_text())
        if session_id:
            logger.debug(f"Upload session id found in script #{index}")
            return session_id

    raise InvalidCredentialsError("Invalid share token or password")
