"""
Protocol definitions for the HTTP layer.

Pipeline stages depend on HttpTransport only, so tests can pass a double
instead of a real cookie session.
"""
from typing import Protocol, Mapping, Optional, Tuple


class HttpTransport(Protocol):
    """Cookie-preserving HTTP client used by every pipeline stage."""

    base_url: str

    async def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> bytes:
        """
        GET a URL and return the raw response body.

        Raises:
            NetworkError: On transport failure or 4xx/5xx status
        """
        ...

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None
    ) -> bytes:
        """POST a form-encoded body and return the raw response body."""
        ...

    async def post_multipart(
        self,
        url: str,
        fields: Mapping[str, str],
        files: Mapping[str, Tuple[str, bytes]]
    ) -> bytes:
        """
        POST a multipart/form-data body.

        Args:
            url: Target URL
            fields: Plain text fields
            files: Field name -> (file name, content)
        """
        ...
