"""
Share session: one cookie-bearing HTTP client per upload.

Cookies set by the share page and the password POST are what authorize
the upload-link request later on, so all stages must go through the same
ShareSession instance.
"""
import asyncio
from typing import Optional, Mapping, Tuple, Any

import aiohttp

from .config import APIConfig
from ..exceptions import NetworkError
from ..logging import get_logger


class ShareSession:
    """
    HTTP session bound to one share token.

    Implements the HttpTransport protocol on top of aiohttp. Transport
    errors and 4xx/5xx responses (after redirects) are raised as NetworkError.

    Example:
        >>> async with ShareSession("abc123") as session:
        ...     html = await session.get(share_url(session.base_url, session.token))
    """

    def __init__(self, token: str, config: Optional[APIConfig] = None):
        """
        Initialize the session.

        Args:
            token: Share token naming the target folder
            config: Client configuration (uses defaults if not provided)
        """
        self._config = config or APIConfig.default()
        self._token = token
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = get_logger('seafshare.http')

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def token(self) -> str:
        return self._token

    @property
    def config(self) -> APIConfig:
        return self._config

    @property
    def cookie_jar(self) -> Optional[aiohttp.abc.AbstractCookieJar]:
        """Cookie jar of the underlying session (None before it is opened)."""
        return self._session.cookie_jar if self._session else None

    async def __aenter__(self) -> 'ShareSession':
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
            self._session = aiohttp.ClientSession(
                connector=connector,
                cookie_jar=aiohttp.CookieJar(unsafe=self._config.unsafe_cookies),
                **self._config.get_session_kwargs()
            )
        return self._session

    async def close(self):
        """Close the session and drop its cookies."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> bytes:
        return await self._request('GET', url, params=params, headers=headers)

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None
    ) -> bytes:
        return await self._request('POST', url, data=dict(data), headers=headers)

    async def post_multipart(
        self,
        url: str,
        fields: Mapping[str, str],
        files: Mapping[str, Tuple[str, bytes]]
    ) -> bytes:
        form = aiohttp.FormData()
        for name, value in fields.items():
            form.add_field(name, value)
        for name, (filename, content) in files.items():
            form.add_field(
                name,
                content,
                filename=filename,
                content_type='application/octet-stream'
            )
        return await self._request('POST', url, data=form)

    async def _request(self, method: str, url: str, **kwargs: Any) -> bytes:
        """Send a request and return the body, mapping failures to NetworkError."""
        session = await self._ensure_session()
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None
        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(method, url, proxy=proxy, **kwargs) as response:
                if response.status >= 400:
                    raise NetworkError(
                        f"{method} {url} failed with HTTP {response.status}",
                        url=url,
                        status=response.status
                    )
                body = await response.read()
                self._logger.debug(f"{method} {url} -> {response.status} ({len(body)} bytes)")
                return body
        except aiohttp.ClientError as e:
            raise NetworkError(f"{method} {url} failed: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise NetworkError(f"{method} {url} timed out", url=url) from e
