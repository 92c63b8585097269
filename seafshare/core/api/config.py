"""
API configuration module.

Provides configuration for the share-folder HTTP client.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl
from urllib.parse import quote

from ... import __version__

DEFAULT_BASE_URL = 'https://cloud.tsinghua.edu.cn'


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                username = quote(self.username, safe='')
                password = quote(self.password, safe='')
                return f"{protocol}://{username}:{password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Everything is unbounded by default: a large upload over a slow link
    must not be cut off.
    """
    total: Optional[float] = None
    connect: Optional[float] = None
    sock_read: Optional[float] = None
    sock_connect: Optional[float] = None

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read,
            sock_connect=self.sock_connect
        )


@dataclass
class APIConfig:
    """
    Complete client configuration.

    Attributes:
        base_url: Root URL of the file-sharing service
        user_agent: User-Agent header sent with every request
        proxy: Optional proxy settings
        ssl: SSL settings
        timeout: Timeout settings (unbounded by default)
        extra_headers: Headers added to every request
        unsafe_cookies: Accept cookies from bare IP hosts
    """
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = f'seafshare/{__version__}'

    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    unsafe_cookies: bool = False

    def __post_init__(self):
        self.base_url = self.base_url.rstrip('/')

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def with_timeout(cls, seconds: float, **kwargs) -> 'APIConfig':
        """Create configuration with a bounded total timeout."""
        return cls(
            timeout=TimeoutConfig(total=seconds),
            **kwargs
        )

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        headers = {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

        return {
            'headers': headers,
            'timeout': self.timeout.to_aiohttp_timeout(),
        }
