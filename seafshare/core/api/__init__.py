"""HTTP layer: configuration, URL builders and the cookie session."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, DEFAULT_BASE_URL
from .protocols import HttpTransport
from .session import ShareSession
from .urls import share_url, upload_link_url

__all__ = [
    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DEFAULT_BASE_URL',
    
    # Session
    'HttpTransport',
    'ShareSession',
    'share_url',
    'upload_link_url',
]
