"""
seafshare - Upload files into password-protected Seafile shared folders.

Usage:
    >>> from seafshare import ShareClient
    >>> 
    >>> async with ShareClient() as client:
    ...     result = await client.upload("abc123", "report.pdf", "secret")
    ...     print(result.id, result.name, result.size)
"""
import logging

__version__ = '1.0.0'

from .client import ShareClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    ShareSession,
)

from .core.upload import UploadResult, UploadCoordinator, PipelineStage

from .core.exceptions import (
    ShareError,
    NetworkError,
    ParseError,
    FormNotFoundError,
    InputNotFoundError,
    TokenMissingError,
    InvalidCredentialsError,
    MalformedResponseError,
    EmptyResponseError,
)


def setup_logging(level=logging.INFO):
    """
    Configure logging for seafshare modules.
    
    Sets the level on every seafshare logger and keeps propagation on, so
    handlers installed with basicConfig() receive the records.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'seafshare',
        'seafshare.client',
        'seafshare.http',
        'seafshare.share.page',
        'seafshare.share.session_id',
        'seafshare.upload.coordinator',
        'seafshare.upload.resolver',
        'seafshare.upload.file',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'ShareClient',
    'ShareSession',
    'UploadCoordinator',
    'UploadResult',
    'PipelineStage',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'ShareError',
    'NetworkError',
    'ParseError',
    'FormNotFoundError',
    'InputNotFoundError',
    'TokenMissingError',
    'InvalidCredentialsError',
    'MalformedResponseError',
    'EmptyResponseError',
    'setup_logging',
]
