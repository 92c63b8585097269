"""
Custom exceptions for share-folder upload operations.

Every error carries the pipeline stage it was raised in, so callers can
decide per stage what to do with it (today every error is fatal).
"""
from typing import Optional


class ShareError(Exception):
    """Base exception for all share upload errors."""
    
    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            stage: Pipeline stage the error belongs to (if known)
        """
        self.stage = stage
        super().__init__(message)


class NetworkError(ShareError):
    """Transport failure or non-success HTTP status."""
    
    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status: Optional[int] = None,
        stage: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            url: Requested URL
            status: HTTP status code (None for transport failures)
            stage: Pipeline stage
        """
        self.url = url
        self.status = status
        super().__init__(message, stage)


class ParseError(ShareError):
    """Exception raised when a page cannot be parsed as HTML."""
    pass


class FormNotFoundError(ParseError):
    """The share password form is missing from the page."""
    pass


class InputNotFoundError(ParseError):
    """The share password form has no input element."""
    pass


class TokenMissingError(ParseError):
    """The anti-forgery input carries no value attribute."""
    pass


class InvalidCredentialsError(ShareError):
    """
    No upload session id on the authenticated page.
    
    The service answers a wrong password or a bad share token with a normal
    page, so this is the only signal that authentication failed.
    """
    pass


class MalformedResponseError(ShareError):
    """A JSON response did not have the expected shape."""
    pass


class EmptyResponseError(MalformedResponseError):
    """The upload endpoint returned an empty result list."""
    pass
