"""Share page stages: page fetch, password form, session id."""
from .page import fetch, submit_password, parse_html, CSRF_FIELD
from .form import extract_form_token, FORM_SELECTOR
from .session_id import (
    extract_session_id,
    SessionIdExtractor,
    PatternSessionIdExtractor,
    UPLOAD_LINK_PATTERN,
)

__all__ = [
    'fetch',
    'submit_password',
    'parse_html',
    'extract_form_token',
    'extract_session_id',
    'SessionIdExtractor',
    'PatternSessionIdExtractor',
    'UPLOAD_LINK_PATTERN',
    'CSRF_FIELD',
    'FORM_SELECTOR',
]
