"""
Data models for the upload pipeline.

Uses dataclasses for immutable, type-safe data structures.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class PipelineStage(str, Enum):
    """
    States of one upload run.

    The run only ever moves forward; any failure ends it in FAILED.
    """
    START = 'start'
    PAGE_FETCHED = 'page_fetched'
    FORM_TOKEN_EXTRACTED = 'form_token_extracted'
    PASSWORD_SUBMITTED = 'password_submitted'
    SESSION_ID_EXTRACTED = 'session_id_extracted'
    UPLOAD_URL_RESOLVED = 'upload_url_resolved'
    UPLOADED = 'uploaded'
    FAILED = 'failed'


@dataclass(frozen=True)
class UploadResult:
    """
    File entry returned by the upload endpoint.

    Attributes:
        id: Object id assigned by the service
        name: Stored file name
        size: Stored size in bytes
    """
    id: str
    name: str
    size: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UploadResult':
        """
        Create from a JSON object.

        Raises:
            KeyError: If a field is missing
            TypeError: If a field has the wrong type
        """
        entry_id, name, size = data['id'], data['name'], data['size']
        if not isinstance(entry_id, str) or not isinstance(name, str):
            raise TypeError("'id' and 'name' must be strings")
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError("'size' must be an integer")
        return cls(id=entry_id, name=name, size=size)

    def as_line(self) -> str:
        """Format as '<id> <name> <size>'."""
        return f"{self.id} {self.name} {self.size}"
