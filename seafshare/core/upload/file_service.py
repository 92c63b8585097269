"""
Local file validation and reading.

The upload is a single multipart request, so the payload is read whole.
"""
from pathlib import Path
from typing import Tuple, Union

import aiofiles

from ..logging import get_logger


class FileValidator:
    """
    Validates the local file before any network call is made.
    
    Responsibilities:
    - Check file existence
    - Verify path is a regular file
    - Get file size
    """
    
    def validate(self, file_path: Union[str, Path]) -> Tuple[Path, int]:
        """
        Validate a file for upload.
        
        Args:
            file_path: Path to the file
            
        Returns:
            Tuple of (validated Path, file size in bytes)
            
        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If path is not a regular file
        """
        path = Path(file_path) if isinstance(file_path, str) else file_path
        
        if not path.exists():
            raise FileNotFoundError(f"No such file: {path}")
        
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        
        return path, path.stat().st_size


class AsyncFileReader:
    """Reads upload payloads without blocking the event loop."""
    
    def __init__(self):
        self._logger = get_logger('seafshare.upload.file')
    
    async def read_file(self, file_path: Path) -> bytes:
        """
        Read an entire file.
        
        Raises:
            OSError: If the file cannot be read
        """
        async with aiofiles.open(file_path, 'rb') as f:
            data = await f.read()
        self._logger.debug(f"Read {len(data)} bytes from {file_path}")
        return data
