"""
Upload module.

Resolves a one-time upload URL for an authenticated share and sends the
file to it. UploadCoordinator drives the whole pipeline.
"""
from .coordinator import UploadCoordinator
from .models import UploadResult, PipelineStage
from .resolver import get_upload_url, parse_upload_url
from .uploader import upload_file, parse_upload_results
from .file_service import FileValidator, AsyncFileReader

__all__ = [
    # Main classes
    'UploadCoordinator',
    
    # Models
    'UploadResult',
    'PipelineStage',
    
    # Steps
    'get_upload_url',
    'parse_upload_url',
    'upload_file',
    'parse_upload_results',
    
    # Services
    'FileValidator',
    'AsyncFileReader',
]
