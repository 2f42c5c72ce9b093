from app.domains.media.schemas import MediaResponse, MediaStats, MediaListResponse
from app.domains.media.services import MediaService
from app.domains.media.storage import LocalMediaStorage, MediaStorage, get_media_storage

__all__ = [
    "MediaResponse", "MediaStats", "MediaListResponse",
    "MediaService",
    "LocalMediaStorage", "MediaStorage", "get_media_storage"
]
