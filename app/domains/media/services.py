import logging
import os
import secrets
import time
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db.models.media import Media
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.db.repositories.media_repository import MediaRepository
from app.domains.media.schemas import MediaResponse
from app.domains.media.storage import MediaStorage
from app.domains.shared.enums import MediaCategory
from app.domains.shared.schemas import normalize_tags

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {
    ".jpeg", ".jpg", ".png", ".gif", ".webp", ".svg",
    ".pdf", ".doc", ".docx", ".txt",
    ".mp4", ".avi", ".mov",
    ".mp3", ".wav", ".ogg",
}

DOCUMENT_MIMETYPES = ("application/pdf", "application/msword")
OFFICE_MIMETYPE_PREFIX = "application/vnd.openxmlformats-officedocument"

CATEGORY_DIRECTORIES = {
    MediaCategory.IMAGE: "images",
    MediaCategory.VIDEO: "videos",
    MediaCategory.AUDIO: "audio",
    MediaCategory.DOCUMENT: "documents",
    MediaCategory.OTHER: "other",
}


def classify_mimetype(mimetype: str) -> MediaCategory:
    """Категория файла по MIME-типу"""
    mimetype = (mimetype or "").lower()
    if mimetype.startswith("image/"):
        return MediaCategory.IMAGE
    if mimetype.startswith("video/"):
        return MediaCategory.VIDEO
    if mimetype.startswith("audio/"):
        return MediaCategory.AUDIO
    if (
        mimetype in DOCUMENT_MIMETYPES
        or mimetype.startswith(OFFICE_MIMETYPE_PREFIX)
        or mimetype.startswith("text/")
    ):
        return MediaCategory.DOCUMENT
    return MediaCategory.OTHER


def is_allowed(filename: str, mimetype: str) -> bool:
    """Проверка расширения и MIME-типа по списку разрешенных"""
    extension = os.path.splitext(filename or "")[1].lower()
    return extension in ALLOWED_EXTENSIONS and classify_mimetype(mimetype) != MediaCategory.OTHER


def generate_filename(original_name: str) -> str:
    """Уникальное имя файла с сохранением расширения"""
    extension = os.path.splitext(original_name)[1].lower()
    return f"file-{int(time.time() * 1000)}-{secrets.token_hex(6)}{extension}"


class MediaService:
    """Сервис для загрузки и учета медиафайлов"""

    def __init__(self, session: AsyncSession, storage: MediaStorage):
        self.session = session
        self.storage = storage
        self.media_repository = MediaRepository(session)

    async def upload(
        self,
        original_name: str,
        mimetype: str,
        data: bytes,
        uploader: User,
        alt: Optional[str] = None,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None,
        is_public: bool = True
    ) -> MediaResponse:
        """Сохранение файла на диск и запись метаданных"""
        if len(data) > settings.max_upload_size:
            raise ValueError(f"File too large. Maximum size is {settings.max_upload_size // (1024 * 1024)}MB")

        if not is_allowed(original_name, mimetype):
            raise ValueError("Invalid file type. Only images, documents, videos, and audio files are allowed.")

        category = classify_mimetype(mimetype)
        directory = CATEGORY_DIRECTORIES[category]
        filename = generate_filename(original_name)
        path = await self.storage.save(directory, filename, data)

        media = Media(
            filename=filename,
            original_name=original_name,
            mimetype=mimetype,
            size=len(data),
            path=path,
            url=self.storage.url_for(directory, filename),
            alt=alt,
            title=title,
            description=description,
            tags=normalize_tags(tags) or [],
            category=category.value,
            is_public=is_public,
            file_metadata={"format": os.path.splitext(original_name)[1].lstrip(".").lower()},
            uploaded_by_id=uploader.id
        )

        try:
            media = await self.media_repository.create(media)
        except Exception:
            await self._remove_file(path)
            raise

        logger.info("Uploaded %s (%s, %d bytes) by %s", filename, mimetype, media.size, uploader.id)
        return MediaResponse.model_validate(media)

    async def list_media(self, params: ListParams, category: Optional[str] = None) -> Dict[str, Any]:
        """Список медиафайлов"""
        conditions = []
        if category:
            conditions.append(Media.category == category)

        items, total = await self.media_repository.paginate(conditions, params)

        return {
            "media_files": [MediaResponse.model_validate(item) for item in items],
            "pagination": params.pagination(total),
            "stats": {
                "total": await self.media_repository.count(),
                "total_size": await self.media_repository.total_size(),
                "by_category": await self.media_repository.count_by("category")
            }
        }

    async def get_media(self, media_id: uuid.UUID) -> Optional[MediaResponse]:
        """Получение медиафайла по id"""
        media = await self.media_repository.get_by_id(media_id)
        return MediaResponse.model_validate(media) if media else None

    async def delete_media(self, media_id: uuid.UUID) -> bool:
        """Удаление файла и записи (ошибка удаления файла только логируется)"""
        media = await self.media_repository.get_by_id(media_id)
        if not media:
            return False

        await self._remove_file(media.path)
        await self.media_repository.delete(media)
        return True

    async def _remove_file(self, path: str) -> None:
        try:
            await self.storage.delete(path)
        except OSError:
            logger.error("Error deleting file %s", path, exc_info=True)
