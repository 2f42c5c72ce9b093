"""
Хранилище загруженных файлов на локальном диске.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

import aiofiles
import aiofiles.os

from app.core.config import settings


class MediaStorage(Protocol):
    """Операции с файловым хранилищем, нужные медиа-сервису"""

    async def save(self, directory: str, filename: str, data: bytes) -> str:
        ...

    async def delete(self, path: str) -> None:
        ...

    def url_for(self, directory: str, filename: str) -> str:
        ...


@dataclass
class LocalMediaStorage:
    """Файлы в подкаталогах по категориям: images, videos, audio, documents, other"""

    root: str
    url_prefix: str = "/uploads"

    async def save(self, directory: str, filename: str, data: bytes) -> str:
        target_dir = Path(self.root) / directory
        await aiofiles.os.makedirs(target_dir, exist_ok=True)
        path = target_dir / filename
        async with aiofiles.open(path, "wb") as f:
            await f.write(data)
        return str(path)

    async def delete(self, path: str) -> None:
        await aiofiles.os.remove(path)

    def url_for(self, directory: str, filename: str) -> str:
        return f"{self.url_prefix.rstrip('/')}/{directory}/{filename}"


_media_storage: Optional[LocalMediaStorage] = None


def get_media_storage() -> MediaStorage:
    """Единственный экземпляр хранилища на процесс"""
    global _media_storage
    if _media_storage is None:
        _media_storage = LocalMediaStorage(root=settings.upload_dir, url_prefix=settings.upload_url_prefix)
    return _media_storage
