from sqlalchemy import func, select

from app.db.models.media import Media
from app.db.repositories.base import BaseRepository


class MediaRepository(BaseRepository[Media]):
    """Репозиторий для работы с медиафайлами"""

    model = Media
    search_fields = ("original_name", "title", "description")
    sortable_fields = ("created_at", "original_name", "size", "category")

    async def total_size(self) -> int:
        """Суммарный размер файлов в байтах"""
        result = await self.session.execute(select(func.coalesce(func.sum(Media.size), 0)))
        return int(result.scalar() or 0)
