from typing import Optional
import uuid

from app.db.models.page import Page, SiteSettings
from app.db.repositories.base import BaseRepository

# Фиксированный идентификатор единственной записи настроек сайта
SITE_SETTINGS_ID = uuid.UUID(int=1)


class PageRepository(BaseRepository[Page]):
    """Репозиторий для работы со страницами"""

    model = Page
    search_fields = ("title", "content")
    sortable_fields = ("created_at", "updated_at", "published_at", "title", "sort_order", "view_count")
    secondary_sort = (("sort_order", "asc"),)

    async def get_by_slug(self, slug: str) -> Optional[Page]:
        """Получение страницы по slug"""
        return await self.get_one(Page.slug == slug)

    async def get_site_settings(self) -> SiteSettings:
        """Получение (или создание) записи настроек сайта"""
        site = await self.session.get(SiteSettings, SITE_SETTINGS_ID)
        if site is None:
            site = SiteSettings(id=SITE_SETTINGS_ID)
            self.session.add(site)
            await self.session.flush()
        return site

    async def get_home_page_id(self) -> Optional[uuid.UUID]:
        site = await self.session.get(SiteSettings, SITE_SETTINGS_ID)
        return site.home_page_id if site else None

    async def set_home_page(self, page_id: Optional[uuid.UUID]) -> None:
        """Установка указателя на главную страницу одной записью"""
        site = await self.get_site_settings()
        site.home_page_id = page_id
        await self.session.commit()
