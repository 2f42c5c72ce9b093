import logging
from typing import Any, Dict, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import is_privileged
from app.db.models.page import Page
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.db.repositories.page_repository import PageRepository
from app.domains.pages.schemas import PageCreate, PageResponse, PageUpdate
from app.domains.shared.enums import ContentStatus

logger = logging.getLogger(__name__)

DUPLICATE_TITLE = "A page with this title already exists"


class PageService:
    """Сервис для работы со страницами сайта"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.page_repository = PageRepository(session)

    async def list_pages(
        self,
        params: ListParams,
        viewer: Optional[User],
        page_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """Список страниц с учетом прав просмотра"""
        scope = []
        if not is_privileged(viewer):
            scope.append(Page.status == ContentStatus.PUBLISHED.value)

        conditions = list(scope)
        if page_type:
            conditions.append(Page.page_type == page_type)

        pages, total = await self.page_repository.paginate(conditions, params)
        home_page_id = await self.page_repository.get_home_page_id()

        return {
            "pages": [self._to_response(page, home_page_id) for page in pages],
            "pagination": params.pagination(total),
            "stats": {
                "total": await self.page_repository.count(*scope),
                "published": await self.page_repository.count(
                    Page.status == ContentStatus.PUBLISHED.value, *scope
                ),
                "draft": await self.page_repository.count(Page.status == ContentStatus.DRAFT.value, *scope),
                "archived": await self.page_repository.count(
                    Page.status == ContentStatus.ARCHIVED.value, *scope
                ),
                "by_page_type": await self.page_repository.count_by("page_type", *scope)
            }
        }

    async def get_page_by_slug(self, slug: str, viewer: Optional[User]) -> Optional[PageResponse]:
        """Получение страницы по slug (просмотр увеличивает счетчик)"""
        page = await self.page_repository.get_by_slug(slug)

        if not page or (not page.is_published and not is_privileged(viewer)):
            return None

        if page.is_published:
            page = await self.page_repository.increment(page, "view_count")

        return self._to_response(page, await self.page_repository.get_home_page_id())

    async def get_home_page(self) -> Optional[PageResponse]:
        """Опубликованная главная страница"""
        home_page_id = await self.page_repository.get_home_page_id()
        if home_page_id is None:
            return None

        page = await self.page_repository.get_by_id(home_page_id)
        if not page or not page.is_published:
            return None

        page = await self.page_repository.increment(page, "view_count")
        return self._to_response(page, home_page_id)

    async def create_page(self, page_data: PageCreate, author: User) -> PageResponse:
        """Создание новой страницы"""
        if await self.page_repository.value_exists("title", page_data.title):
            raise ValueError(DUPLICATE_TITLE)

        data = page_data.model_dump(exclude={"is_home_page"})
        page = await self.page_repository.create(Page(**data, author_id=author.id))

        if page_data.is_home_page:
            await self.page_repository.set_home_page(page.id)

        logger.info("Page %s created by %s", page.id, author.id)
        return self._to_response(page, await self.page_repository.get_home_page_id())

    async def update_page(self, page_id: uuid.UUID, update_data: PageUpdate) -> Optional[PageResponse]:
        """Обновление страницы"""
        page = await self.page_repository.get_by_id(page_id)
        if not page:
            return None

        changes = update_data.model_dump(exclude_unset=True)
        is_home_page = changes.pop("is_home_page", None)

        title = changes.get("title")
        if title and title.lower() != page.title.lower():
            if await self.page_repository.value_exists("title", title, exclude_id=page.id):
                raise ValueError(DUPLICATE_TITLE)

        for field, value in changes.items():
            setattr(page, field, value)
        page = await self.page_repository.save(page)

        home_page_id = await self.page_repository.get_home_page_id()
        if is_home_page is True and home_page_id != page.id:
            await self.page_repository.set_home_page(page.id)
        elif is_home_page is False and home_page_id == page.id:
            await self.page_repository.set_home_page(None)

        return self._to_response(page, await self.page_repository.get_home_page_id())

    async def delete_page(self, page_id: uuid.UUID) -> bool:
        """Удаление страницы"""
        page = await self.page_repository.get_by_id(page_id)
        if not page:
            return False

        if await self.page_repository.get_home_page_id() == page.id:
            await self.page_repository.set_home_page(None)

        await self.page_repository.delete(page)
        return True

    @staticmethod
    def _to_response(page: Page, home_page_id: Optional[uuid.UUID]) -> PageResponse:
        response = PageResponse.model_validate(page)
        response.is_home_page = home_page_id is not None and page.id == home_page_id
        return response
