import logging
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import is_privileged
from app.db.models.case_study import CaseStudy
from app.db.models.user import User
from app.db.repositories.base import LIKE_ESCAPE, ListParams, escape_like, json_array_contains
from app.db.repositories.case_study_repository import CaseStudyRepository
from app.domains.case_studies.schemas import (
    CaseStudyCreate, CaseStudyDetailResponse, CaseStudyResponse, CaseStudyUpdate
)
from app.domains.shared.enums import ContentStatus

logger = logging.getLogger(__name__)

DUPLICATE_TITLE = "A case study with this title already exists"


class CaseStudyService:
    """Сервис для работы с кейсами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.case_study_repository = CaseStudyRepository(session)

    async def list_case_studies(
        self,
        params: ListParams,
        viewer: Optional[User],
        category: Optional[str] = None,
        technology: Optional[str] = None,
        featured: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Список кейсов с фильтрами и статистикой"""
        repo = self.case_study_repository
        scope = []
        if not is_privileged(viewer):
            scope.append(CaseStudy.status == ContentStatus.PUBLISHED.value)

        conditions = list(scope)
        if category:
            conditions.append(CaseStudy.category.ilike(f"%{escape_like(category)}%", escape=LIKE_ESCAPE))
        if technology:
            conditions.append(json_array_contains(CaseStudy.technologies, technology))
        if featured:
            conditions.append(CaseStudy.is_featured.is_(True))

        case_studies, total = await repo.paginate(conditions, params)

        return {
            "case_studies": [CaseStudyResponse.model_validate(item) for item in case_studies],
            "pagination": params.pagination(total),
            "stats": {
                "total": await repo.count(*scope),
                "published": await repo.count(CaseStudy.status == ContentStatus.PUBLISHED.value, *scope),
                "draft": await repo.count(CaseStudy.status == ContentStatus.DRAFT.value, *scope),
                "featured": await repo.count(CaseStudy.is_featured.is_(True), *scope)
            }
        }

    async def get_case_study_by_slug(
        self,
        slug: str,
        viewer: Optional[User]
    ) -> Optional[CaseStudyDetailResponse]:
        """Получение кейса по slug вместе с похожими кейсами"""
        case_study = await self.case_study_repository.get_by_slug(slug)

        if not case_study or (not case_study.is_published and not is_privileged(viewer)):
            return None

        if case_study.is_published:
            case_study = await self.case_study_repository.increment(case_study, "view_count")

        related = await self.case_study_repository.get_related(case_study)
        return CaseStudyDetailResponse(
            case_study=CaseStudyResponse.model_validate(case_study),
            related_case_studies=[CaseStudyResponse.model_validate(item) for item in related]
        )

    async def create_case_study(self, data: CaseStudyCreate, author: User) -> CaseStudyResponse:
        """Создание нового кейса"""
        if await self.case_study_repository.value_exists("title", data.title):
            raise ValueError(DUPLICATE_TITLE)

        case_study = await self.case_study_repository.create(
            CaseStudy(**data.model_dump(), author_id=author.id)
        )
        logger.info("Case study %s created by %s", case_study.id, author.id)
        return CaseStudyResponse.model_validate(case_study)

    async def update_case_study(
        self,
        case_study_id: uuid.UUID,
        update_data: CaseStudyUpdate
    ) -> Optional[CaseStudyResponse]:
        """Обновление кейса"""
        case_study = await self.case_study_repository.get_by_id(case_study_id)
        if not case_study:
            return None

        changes = update_data.model_dump(exclude_unset=True)
        title = changes.get("title")
        if title and title.lower() != case_study.title.lower():
            if await self.case_study_repository.value_exists("title", title, exclude_id=case_study.id):
                raise ValueError(DUPLICATE_TITLE)

        for field, value in changes.items():
            setattr(case_study, field, value)

        case_study = await self.case_study_repository.save(case_study)
        return CaseStudyResponse.model_validate(case_study)

    async def delete_case_study(self, case_study_id: uuid.UUID) -> bool:
        """Удаление кейса"""
        case_study = await self.case_study_repository.get_by_id(case_study_id)
        if not case_study:
            return False

        await self.case_study_repository.delete(case_study)
        return True

    async def list_categories(self) -> List[Dict[str, Any]]:
        """Категории опубликованных кейсов"""
        return await self.case_study_repository.count_by(
            "category", CaseStudy.status == ContentStatus.PUBLISHED.value
        )

    async def popular_technologies(self, limit: int = 20) -> List[Dict[str, Any]]:
        """Популярные технологии"""
        return await self.case_study_repository.popular_technologies(limit)
