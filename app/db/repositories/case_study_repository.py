from collections import Counter
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from app.db.models.case_study import CaseStudy
from app.db.repositories.base import BaseRepository
from app.domains.shared.enums import ContentStatus


class CaseStudyRepository(BaseRepository[CaseStudy]):
    """Репозиторий для работы с кейсами"""

    model = CaseStudy
    search_fields = ("title", "description", "category")
    sortable_fields = (
        "published_at", "created_at", "updated_at", "title", "view_count", "likes", "completion_date"
    )
    default_sort = "published_at"

    async def get_by_slug(self, slug: str) -> Optional[CaseStudy]:
        """Получение кейса по slug"""
        return await self.get_one(CaseStudy.slug == slug)

    async def get_related(self, case_study: CaseStudy, limit: int = 3) -> List[CaseStudy]:
        """Опубликованные кейсы той же категории"""
        result = await self.session.execute(
            select(CaseStudy)
            .where(
                CaseStudy.id != case_study.id,
                CaseStudy.category == case_study.category,
                CaseStudy.status == ContentStatus.PUBLISHED.value
            )
            .order_by(CaseStudy.published_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def popular_technologies(self, limit: int = 20) -> List[Dict[str, Any]]:
        """Самые используемые технологии опубликованных кейсов"""
        result = await self.session.execute(
            select(CaseStudy.technologies).where(CaseStudy.status == ContentStatus.PUBLISHED.value)
        )
        counter = Counter(tech for techs in result.scalars().all() for tech in techs or [])
        return [{"name": tech, "count": count} for tech, count in counter.most_common(limit)]
