import logging
from typing import Any, Dict, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.testimonial import Testimonial
from app.db.repositories.base import ListParams
from app.db.repositories.testimonial_repository import TestimonialRepository
from app.domains.shared.enums import TestimonialSource, TestimonialStatus
from app.domains.testimonials.schemas import (
    TestimonialAdminResponse, TestimonialCreate, TestimonialResponse, TestimonialSubmit, TestimonialUpdate
)

logger = logging.getLogger(__name__)

PUBLIC_SCOPE = (
    Testimonial.status == TestimonialStatus.APPROVED.value,
    Testimonial.is_public.is_(True),
)


class TestimonialService:
    """Сервис для работы с отзывами и их модерацией"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.testimonial_repository = TestimonialRepository(session)

    async def list_public(
        self,
        params: ListParams,
        testimonial_type: Optional[str] = None,
        rating: Optional[int] = None,
        featured: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Одобренные публичные отзывы"""
        repo = self.testimonial_repository
        conditions = list(PUBLIC_SCOPE)
        if testimonial_type:
            conditions.append(Testimonial.testimonial_type == testimonial_type)
        if rating:
            conditions.append(Testimonial.rating >= rating)
        if featured:
            conditions.append(Testimonial.is_featured.is_(True))

        testimonials, total = await repo.paginate(conditions, params)

        return {
            "testimonials": [TestimonialResponse.model_validate(item) for item in testimonials],
            "pagination": params.pagination(total),
            "stats": {
                "total": await repo.count(*PUBLIC_SCOPE),
                "featured": await repo.count(Testimonial.is_featured.is_(True), *PUBLIC_SCOPE),
                "average_rating": await repo.average_rating(*PUBLIC_SCOPE),
                "by_type": await repo.count_by("testimonial_type", *PUBLIC_SCOPE)
            }
        }

    async def list_admin(
        self,
        params: ListParams,
        status: Optional[str] = None,
        testimonial_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """Все отзывы для администрирования"""
        repo = self.testimonial_repository
        conditions = []
        if status:
            conditions.append(Testimonial.status == status)
        if testimonial_type:
            conditions.append(Testimonial.testimonial_type == testimonial_type)

        testimonials, total = await repo.paginate(conditions, params)

        return {
            "testimonials": [TestimonialAdminResponse.model_validate(item) for item in testimonials],
            "pagination": params.pagination(total),
            "stats": {
                "total": await repo.count(),
                "pending": await repo.count(Testimonial.status == TestimonialStatus.PENDING.value),
                "approved": await repo.count(Testimonial.status == TestimonialStatus.APPROVED.value),
                "rejected": await repo.count(Testimonial.status == TestimonialStatus.REJECTED.value),
                "by_type": await repo.count_by("testimonial_type")
            }
        }

    async def get_public(self, testimonial_id: uuid.UUID) -> Optional[TestimonialResponse]:
        """Публичный отзыв по id"""
        testimonial = await self.testimonial_repository.get_one(
            Testimonial.id == testimonial_id, *PUBLIC_SCOPE
        )
        return TestimonialResponse.model_validate(testimonial) if testimonial else None

    async def create_testimonial(self, data: TestimonialCreate) -> TestimonialAdminResponse:
        """Создание отзыва"""
        values = data.model_dump()
        if values.get("date_given") is None:
            values.pop("date_given")

        testimonial = await self.testimonial_repository.create(Testimonial(**values))
        return TestimonialAdminResponse.model_validate(testimonial)

    async def submit_testimonial(self, data: TestimonialSubmit) -> Testimonial:
        """Публичная отправка отзыва: всегда на модерацию"""
        testimonial = Testimonial(
            **data.model_dump(),
            status=TestimonialStatus.PENDING.value,
            is_public=False,
            is_featured=False,
            source=TestimonialSource.WEBSITE.value
        )
        testimonial = await self.testimonial_repository.create(testimonial)
        logger.info("Testimonial %s submitted for review", testimonial.id)
        return testimonial

    async def update_testimonial(
        self,
        testimonial_id: uuid.UUID,
        update_data: TestimonialUpdate
    ) -> Optional[TestimonialAdminResponse]:
        """Обновление отзыва"""
        testimonial = await self.testimonial_repository.get_by_id(testimonial_id)
        if not testimonial:
            return None

        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(testimonial, field, value)

        testimonial = await self.testimonial_repository.save(testimonial)
        return TestimonialAdminResponse.model_validate(testimonial)

    async def moderate(self, testimonial_id: uuid.UUID, approve: bool) -> Optional[TestimonialAdminResponse]:
        """Одобрение или отклонение отзыва"""
        testimonial = await self.testimonial_repository.get_by_id(testimonial_id)
        if not testimonial:
            return None

        if approve:
            testimonial.status = TestimonialStatus.APPROVED.value
            testimonial.is_public = True
        else:
            testimonial.status = TestimonialStatus.REJECTED.value
            testimonial.is_public = False

        testimonial = await self.testimonial_repository.save(testimonial)
        return TestimonialAdminResponse.model_validate(testimonial)

    async def delete_testimonial(self, testimonial_id: uuid.UUID) -> bool:
        """Удаление отзыва"""
        testimonial = await self.testimonial_repository.get_by_id(testimonial_id)
        if not testimonial:
            return False

        await self.testimonial_repository.delete(testimonial)
        return True
