from typing import Optional

from sqlalchemy import func, select

from app.db.models.testimonial import Testimonial
from app.db.repositories.base import BaseRepository


class TestimonialRepository(BaseRepository[Testimonial]):
    """Репозиторий для работы с отзывами"""

    model = Testimonial
    search_fields = ("name", "company", "content")
    sortable_fields = ("date_given", "created_at", "updated_at", "rating", "name", "company", "order")
    default_sort = "date_given"
    secondary_sort = (("order", "asc"),)

    async def average_rating(self, *conditions) -> Optional[float]:
        """Средний рейтинг"""
        result = await self.session.execute(
            select(func.avg(Testimonial.rating)).where(*conditions)
        )
        value = result.scalar()
        return round(float(value), 1) if value is not None else None
