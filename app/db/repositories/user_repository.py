from typing import Optional

from sqlalchemy import func

from app.db.models.user import User
from app.db.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Репозиторий для работы с пользователями"""

    model = User
    search_fields = ("first_name", "last_name", "email")
    sortable_fields = ("created_at", "updated_at", "first_name", "last_name", "email", "role", "last_login")

    async def get_by_email(self, email: str) -> Optional[User]:
        """Получение пользователя по email"""
        return await self.get_one(func.lower(User.email) == email.strip().lower())

    async def email_exists(self, email: str) -> bool:
        """Проверка существования email"""
        return await self.value_exists("email", email)
