import logging
from typing import Any, Dict, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.base import utcnow
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.schemas import (
    PasswordChange, ProfileUpdate, UserAdminUpdate, UserCreate, UserLogin, UserResponse
)
from app.domains.shared.enums import UserRole

logger = logging.getLogger(__name__)


class AccountDeactivatedError(Exception):
    """Попытка входа в деактивированный аккаунт"""


class IdentityService:
    """Сервис для работы с идентификацией и аутентификацией пользователей"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repository = UserRepository(session)

    async def register_user(self, user_data: UserCreate) -> User:
        """Регистрация нового пользователя"""
        if await self.user_repository.email_exists(user_data.email):
            raise ValueError("User already exists with this email")

        user = User(
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
            role=UserRole.VIEWER.value
        )
        user = await self.user_repository.create(user)
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = await self.user_repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.password_hash):
            return None

        if not user.is_active:
            raise AccountDeactivatedError("Account has been deactivated")

        return user

    async def login_user(self, login_data: UserLogin) -> Optional[Dict[str, Any]]:
        """Вход пользователя и создание JWT токена"""
        user = await self.authenticate_user(login_data)

        if not user:
            return None

        user.last_login = utcnow()
        user = await self.user_repository.save(user)

        return {
            "access_token": self.issue_token(user),
            "token_type": "bearer",
            "user": UserResponse.model_validate(user)
        }

    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(data={"sub": str(user.id), "role": user.role})

    async def get_user(self, user_id: uuid.UUID) -> Optional[User]:
        """Получение пользователя по id"""
        return await self.user_repository.get_by_id(user_id)

    async def update_profile(self, user: User, update_data: ProfileUpdate) -> User:
        """Обновление собственного профиля"""
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(user, field, value)
        return await self.user_repository.save(user)

    async def change_password(self, user: User, data: PasswordChange) -> None:
        """Смена пароля пользователя"""
        if not verify_password(data.current_password, user.password_hash):
            raise ValueError("Current password is incorrect")

        user.password_hash = get_password_hash(data.new_password)
        await self.user_repository.save(user)

    async def list_users(
        self,
        params: ListParams,
        role: Optional[str] = None,
        is_active: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Список пользователей со статистикой"""
        conditions = []
        if role:
            conditions.append(User.role == role)
        if is_active is not None:
            conditions.append(User.is_active == is_active)

        users, total = await self.user_repository.paginate(conditions, params)

        return {
            "users": [UserResponse.model_validate(user) for user in users],
            "pagination": params.pagination(total),
            "stats": {
                "total": await self.user_repository.count(),
                "active": await self.user_repository.count(User.is_active.is_(True)),
                "by_role": await self.user_repository.count_by("role")
            }
        }

    async def update_user(self, user_id: uuid.UUID, update_data: UserAdminUpdate) -> Optional[User]:
        """Изменение пользователя администратором"""
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            return None

        changes = update_data.model_dump(exclude_unset=True)
        email = changes.get("email")
        if email and email != user.email and await self.user_repository.email_exists(email):
            raise ValueError("User already exists with this email")

        for field, value in changes.items():
            setattr(user, field, value)
        return await self.user_repository.save(user)

    async def delete_user(self, user_id: uuid.UUID, acting_user: User) -> bool:
        """Удаление пользователя"""
        if user_id == acting_user.id:
            raise ValueError("You cannot delete your own account")

        user = await self.user_repository.get_by_id(user_id)
        if not user:
            return False

        await self.user_repository.delete(user)
        return True
