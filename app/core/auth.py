import logging
from typing import Optional
import uuid

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.security import extract_token_from_header, verify_token
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.domains.shared.enums import UserRole

logger = logging.getLogger(__name__)

NO_TOKEN = "Access denied. No token provided."
INVALID_TOKEN = "Token is not valid"
DEACTIVATED = "Account has been deactivated"

PRIVILEGED_ROLES = (UserRole.ADMIN, UserRole.EDITOR)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_user_from_token(token: str, db: AsyncSession) -> Optional[User]:
    """Пользователь из JWT токена (None, если токен невалиден)"""
    payload = verify_token(token)
    if not payload:
        return None

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        return None

    return await UserRepository(db).get_by_id(user_id)


async def get_current_user(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Зависимость для получения текущего пользователя"""
    token = extract_token_from_header(authorization)
    if not token:
        raise _unauthorized(NO_TOKEN)

    user = await get_user_from_token(token, db)
    if not user:
        logger.info("Rejected invalid bearer token")
        raise _unauthorized(INVALID_TOKEN)

    if not user.is_active:
        logger.info("Rejected token of deactivated user %s", user.id)
        raise _unauthorized(DEACTIVATED)

    return user


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """Текущий пользователь, если токен передан и валиден; иначе None"""
    token = extract_token_from_header(authorization)
    if not token:
        return None

    user = await get_user_from_token(token, db)
    if not user or not user.is_active:
        return None
    return user


def require_roles(*roles: UserRole):
    """Зависимость, пропускающая только пользователей с указанными ролями"""

    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role {current_user.role} is not authorized to access this route",
            )
        return current_user

    return role_checker


def is_privileged(user: Optional[User]) -> bool:
    """Администраторы и редакторы видят записи в любом статусе"""
    return user is not None and user.role in PRIVILEGED_ROLES


require_admin = require_roles(UserRole.ADMIN)
require_editor = require_roles(UserRole.ADMIN, UserRole.EDITOR)
require_author = require_roles(UserRole.ADMIN, UserRole.EDITOR, UserRole.AUTHOR)
