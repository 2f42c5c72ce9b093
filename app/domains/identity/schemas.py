from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domains.shared.enums import UserRole
from app.domains.shared.schemas import NamedCount, Pagination, TimestampedResponse, WriteSchema, reject_null


class UserBase(WriteSchema):
    """Базовая схема пользователя"""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()


class UserCreate(UserBase):
    """Схема для регистрации пользователя"""
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(BaseModel):
    """Схема для входа пользователя"""
    email: EmailStr
    password: str


class ProfileUpdate(WriteSchema):
    """Схема для обновления собственного профиля"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    avatar: Optional[str] = None
    bio: Optional[str] = Field(None, max_length=500)

    @field_validator('first_name', 'last_name')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class UserAdminUpdate(ProfileUpdate):
    """Схема для изменения пользователя администратором"""
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower() if v else v

    @field_validator('email', 'role', 'is_active')
    @classmethod
    def validate_admin_not_null(cls, v):
        return reject_null(v)


class PasswordChange(BaseModel):
    """Схема для смены пароля"""
    current_password: str
    new_password: str = Field(..., min_length=6, max_length=128)


class UserResponse(TimestampedResponse):
    """Схема для ответа с данными пользователя"""
    first_name: str
    last_name: str
    full_name: str
    email: str
    role: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    is_active: bool
    last_login: Optional[datetime] = None


class Token(BaseModel):
    """Схема для JWT токена"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class UserStats(BaseModel):
    total: int
    active: int
    by_role: List[NamedCount]


class UserListResponse(BaseModel):
    users: List[UserResponse]
    pagination: Pagination
    stats: UserStats
