from pydantic import BaseModel, Field, ConfigDict
from typing import Generic, List, Optional, TypeVar
from datetime import datetime
import uuid

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Единый конверт успешного ответа"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


class WriteSchema(BaseModel):
    """Базовая схема входных данных"""
    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True)


class ReadSchema(BaseModel):
    """Базовая схема ответа из ORM-модели"""
    model_config = ConfigDict(from_attributes=True)


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class NamedCount(BaseModel):
    name: Optional[str] = None
    count: int


class AuthorSummary(ReadSchema):
    """Краткие данные пользователя для вложенных объектов"""
    id: uuid.UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    avatar: Optional[str] = None


class SeoSchema(WriteSchema):
    meta_title: Optional[str] = Field(None, max_length=60)
    meta_description: Optional[str] = Field(None, max_length=160)
    keywords: List[str] = Field(default_factory=list)
    og_image: Optional[str] = None


class TimestampedResponse(ReadSchema):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


def normalize_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    """Теги в нижнем регистре, без пустых значений"""
    if tags is None:
        return None
    return [tag.strip().lower() for tag in tags if tag and tag.strip()]


def reject_null(value):
    """Явный null недопустим для обязательного поля"""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
