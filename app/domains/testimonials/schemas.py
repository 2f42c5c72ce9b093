from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domains.shared.enums import (
    ProjectCategory, TestimonialSource, TestimonialStatus, TestimonialType
)
from app.domains.shared.schemas import (
    NamedCount, Pagination, TimestampedResponse, WriteSchema, normalize_tags, reject_null
)

MIN_RATING = 1
MAX_RATING = 5


def check_rating(value: Optional[int]) -> Optional[int]:
    if value is not None and not MIN_RATING <= value <= MAX_RATING:
        raise ValueError("Rating must be between 1 and 5")
    return value


class ContactInfo(WriteSchema):
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None


class ProjectDetails(WriteSchema):
    services: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    outcome: Optional[str] = Field(None, max_length=1000)
    challenges: Optional[str] = Field(None, max_length=1000)


class TestimonialBase(WriteSchema):
    """Базовая схема отзыва"""
    name: str = Field(..., min_length=1, max_length=100)
    position: str = Field(..., min_length=1, max_length=100)
    company: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=10, max_length=2000)
    rating: int = 5
    avatar: Optional[str] = None
    project_title: Optional[str] = Field(None, max_length=200)
    project_category: Optional[ProjectCategory] = None
    location: Optional[str] = Field(None, max_length=100)
    testimonial_type: TestimonialType = TestimonialType.CLIENT
    project_duration: Optional[str] = None
    project_value: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    contact_info: Optional[ContactInfo] = None
    project_details: Optional[ProjectDetails] = None

    @field_validator('rating')
    @classmethod
    def validate_rating(cls, v):
        return check_rating(v)

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)


class TestimonialSubmit(TestimonialBase):
    """Схема публичной отправки отзыва (поля модерации не принимаются)"""
    pass


class TestimonialCreate(TestimonialBase):
    """Схема для создания отзыва администратором"""
    status: TestimonialStatus = TestimonialStatus.PENDING
    is_public: bool = False
    is_featured: bool = False
    date_given: Optional[datetime] = None
    source: TestimonialSource = TestimonialSource.WEBSITE
    order: int = 0


class TestimonialUpdate(WriteSchema):
    """Схема для обновления отзыва"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = Field(None, min_length=10, max_length=2000)
    rating: Optional[int] = None
    avatar: Optional[str] = None
    project_title: Optional[str] = Field(None, max_length=200)
    project_category: Optional[ProjectCategory] = None
    location: Optional[str] = Field(None, max_length=100)
    testimonial_type: Optional[TestimonialType] = None
    status: Optional[TestimonialStatus] = None
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None
    date_given: Optional[datetime] = None
    project_duration: Optional[str] = None
    project_value: Optional[str] = None
    source: Optional[TestimonialSource] = None
    tags: Optional[List[str]] = None
    contact_info: Optional[ContactInfo] = None
    project_details: Optional[ProjectDetails] = None
    order: Optional[int] = None

    @field_validator('rating')
    @classmethod
    def validate_rating(cls, v):
        return check_rating(v)

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)

    @field_validator(
        'name', 'position', 'company', 'content', 'rating', 'testimonial_type', 'status',
        'is_public', 'is_featured', 'date_given', 'source', 'tags', 'order'
    )
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class TestimonialResponse(TimestampedResponse):
    """Публичные данные отзыва (без контактов)"""
    name: str
    position: str
    company: str
    content: str
    rating: int
    avatar: Optional[str] = None
    project_title: Optional[str] = None
    project_category: Optional[str] = None
    location: Optional[str] = None
    testimonial_type: str
    status: str
    is_public: bool
    is_featured: bool
    date_given: datetime
    project_duration: Optional[str] = None
    project_value: Optional[str] = None
    source: str
    tags: List[str]
    project_details: Optional[ProjectDetails] = None
    order: int


class TestimonialAdminResponse(TestimonialResponse):
    """Полные данные отзыва для администрирования"""
    contact_info: Optional[ContactInfo] = None


class TestimonialStats(BaseModel):
    total: int
    featured: int
    average_rating: Optional[float] = None
    by_type: List[NamedCount]


class TestimonialAdminStats(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
    by_type: List[NamedCount]


class TestimonialListResponse(BaseModel):
    testimonials: List[TestimonialResponse]
    pagination: Pagination
    stats: TestimonialStats


class TestimonialAdminListResponse(BaseModel):
    testimonials: List[TestimonialAdminResponse]
    pagination: Pagination
    stats: TestimonialAdminStats
