from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
import uuid

from app.domains.shared.enums import ContentStatus, PageType
from app.domains.shared.schemas import (
    AuthorSummary, NamedCount, Pagination, SeoSchema, TimestampedResponse, WriteSchema, reject_null
)


class PageBase(WriteSchema):
    """Базовая схема страницы"""
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(None, max_length=300)
    status: ContentStatus = ContentStatus.DRAFT
    page_type: PageType = PageType.CUSTOM
    featured: bool = False
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    template: str = Field("default", max_length=100)
    custom_css: Optional[str] = None
    custom_js: Optional[str] = None
    sort_order: int = 0
    parent_page_id: Optional[uuid.UUID] = None


class PageCreate(PageBase):
    """Схема для создания страницы"""
    is_home_page: bool = False


class PageUpdate(WriteSchema):
    """Схема для обновления страницы"""
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, max_length=300)
    status: Optional[ContentStatus] = None
    page_type: Optional[PageType] = None
    featured: Optional[bool] = None
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    template: Optional[str] = Field(None, max_length=100)
    custom_css: Optional[str] = None
    custom_js: Optional[str] = None
    sort_order: Optional[int] = None
    parent_page_id: Optional[uuid.UUID] = None
    is_home_page: Optional[bool] = None

    @field_validator('title', 'content', 'status', 'page_type', 'featured', 'template', 'sort_order')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class PageResponse(TimestampedResponse):
    """Схема для ответа с данными страницы"""
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    status: str
    page_type: str
    featured: bool
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    template: str
    custom_css: Optional[str] = None
    custom_js: Optional[str] = None
    sort_order: int
    parent_page_id: Optional[uuid.UUID] = None
    view_count: int
    published_at: Optional[datetime] = None
    author: Optional[AuthorSummary] = None
    is_home_page: bool = False


class PageStats(BaseModel):
    total: int
    published: int
    draft: int
    archived: int
    by_page_type: List[NamedCount]


class PageListResponse(BaseModel):
    pages: List[PageResponse]
    pagination: Pagination
    stats: PageStats
