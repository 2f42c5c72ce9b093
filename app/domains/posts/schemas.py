from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domains.shared.enums import ContentStatus, PostCategory
from app.domains.shared.schemas import (
    AuthorSummary, Pagination, SeoSchema, TimestampedResponse, WriteSchema, normalize_tags, reject_null
)


class PostBase(WriteSchema):
    """Базовая схема поста"""
    title: str = Field(..., min_length=1, max_length=150)
    content: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(None, max_length=300)
    status: ContentStatus = ContentStatus.DRAFT
    category: PostCategory
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    scheduled_at: Optional[datetime] = None
    featured: bool = False

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)


class PostCreate(PostBase):
    """Схема для создания поста"""
    pass


class PostUpdate(WriteSchema):
    """Схема для обновления поста"""
    title: Optional[str] = Field(None, min_length=1, max_length=150)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, max_length=300)
    status: Optional[ContentStatus] = None
    category: Optional[PostCategory] = None
    tags: Optional[List[str]] = None
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    scheduled_at: Optional[datetime] = None
    featured: Optional[bool] = None
    read_time: Optional[int] = Field(None, ge=0)

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)

    @field_validator('title', 'content', 'status', 'category', 'tags', 'featured', 'read_time')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class PostResponse(TimestampedResponse):
    """Схема для ответа с данными поста"""
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    status: str
    category: str
    tags: List[str]
    featured_image: Optional[str] = None
    seo: Optional[SeoSchema] = None
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    view_count: int
    likes: int
    read_time: int
    featured: bool
    author: Optional[AuthorSummary] = None


class PostDetailResponse(BaseModel):
    post: PostResponse
    related_posts: List[PostResponse]


class PostStats(BaseModel):
    total: int
    published: int
    draft: int
    featured: int


class PostListResponse(BaseModel):
    posts: List[PostResponse]
    pagination: Pagination
    stats: PostStats


class LikesResponse(BaseModel):
    likes: int