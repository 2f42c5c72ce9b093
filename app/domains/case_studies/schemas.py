from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domains.shared.enums import ContentStatus
from app.domains.shared.schemas import (
    AuthorSummary, Pagination, SeoSchema, TimestampedResponse, WriteSchema, reject_null
)


class ClientInfo(WriteSchema):
    name: str = Field(..., min_length=1, max_length=100)
    industry: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None


class ProjectInfo(WriteSchema):
    description: Optional[str] = None
    challenge: Optional[str] = None
    solution: Optional[str] = None
    results: Optional[str] = None
    duration: Optional[str] = None
    team_size: Optional[int] = Field(None, ge=1)


class CaseStudyImages(WriteSchema):
    featured: str
    gallery: List[str] = Field(default_factory=list)
    screenshots: List[str] = Field(default_factory=list)


class QuoteAuthor(WriteSchema):
    name: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None
    avatar: Optional[str] = None


class CaseStudyTestimonial(WriteSchema):
    quote: Optional[str] = None
    author: Optional[QuoteAuthor] = None


class Metric(WriteSchema):
    label: str
    value: str
    improvement: Optional[str] = None


class CaseStudyBase(WriteSchema):
    """Базовая схема кейса"""
    title: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    technologies: List[str] = Field(default_factory=list)
    client: Optional[ClientInfo] = None
    project: Optional[ProjectInfo] = None
    images: Optional[CaseStudyImages] = None
    testimonial: Optional[CaseStudyTestimonial] = None
    metrics: List[Metric] = Field(default_factory=list)
    status: ContentStatus = ContentStatus.DRAFT
    is_featured: bool = False
    seo: Optional[SeoSchema] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    completion_date: Optional[datetime] = None


class CaseStudyCreate(CaseStudyBase):
    """Схема для создания кейса"""
    pass


class CaseStudyUpdate(WriteSchema):
    """Схема для обновления кейса"""
    title: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    technologies: Optional[List[str]] = None
    client: Optional[ClientInfo] = None
    project: Optional[ProjectInfo] = None
    images: Optional[CaseStudyImages] = None
    testimonial: Optional[CaseStudyTestimonial] = None
    metrics: Optional[List[Metric]] = None
    status: Optional[ContentStatus] = None
    is_featured: Optional[bool] = None
    seo: Optional[SeoSchema] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    completion_date: Optional[datetime] = None

    @field_validator(
        'title', 'description', 'content', 'category', 'technologies', 'metrics', 'status', 'is_featured'
    )
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class CaseStudyResponse(TimestampedResponse):
    """Схема для ответа с данными кейса"""
    title: str
    slug: str
    description: str
    content: str
    category: str
    technologies: List[str]
    client: Optional[ClientInfo] = None
    project: Optional[ProjectInfo] = None
    images: Optional[CaseStudyImages] = None
    testimonial: Optional[CaseStudyTestimonial] = None
    metrics: List[Metric]
    status: str
    is_featured: bool
    seo: Optional[SeoSchema] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    completion_date: Optional[datetime] = None
    published_at: Optional[datetime] = None
    view_count: int
    likes: int
    author: Optional[AuthorSummary] = None


class CaseStudyDetailResponse(BaseModel):
    case_study: CaseStudyResponse
    related_case_studies: List[CaseStudyResponse]


class CaseStudyStats(BaseModel):
    total: int
    published: int
    draft: int
    featured: int


class CaseStudyListResponse(BaseModel):
    case_studies: List[CaseStudyResponse]
    pagination: Pagination
    stats: CaseStudyStats
