from pydantic import AliasChoices, BaseModel, Field
from typing import List, Optional

from app.domains.shared.schemas import AuthorSummary, NamedCount, Pagination, TimestampedResponse


class MediaResponse(TimestampedResponse):
    """Схема для ответа с данными медиафайла"""
    filename: str
    original_name: str
    mimetype: str
    size: int
    path: str
    url: str
    alt: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    tags: List[str]
    category: str
    is_public: bool
    usage_count: int
    metadata: Optional[dict] = Field(None, validation_alias=AliasChoices("file_metadata", "metadata"))
    uploaded_by: Optional[AuthorSummary] = None


class MediaStats(BaseModel):
    total: int
    total_size: int
    by_category: List[NamedCount]


class MediaListResponse(BaseModel):
    media_files: List[MediaResponse]
    pagination: Pagination
    stats: MediaStats
