from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime
import uuid

from app.domains.shared.enums import (
    Budget, ContactPriority, ContactStatus, InquiryType, ServiceKind, Timeline
)
from app.domains.shared.schemas import (
    AuthorSummary, NamedCount, Pagination, TimestampedResponse, WriteSchema, normalize_tags, reject_null
)


class ContactCreate(WriteSchema):
    """Схема публичной формы обратной связи"""
    name: str = Field(..., max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    company: Optional[str] = Field(None, max_length=100)
    subject: str = Field(..., max_length=200)
    message: str = Field(..., max_length=2000)
    inquiry_type: InquiryType = InquiryType.GENERAL
    budget: Optional[Budget] = None
    timeline: Optional[Timeline] = None
    services: List[ServiceKind] = Field(default_factory=list)
    is_newsletter: bool = False

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if len(v) < 2:
            raise ValueError('Name must be at least 2 characters')
        return v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower()

    @field_validator('subject')
    @classmethod
    def validate_subject(cls, v):
        if len(v) < 5:
            raise ValueError('Subject must be at least 5 characters')
        return v

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        if len(v) < 10:
            raise ValueError('Message must be at least 10 characters')
        return v


class ContactUpdate(WriteSchema):
    """Схема для обработки обращения администратором"""
    status: Optional[ContactStatus] = None
    priority: Optional[ContactPriority] = None
    notes: Optional[str] = Field(None, max_length=1000)
    assigned_to: Optional[uuid.UUID] = None
    follow_up_date: Optional[datetime] = None
    tags: Optional[List[str]] = None

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        return normalize_tags(v)

    @field_validator('status', 'priority', 'tags')
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class ContactSubmitted(BaseModel):
    """Краткий ответ на отправку формы"""
    id: uuid.UUID
    name: str
    email: str
    subject: str


class ContactResponse(TimestampedResponse):
    """Схема для ответа с данными обращения"""
    name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    subject: str
    message: str
    status: str
    priority: str
    source: str
    inquiry_type: str
    budget: Optional[str] = None
    timeline: Optional[str] = None
    services: List[str]
    is_newsletter: bool
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    response_date: Optional[datetime] = None
    notes: Optional[str] = None
    tags: List[str]
    follow_up_date: Optional[datetime] = None
    assigned_to: Optional[AuthorSummary] = None


class ContactStats(BaseModel):
    total: int
    new: int
    read: int
    replied: int
    closed: int
    by_inquiry_type: List[NamedCount]
    by_priority: List[NamedCount]


class ContactListResponse(BaseModel):
    contacts: List[ContactResponse]
    pagination: Pagination
    stats: ContactStats
