from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.domains.shared.enums import Department, LanguageProficiency, TeamStatus
from app.domains.shared.schemas import NamedCount, Pagination, TimestampedResponse, WriteSchema, reject_null


class SocialLinks(WriteSchema):
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class Education(WriteSchema):
    degree: str
    institution: str
    year: Optional[int] = None


class LanguageSkill(WriteSchema):
    language: str
    proficiency: LanguageProficiency


class TeamMemberBase(WriteSchema):
    """Базовая схема участника команды"""
    name: str = Field(..., min_length=1, max_length=50)
    position: str = Field(..., min_length=1, max_length=100)
    department: Department
    bio: str = Field(..., min_length=1, max_length=1000)
    avatar: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    social: Optional[SocialLinks] = None
    skills: List[str] = Field(default_factory=list)
    experience: int = Field(0, ge=0)
    joined_date: Optional[datetime] = None
    status: TeamStatus = TeamStatus.ACTIVE
    is_public: bool = True
    order: int = 0
    achievements: List[str] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    languages: List[LanguageSkill] = Field(default_factory=list)


class TeamMemberCreate(TeamMemberBase):
    """Схема для добавления участника команды"""
    pass


class TeamMemberUpdate(WriteSchema):
    """Схема для обновления участника команды"""
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    position: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[Department] = None
    bio: Optional[str] = Field(None, min_length=1, max_length=1000)
    avatar: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    social: Optional[SocialLinks] = None
    skills: Optional[List[str]] = None
    experience: Optional[int] = Field(None, ge=0)
    joined_date: Optional[datetime] = None
    status: Optional[TeamStatus] = None
    is_public: Optional[bool] = None
    order: Optional[int] = None
    achievements: Optional[List[str]] = None
    education: Optional[List[Education]] = None
    languages: Optional[List[LanguageSkill]] = None

    @field_validator(
        'name', 'position', 'department', 'bio', 'skills', 'experience', 'status',
        'is_public', 'order', 'achievements', 'education', 'languages'
    )
    @classmethod
    def validate_not_null(cls, v):
        return reject_null(v)


class TeamMemberPublicResponse(TimestampedResponse):
    """Публичный профиль (без email и телефона)"""
    name: str
    slug: str
    position: str
    department: str
    bio: str
    avatar: Optional[str] = None
    social: Optional[SocialLinks] = None
    skills: List[str]
    experience: int
    joined_date: Optional[datetime] = None
    status: str
    is_public: bool
    order: int
    achievements: List[str]
    education: List[Education]
    languages: List[LanguageSkill]


class TeamMemberResponse(TeamMemberPublicResponse):
    """Полный профиль для администрирования"""
    email: Optional[str] = None
    phone: Optional[str] = None


class TeamStats(BaseModel):
    total: int
    by_department: List[NamedCount]


class TeamAdminStats(TeamStats):
    active: int
    inactive: int
    alumni: int


class TeamListResponse(BaseModel):
    team_members: List[TeamMemberPublicResponse]
    pagination: Pagination
    stats: TeamStats


class TeamAdminListResponse(BaseModel):
    team_members: List[TeamMemberResponse]
    pagination: Pagination
    stats: TeamAdminStats
