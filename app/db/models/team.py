from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON

from app.db.base import BaseModel
from app.db.lifecycle import SlugMixin
from app.domains.shared.enums import TeamStatus


class TeamMember(SlugMixin, BaseModel):
    __tablename__ = "team_members"
    __slug_source__ = "name"

    name = Column(String(50), nullable=False)
    position = Column(String(100), nullable=False)
    department = Column(String(20), nullable=False, index=True)
    bio = Column(Text, nullable=False)
    avatar = Column(String(500), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    social = Column(JSON, nullable=True)
    skills = Column(JSON, default=list, nullable=False)
    experience = Column(Integer, default=0, nullable=False)
    joined_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), default=TeamStatus.ACTIVE.value, nullable=False, index=True)
    is_public = Column(Boolean, default=True, nullable=False)
    order = Column(Integer, default=0, nullable=False)
    achievements = Column(JSON, default=list, nullable=False)
    education = Column(JSON, default=list, nullable=False)
    languages = Column(JSON, default=list, nullable=False)
