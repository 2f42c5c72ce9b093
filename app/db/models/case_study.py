from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.db.lifecycle import PublishableMixin, SlugMixin


class CaseStudy(SlugMixin, PublishableMixin, BaseModel):
    __tablename__ = "case_studies"

    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    technologies = Column(JSON, default=list, nullable=False)
    client = Column(JSON, nullable=True)
    project = Column(JSON, nullable=True)
    images = Column(JSON, nullable=True)
    testimonial = Column(JSON, nullable=True)
    metrics = Column(JSON, default=list, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    seo = Column(JSON, nullable=True)
    project_url = Column(String(500), nullable=True)
    github_url = Column(String(500), nullable=True)
    completion_date = Column(DateTime(timezone=True), nullable=True)
    view_count = Column(Integer, default=0, nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    author_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    author = relationship("User", lazy="selectin")
