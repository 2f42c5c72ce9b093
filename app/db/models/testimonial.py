from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON

from app.db.base import BaseModel, utcnow
from app.domains.shared.enums import TestimonialStatus, TestimonialType, TestimonialSource


class Testimonial(BaseModel):
    __tablename__ = "testimonials"

    name = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    company = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, default=5, nullable=False)
    avatar = Column(String(500), nullable=True)
    project_title = Column(String(200), nullable=True)
    project_category = Column(String(50), nullable=True)
    location = Column(String(100), nullable=True)
    testimonial_type = Column(String(20), default=TestimonialType.CLIENT.value, nullable=False, index=True)
    status = Column(String(20), default=TestimonialStatus.PENDING.value, nullable=False, index=True)
    is_public = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    date_given = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    project_duration = Column(String(100), nullable=True)
    project_value = Column(String(100), nullable=True)
    source = Column(String(20), default=TestimonialSource.WEBSITE.value, nullable=False)
    tags = Column(JSON, default=list, nullable=False)
    contact_info = Column(JSON, nullable=True)
    project_details = Column(JSON, nullable=True)
    order = Column(Integer, default=0, nullable=False)
