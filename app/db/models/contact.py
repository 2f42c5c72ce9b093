from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.domains.shared.enums import ContactStatus, ContactPriority, ContactSource, InquiryType


class Contact(BaseModel):
    __tablename__ = "contacts"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(20), nullable=True)
    company = Column(String(100), nullable=True)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default=ContactStatus.NEW.value, nullable=False, index=True)
    priority = Column(String(20), default=ContactPriority.MEDIUM.value, nullable=False, index=True)
    source = Column(String(20), default=ContactSource.WEBSITE.value, nullable=False)
    inquiry_type = Column(String(20), default=InquiryType.GENERAL.value, nullable=False, index=True)
    budget = Column(String(20), nullable=True)
    timeline = Column(String(20), nullable=True)
    services = Column(JSON, default=list, nullable=False)
    is_newsletter = Column(Boolean, default=False, nullable=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(500), nullable=True)
    response_date = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(JSON, default=list, nullable=False)
    follow_up_date = Column(DateTime(timezone=True), nullable=True)
    assigned_to_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    assigned_to = relationship("User", lazy="selectin")
