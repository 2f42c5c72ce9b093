from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.domains.shared.enums import MediaCategory


class Media(BaseModel):
    __tablename__ = "media"

    filename = Column(String(255), unique=True, nullable=False)
    original_name = Column(String(255), nullable=False)
    mimetype = Column(String(100), nullable=False)
    size = Column(Integer, nullable=False)
    path = Column(String(500), nullable=False)
    url = Column(String(500), nullable=False)
    alt = Column(String(255), nullable=True)
    title = Column(String(100), nullable=True)
    description = Column(String(500), nullable=True)
    tags = Column(JSON, default=list, nullable=False)
    category = Column(String(20), default=MediaCategory.OTHER.value, nullable=False, index=True)
    is_public = Column(Boolean, default=True, nullable=False)
    usage_count = Column(Integer, default=0, nullable=False)
    file_metadata = Column("metadata", JSON, nullable=True)
    uploaded_by_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    uploaded_by = relationship("User", lazy="selectin")
