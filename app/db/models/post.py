import math

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON, Uuid, event
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.db.lifecycle import PublishableMixin, SlugMixin, attribute_changed

WORDS_PER_MINUTE = 200


def estimate_read_time(content: str) -> int:
    """Время чтения в минутах"""
    words = len((content or "").split())
    return math.ceil(words / WORDS_PER_MINUTE)


class Post(SlugMixin, PublishableMixin, BaseModel):
    __tablename__ = "posts"

    title = Column(String(150), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(300), nullable=True)
    category = Column(String(50), nullable=False, index=True)
    tags = Column(JSON, default=list, nullable=False)
    featured_image = Column(String(500), nullable=True)
    seo = Column(JSON, nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    view_count = Column(Integer, default=0, nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    read_time = Column(Integer, default=0, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
    author_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    author = relationship("User", lazy="selectin")


@event.listens_for(Post, "before_insert")
def _read_time_before_insert(mapper, connection, target):
    if not target.read_time:
        target.read_time = estimate_read_time(target.content)


@event.listens_for(Post, "before_update")
def _read_time_before_update(mapper, connection, target):
    if attribute_changed(target, "content") and not attribute_changed(target, "read_time"):
        target.read_time = estimate_read_time(target.content)
