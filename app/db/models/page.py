from sqlalchemy import Column, String, Text, Integer, Boolean, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel
from app.db.lifecycle import PublishableMixin, SlugMixin
from app.domains.shared.enums import PageType


class Page(SlugMixin, PublishableMixin, BaseModel):
    __tablename__ = "pages"

    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(300), nullable=True)
    page_type = Column(String(20), default=PageType.CUSTOM.value, nullable=False, index=True)
    featured = Column(Boolean, default=False, nullable=False)
    featured_image = Column(String(500), nullable=True)
    seo = Column(JSON, nullable=True)
    template = Column(String(100), default="default", nullable=False)
    custom_css = Column(Text, nullable=True)
    custom_js = Column(Text, nullable=True)
    sort_order = Column(Integer, default=0, nullable=False)
    view_count = Column(Integer, default=0, nullable=False)
    parent_page_id = Column(Uuid, ForeignKey("pages.id", ondelete="SET NULL"), nullable=True)
    author_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Relationships
    author = relationship("User", lazy="selectin")


class SiteSettings(BaseModel):
    """Единственная запись с настройками сайта (указатель на главную страницу)"""
    __tablename__ = "site_settings"

    home_page_id = Column(Uuid, ForeignKey("pages.id", ondelete="SET NULL"), nullable=True)
