"""Хуки жизненного цикла контента: slug и дата публикации"""
from slugify import slugify
from sqlalchemy import Column, DateTime, String, event, inspect, or_, select

from app.db.base import utcnow
from app.domains.shared.enums import ContentStatus

FALLBACK_SLUG = "untitled"


def make_slug(text: str) -> str:
    """Детерминированный URL-safe slug из заголовка или имени"""
    return slugify(text or "") or FALLBACK_SLUG


def unique_slug(connection, target, base: str) -> str:
    """Первый свободный вариант: base, base-2, base-3, ..."""
    table = target.__table__
    conditions = [or_(table.c.slug == base, table.c.slug.like(f"{base}-%"))]
    if target.id is not None:
        conditions.append(table.c.id != target.id)
    taken = set(connection.execute(select(table.c.slug).where(*conditions)).scalars())

    slug, suffix = base, 2
    while slug in taken:
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug


def attribute_changed(target, name: str) -> bool:
    return inspect(target).attrs[name].history.has_changes()


class SlugMixin:
    """Slug пересчитывается при создании и при изменении исходного поля"""
    __slug_source__ = "title"

    slug = Column(String(200), unique=True, index=True, nullable=False)


def _assign_slug(connection, target) -> None:
    target.slug = unique_slug(connection, target, make_slug(getattr(target, target.__slug_source__)))


@event.listens_for(SlugMixin, "before_insert", propagate=True)
def _slug_before_insert(mapper, connection, target):
    _assign_slug(connection, target)


@event.listens_for(SlugMixin, "before_update", propagate=True)
def _slug_before_update(mapper, connection, target):
    if attribute_changed(target, target.__slug_source__):
        _assign_slug(connection, target)


class PublishableMixin:
    """Статус draft/published/archived с однократной отметкой публикации"""

    status = Column(String(20), default=ContentStatus.DRAFT.value, nullable=False, index=True)
    published_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_published(self) -> bool:
        return self.status == ContentStatus.PUBLISHED


def _stamp_published(target) -> None:
    # Дата первой публикации не перезаписывается
    if target.status == ContentStatus.PUBLISHED and target.published_at is None:
        target.published_at = utcnow()


@event.listens_for(PublishableMixin, "before_insert", propagate=True)
def _publish_before_insert(mapper, connection, target):
    _stamp_published(target)


@event.listens_for(PublishableMixin, "before_update", propagate=True)
def _publish_before_update(mapper, connection, target):
    if attribute_changed(target, "status"):
        _stamp_published(target)
