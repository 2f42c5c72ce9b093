from collections import Counter
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from app.db.models.post import Post
from app.db.repositories.base import BaseRepository
from app.domains.shared.enums import ContentStatus


class PostRepository(BaseRepository[Post]):
    """Репозиторий для работы с постами блога"""

    model = Post
    search_fields = ("title", "content", "excerpt")
    sortable_fields = (
        "published_at", "created_at", "updated_at", "title", "view_count", "likes", "read_time"
    )
    default_sort = "published_at"

    async def get_by_slug(self, slug: str) -> Optional[Post]:
        """Получение поста по slug"""
        return await self.get_one(Post.slug == slug)

    async def get_related(self, post: Post, limit: int = 3) -> List[Post]:
        """Опубликованные посты той же категории"""
        result = await self.session.execute(
            select(Post)
            .where(
                Post.id != post.id,
                Post.category == post.category,
                Post.status == ContentStatus.PUBLISHED.value
            )
            .order_by(Post.published_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def popular_tags(self, limit: int = 20) -> List[Dict[str, Any]]:
        """Самые популярные теги опубликованных постов"""
        result = await self.session.execute(
            select(Post.tags).where(Post.status == ContentStatus.PUBLISHED.value)
        )
        counter = Counter(tag for tags in result.scalars().all() for tag in tags or [])
        return [{"name": tag, "count": count} for tag, count in counter.most_common(limit)]
