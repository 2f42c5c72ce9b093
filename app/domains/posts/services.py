import logging
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import is_privileged
from app.db.models.post import Post
from app.db.models.user import User
from app.db.repositories.base import ListParams, json_array_contains
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.schemas import PostCreate, PostDetailResponse, PostResponse, PostUpdate
from app.domains.shared.enums import ContentStatus, UserRole

logger = logging.getLogger(__name__)

DUPLICATE_TITLE = "A post with this title already exists"
EXCERPT_LENGTH = 300


def default_excerpt(content: str) -> str:
    """Анонс из начала текста"""
    if len(content) <= EXCERPT_LENGTH:
        return content
    return content[:EXCERPT_LENGTH - 3] + "..."


class PostService:
    """Сервис для работы с постами блога"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.post_repository = PostRepository(session)

    async def list_posts(
        self,
        params: ListParams,
        viewer: Optional[User],
        category: Optional[str] = None,
        tag: Optional[str] = None,
        featured: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Список постов с фильтрами и статистикой"""
        scope = []
        if not is_privileged(viewer):
            scope.append(Post.status == ContentStatus.PUBLISHED.value)

        conditions = list(scope)
        if category:
            conditions.append(Post.category == category)
        if tag:
            conditions.append(json_array_contains(Post.tags, tag.lower()))
        if featured:
            conditions.append(Post.featured.is_(True))

        posts, total = await self.post_repository.paginate(conditions, params)

        return {
            "posts": [PostResponse.model_validate(post) for post in posts],
            "pagination": params.pagination(total),
            "stats": {
                "total": await self.post_repository.count(*scope),
                "published": await self.post_repository.count(
                    Post.status == ContentStatus.PUBLISHED.value, *scope
                ),
                "draft": await self.post_repository.count(Post.status == ContentStatus.DRAFT.value, *scope),
                "featured": await self.post_repository.count(Post.featured.is_(True), *scope)
            }
        }

    async def get_post_by_slug(self, slug: str, viewer: Optional[User]) -> Optional[PostDetailResponse]:
        """Получение поста по slug вместе с похожими постами"""
        post = await self.post_repository.get_by_slug(slug)

        if not post or (not post.is_published and not is_privileged(viewer)):
            return None

        if post.is_published:
            post = await self.post_repository.increment(post, "view_count")

        related = await self.post_repository.get_related(post)
        return PostDetailResponse(
            post=PostResponse.model_validate(post),
            related_posts=[PostResponse.model_validate(item) for item in related]
        )

    async def create_post(self, post_data: PostCreate, author: User) -> PostResponse:
        """Создание нового поста"""
        if await self.post_repository.value_exists("title", post_data.title):
            raise ValueError(DUPLICATE_TITLE)

        data = post_data.model_dump()
        if not data.get("excerpt"):
            data["excerpt"] = default_excerpt(post_data.content)

        post = await self.post_repository.create(Post(**data, author_id=author.id))
        logger.info("Post %s created by %s", post.id, author.id)
        return PostResponse.model_validate(post)

    async def update_post(self, post_id: uuid.UUID, update_data: PostUpdate, editor: User) -> Optional[PostResponse]:
        """Обновление поста (автор может менять только свои посты)"""
        post = await self.post_repository.get_by_id(post_id)
        if not post:
            return None

        if editor.role == UserRole.AUTHOR and post.author_id != editor.id:
            raise PermissionError("You can only edit your own posts")

        changes = update_data.model_dump(exclude_unset=True)
        title = changes.get("title")
        if title and title.lower() != post.title.lower():
            if await self.post_repository.value_exists("title", title, exclude_id=post.id):
                raise ValueError(DUPLICATE_TITLE)

        for field, value in changes.items():
            setattr(post, field, value)

        post = await self.post_repository.save(post)
        return PostResponse.model_validate(post)

    async def delete_post(self, post_id: uuid.UUID) -> bool:
        """Удаление поста"""
        post = await self.post_repository.get_by_id(post_id)
        if not post:
            return False

        await self.post_repository.delete(post)
        return True

    async def like_post(self, post_id: uuid.UUID) -> Optional[int]:
        """Лайк поста"""
        post = await self.post_repository.get_by_id(post_id)
        if not post:
            return None

        post = await self.post_repository.increment(post, "likes")
        return post.likes

    async def list_categories(self) -> List[Dict[str, Any]]:
        """Категории опубликованных постов с количеством"""
        return await self.post_repository.count_by(
            "category", Post.status == ContentStatus.PUBLISHED.value
        )

    async def popular_tags(self, limit: int = 20) -> List[Dict[str, Any]]:
        """Популярные теги"""
        return await self.post_repository.popular_tags(limit)
