from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import get_optional_user, require_author, require_editor
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.posts.schemas import (
    LikesResponse, PostCreate, PostDetailResponse, PostListResponse, PostResponse, PostUpdate
)
from app.domains.posts.services import PostService
from app.domains.shared.enums import PostCategory
from app.domains.shared.schemas import ApiResponse, NamedCount

router = APIRouter(prefix="/posts", tags=["posts"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Post not found"
    )


@router.get("", response_model=ApiResponse[PostListResponse])
async def get_posts(
    params: ListParams = Depends(list_params(default_limit=10)),
    category: Optional[PostCategory] = Query(None),
    tag: Optional[str] = Query(None, max_length=100),
    featured: Optional[bool] = Query(None),
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка постов"""
    data = await PostService(db).list_posts(
        params,
        viewer,
        category=category.value if category else None,
        tag=tag,
        featured=featured
    )
    return ApiResponse(data=data)


@router.get("/categories/list", response_model=ApiResponse[List[NamedCount]])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Категории опубликованных постов"""
    return ApiResponse(data=await PostService(db).list_categories())


@router.get("/tags/popular", response_model=ApiResponse[List[NamedCount]])
async def get_popular_tags(
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Популярные теги"""
    return ApiResponse(data=await PostService(db).popular_tags(limit))


@router.get("/{slug}", response_model=ApiResponse[PostDetailResponse])
async def get_post(
    slug: str,
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение поста по slug"""
    post = await PostService(db).get_post_by_slug(slug, viewer)

    if not post:
        raise _not_found()

    return ApiResponse(data=post)


@router.post("", response_model=ApiResponse[PostResponse], status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: User = Depends(require_author),
    db: AsyncSession = Depends(get_db)
):
    """Создание нового поста"""
    try:
        post = await PostService(db).create_post(post_data, current_user)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="Post created successfully", data=post)


@router.put("/{post_id}", response_model=ApiResponse[PostResponse])
async def update_post(
    post_id: uuid.UUID,
    update_data: PostUpdate,
    current_user: User = Depends(require_author),
    db: AsyncSession = Depends(get_db)
):
    """Обновление поста"""
    try:
        post = await PostService(db).update_post(post_id, update_data, current_user)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except PermissionError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )

    if not post:
        raise _not_found()

    return ApiResponse(message="Post updated successfully", data=post)


@router.delete("/{post_id}", response_model=ApiResponse[None])
async def delete_post(
    post_id: uuid.UUID,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Удаление поста"""
    if not await PostService(db).delete_post(post_id):
        raise _not_found()

    return ApiResponse(message="Post deleted successfully")


@router.post("/{post_id}/like", response_model=ApiResponse[LikesResponse])
async def like_post(
    post_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Лайк поста"""
    likes = await PostService(db).like_post(post_id)

    if likes is None:
        raise _not_found()

    return ApiResponse(message="Post liked successfully", data=LikesResponse(likes=likes))
