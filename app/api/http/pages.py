from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import get_optional_user, require_admin, require_editor
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.pages.schemas import PageCreate, PageListResponse, PageResponse, PageUpdate
from app.domains.pages.services import PageService
from app.domains.shared.enums import PageType
from app.domains.shared.schemas import ApiResponse

router = APIRouter(prefix="/pages", tags=["pages"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Page not found"
    )


@router.get("", response_model=ApiResponse[PageListResponse])
async def get_pages(
    params: ListParams = Depends(list_params(default_limit=10)),
    page_type: Optional[PageType] = Query(None),
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка страниц"""
    data = await PageService(db).list_pages(
        params,
        viewer,
        page_type=page_type.value if page_type else None
    )
    return ApiResponse(data=data)


@router.get("/special/home", response_model=ApiResponse[PageResponse])
async def get_home_page(db: AsyncSession = Depends(get_db)):
    """Получение главной страницы"""
    page = await PageService(db).get_home_page()

    if not page:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Home page not found"
        )

    return ApiResponse(data=page)


@router.get("/{slug}", response_model=ApiResponse[PageResponse])
async def get_page(
    slug: str,
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение страницы по slug"""
    page = await PageService(db).get_page_by_slug(slug, viewer)

    if not page:
        raise _not_found()

    return ApiResponse(data=page)


@router.post("", response_model=ApiResponse[PageResponse], status_code=status.HTTP_201_CREATED)
async def create_page(
    page_data: PageCreate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Создание новой страницы"""
    try:
        page = await PageService(db).create_page(page_data, current_user)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="Page created successfully", data=page)


@router.put("/{page_id}", response_model=ApiResponse[PageResponse])
async def update_page(
    page_id: uuid.UUID,
    update_data: PageUpdate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Обновление страницы"""
    try:
        page = await PageService(db).update_page(page_id, update_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not page:
        raise _not_found()

    return ApiResponse(message="Page updated successfully", data=page)


@router.delete("/{page_id}", response_model=ApiResponse[None])
async def delete_page(
    page_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Удаление страницы"""
    if not await PageService(db).delete_page(page_id):
        raise _not_found()

    return ApiResponse(message="Page deleted successfully")
