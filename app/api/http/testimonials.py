from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import require_admin, require_editor
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.shared.enums import TestimonialStatus, TestimonialType
from app.domains.shared.schemas import ApiResponse
from app.domains.testimonials.schemas import (
    TestimonialAdminListResponse, TestimonialAdminResponse, TestimonialCreate,
    TestimonialListResponse, TestimonialResponse, TestimonialSubmit, TestimonialUpdate
)
from app.domains.testimonials.services import TestimonialService

router = APIRouter(prefix="/testimonials", tags=["testimonials"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Testimonial not found"
    )


@router.get("", response_model=ApiResponse[TestimonialListResponse])
async def get_testimonials(
    params: ListParams = Depends(list_params(default_limit=12)),
    testimonial_type: Optional[TestimonialType] = Query(None, alias="type"),
    rating: Optional[int] = Query(None, ge=1, le=5),
    featured: Optional[bool] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Одобренные публичные отзывы"""
    data = await TestimonialService(db).list_public(
        params,
        testimonial_type=testimonial_type.value if testimonial_type else None,
        rating=rating,
        featured=featured
    )
    return ApiResponse(data=data)


@router.get("/admin", response_model=ApiResponse[TestimonialAdminListResponse])
async def get_all_testimonials(
    params: ListParams = Depends(list_params(default_limit=20)),
    status_filter: Optional[TestimonialStatus] = Query(None, alias="status"),
    testimonial_type: Optional[TestimonialType] = Query(None, alias="type"),
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Все отзывы для администрирования"""
    data = await TestimonialService(db).list_admin(
        params,
        status=status_filter.value if status_filter else None,
        testimonial_type=testimonial_type.value if testimonial_type else None
    )
    return ApiResponse(data=data)


@router.post("/submit", response_model=ApiResponse[None])
async def submit_testimonial(
    testimonial_data: TestimonialSubmit,
    db: AsyncSession = Depends(get_db)
):
    """Публичная отправка отзыва на модерацию"""
    await TestimonialService(db).submit_testimonial(testimonial_data)
    return ApiResponse(message="Thank you for your testimonial! It will be reviewed before being published.")


@router.get("/{testimonial_id}", response_model=ApiResponse[TestimonialResponse])
async def get_testimonial(
    testimonial_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Получение публичного отзыва"""
    testimonial = await TestimonialService(db).get_public(testimonial_id)

    if not testimonial:
        raise _not_found()

    return ApiResponse(data=testimonial)


@router.post("", response_model=ApiResponse[TestimonialAdminResponse], status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    testimonial_data: TestimonialCreate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Создание отзыва"""
    testimonial = await TestimonialService(db).create_testimonial(testimonial_data)
    return ApiResponse(message="Testimonial created successfully", data=testimonial)


@router.put("/{testimonial_id}", response_model=ApiResponse[TestimonialAdminResponse])
async def update_testimonial(
    testimonial_id: uuid.UUID,
    update_data: TestimonialUpdate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Обновление отзыва"""
    try:
        testimonial = await TestimonialService(db).update_testimonial(testimonial_id, update_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not testimonial:
        raise _not_found()

    return ApiResponse(message="Testimonial updated successfully", data=testimonial)


@router.put("/{testimonial_id}/approve", response_model=ApiResponse[TestimonialAdminResponse])
async def approve_testimonial(
    testimonial_id: uuid.UUID,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Одобрение отзыва"""
    testimonial = await TestimonialService(db).moderate(testimonial_id, approve=True)

    if not testimonial:
        raise _not_found()

    return ApiResponse(message="Testimonial approved successfully", data=testimonial)


@router.put("/{testimonial_id}/reject", response_model=ApiResponse[TestimonialAdminResponse])
async def reject_testimonial(
    testimonial_id: uuid.UUID,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Отклонение отзыва"""
    testimonial = await TestimonialService(db).moderate(testimonial_id, approve=False)

    if not testimonial:
        raise _not_found()

    return ApiResponse(message="Testimonial rejected successfully", data=testimonial)


@router.delete("/{testimonial_id}", response_model=ApiResponse[None])
async def delete_testimonial(
    testimonial_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Удаление отзыва"""
    if not await TestimonialService(db).delete_testimonial(testimonial_id):
        raise _not_found()

    return ApiResponse(message="Testimonial deleted successfully")
