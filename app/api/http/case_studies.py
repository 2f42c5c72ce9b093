from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import get_optional_user, require_admin, require_editor
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.case_studies.schemas import (
    CaseStudyCreate, CaseStudyDetailResponse, CaseStudyListResponse, CaseStudyResponse, CaseStudyUpdate
)
from app.domains.case_studies.services import CaseStudyService
from app.domains.shared.schemas import ApiResponse, NamedCount

router = APIRouter(prefix="/case-studies", tags=["case-studies"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Case study not found"
    )


@router.get("", response_model=ApiResponse[CaseStudyListResponse])
async def get_case_studies(
    params: ListParams = Depends(list_params(default_limit=9)),
    category: Optional[str] = Query(None, max_length=100),
    technology: Optional[str] = Query(None, max_length=100),
    featured: Optional[bool] = Query(None),
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение списка кейсов"""
    data = await CaseStudyService(db).list_case_studies(
        params,
        viewer,
        category=category,
        technology=technology,
        featured=featured
    )
    return ApiResponse(data=data)


@router.get("/categories/list", response_model=ApiResponse[List[NamedCount]])
async def get_categories(db: AsyncSession = Depends(get_db)):
    """Категории опубликованных кейсов"""
    return ApiResponse(data=await CaseStudyService(db).list_categories())


@router.get("/technologies/popular", response_model=ApiResponse[List[NamedCount]])
async def get_popular_technologies(
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Популярные технологии"""
    return ApiResponse(data=await CaseStudyService(db).popular_technologies(limit))


@router.get("/{slug}", response_model=ApiResponse[CaseStudyDetailResponse])
async def get_case_study(
    slug: str,
    viewer: Optional[User] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db)
):
    """Получение кейса по slug"""
    case_study = await CaseStudyService(db).get_case_study_by_slug(slug, viewer)

    if not case_study:
        raise _not_found()

    return ApiResponse(data=case_study)


@router.post("", response_model=ApiResponse[CaseStudyResponse], status_code=status.HTTP_201_CREATED)
async def create_case_study(
    case_study_data: CaseStudyCreate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Создание нового кейса"""
    try:
        case_study = await CaseStudyService(db).create_case_study(case_study_data, current_user)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="Case study created successfully", data=case_study)


@router.put("/{case_study_id}", response_model=ApiResponse[CaseStudyResponse])
async def update_case_study(
    case_study_id: uuid.UUID,
    update_data: CaseStudyUpdate,
    current_user: User = Depends(require_editor),
    db: AsyncSession = Depends(get_db)
):
    """Обновление кейса"""
    try:
        case_study = await CaseStudyService(db).update_case_study(case_study_id, update_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not case_study:
        raise _not_found()

    return ApiResponse(message="Case study updated successfully", data=case_study)


@router.delete("/{case_study_id}", response_model=ApiResponse[None])
async def delete_case_study(
    case_study_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Удаление кейса"""
    if not await CaseStudyService(db).delete_case_study(case_study_id):
        raise _not_found()

    return ApiResponse(message="Case study deleted successfully")
