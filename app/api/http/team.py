from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import require_admin
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.shared.enums import Department, SortOrder, TeamStatus
from app.domains.shared.schemas import ApiResponse, NamedCount
from app.domains.team.schemas import (
    TeamAdminListResponse, TeamListResponse, TeamMemberCreate,
    TeamMemberPublicResponse, TeamMemberResponse, TeamMemberUpdate
)
from app.domains.team.services import TeamService

router = APIRouter(prefix="/team", tags=["team"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Team member not found"
    )


@router.get("", response_model=ApiResponse[TeamListResponse])
async def get_team(
    params: ListParams = Depends(list_params(default_limit=20, default_order=SortOrder.ASC)),
    department: Optional[Department] = Query(None),
    db: AsyncSession = Depends(get_db)
):
    """Публичный список команды"""
    data = await TeamService(db).list_public(
        params,
        department=department.value if department else None
    )
    return ApiResponse(data=data)


@router.get("/admin", response_model=ApiResponse[TeamAdminListResponse])
async def get_all_team_members(
    params: ListParams = Depends(list_params(default_limit=20, default_order=SortOrder.ASC)),
    department: Optional[Department] = Query(None),
    status_filter: Optional[TeamStatus] = Query(None, alias="status"),
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Все участники команды для администрирования"""
    data = await TeamService(db).list_admin(
        params,
        department=department.value if department else None,
        status=status_filter.value if status_filter else None
    )
    return ApiResponse(data=data)


@router.get("/departments/list", response_model=ApiResponse[List[NamedCount]])
async def get_departments(db: AsyncSession = Depends(get_db)):
    """Отделы с количеством участников"""
    return ApiResponse(data=await TeamService(db).list_departments())


@router.get("/{identifier}", response_model=ApiResponse[TeamMemberPublicResponse])
async def get_team_member(
    identifier: str,
    db: AsyncSession = Depends(get_db)
):
    """Получение участника команды по slug или id"""
    member = await TeamService(db).get_public(identifier)

    if not member:
        raise _not_found()

    return ApiResponse(data=member)


@router.post("", response_model=ApiResponse[TeamMemberResponse], status_code=status.HTTP_201_CREATED)
async def create_team_member(
    member_data: TeamMemberCreate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Добавление участника команды"""
    try:
        member = await TeamService(db).create_member(member_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="Team member created successfully", data=member)


@router.put("/{member_id}", response_model=ApiResponse[TeamMemberResponse])
async def update_team_member(
    member_id: uuid.UUID,
    update_data: TeamMemberUpdate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Обновление участника команды"""
    try:
        member = await TeamService(db).update_member(member_id, update_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not member:
        raise _not_found()

    return ApiResponse(message="Team member updated successfully", data=member)


@router.delete("/{member_id}", response_model=ApiResponse[None])
async def delete_team_member(
    member_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Удаление участника команды"""
    if not await TeamService(db).delete_member(member_id):
        raise _not_found()

    return ApiResponse(message="Team member deleted successfully")
