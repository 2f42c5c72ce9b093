import logging
from typing import Any, Dict, List, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.team import TeamMember
from app.db.repositories.base import ListParams
from app.db.repositories.team_repository import TeamRepository
from app.domains.shared.enums import TeamStatus
from app.domains.team.schemas import (
    TeamMemberCreate, TeamMemberPublicResponse, TeamMemberResponse, TeamMemberUpdate
)

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A team member with this name already exists"

PUBLIC_SCOPE = (
    TeamMember.status == TeamStatus.ACTIVE.value,
    TeamMember.is_public.is_(True),
)
ADMIN_SEARCH_FIELDS = ("name", "position", "email")


class TeamService:
    """Сервис для работы с командой"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.team_repository = TeamRepository(session)

    async def list_public(self, params: ListParams, department: Optional[str] = None) -> Dict[str, Any]:
        """Активные публичные участники команды"""
        conditions = list(PUBLIC_SCOPE)
        if department:
            conditions.append(TeamMember.department == department)

        members, total = await self.team_repository.paginate(conditions, params)

        return {
            "team_members": [TeamMemberPublicResponse.model_validate(member) for member in members],
            "pagination": params.pagination(total),
            "stats": {
                "total": await self.team_repository.count(*PUBLIC_SCOPE),
                "by_department": await self.team_repository.count_by("department", *PUBLIC_SCOPE)
            }
        }

    async def list_admin(
        self,
        params: ListParams,
        department: Optional[str] = None,
        status: Optional[str] = None
    ) -> Dict[str, Any]:
        """Все участники команды для администрирования"""
        repo = self.team_repository
        conditions = []
        if department:
            conditions.append(TeamMember.department == department)
        if status:
            conditions.append(TeamMember.status == status)

        members, total = await repo.paginate(conditions, params, search_fields=ADMIN_SEARCH_FIELDS)

        return {
            "team_members": [TeamMemberResponse.model_validate(member) for member in members],
            "pagination": params.pagination(total),
            "stats": {
                "total": await repo.count(),
                "active": await repo.count(TeamMember.status == TeamStatus.ACTIVE.value),
                "inactive": await repo.count(TeamMember.status == TeamStatus.INACTIVE.value),
                "alumni": await repo.count(TeamMember.status == TeamStatus.ALUMNI.value),
                "by_department": await repo.count_by("department")
            }
        }

    async def get_public(self, identifier: str) -> Optional[TeamMemberPublicResponse]:
        """Публичный профиль по slug или id"""
        member = await self.team_repository.get_by_identifier(identifier, *PUBLIC_SCOPE)
        return TeamMemberPublicResponse.model_validate(member) if member else None

    async def create_member(self, data: TeamMemberCreate) -> TeamMemberResponse:
        """Добавление участника команды"""
        if await self.team_repository.value_exists("name", data.name):
            raise ValueError(DUPLICATE_NAME)

        member = await self.team_repository.create(TeamMember(**data.model_dump()))
        logger.info("Team member %s created", member.id)
        return TeamMemberResponse.model_validate(member)

    async def update_member(self, member_id: uuid.UUID, update_data: TeamMemberUpdate) -> Optional[TeamMemberResponse]:
        """Обновление участника команды"""
        member = await self.team_repository.get_by_id(member_id)
        if not member:
            return None

        changes = update_data.model_dump(exclude_unset=True)
        name = changes.get("name")
        if name and name.lower() != member.name.lower():
            if await self.team_repository.value_exists("name", name, exclude_id=member.id):
                raise ValueError(DUPLICATE_NAME)

        for field, value in changes.items():
            setattr(member, field, value)

        member = await self.team_repository.save(member)
        return TeamMemberResponse.model_validate(member)

    async def delete_member(self, member_id: uuid.UUID) -> bool:
        """Удаление участника команды"""
        member = await self.team_repository.get_by_id(member_id)
        if not member:
            return False

        await self.team_repository.delete(member)
        return True

    async def list_departments(self) -> List[Dict[str, Any]]:
        """Отделы с количеством публичных участников"""
        return await self.team_repository.count_by("department", *PUBLIC_SCOPE)
