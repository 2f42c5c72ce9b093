from typing import Optional
import uuid

from app.db.models.team import TeamMember
from app.db.repositories.base import BaseRepository


class TeamRepository(BaseRepository[TeamMember]):
    """Репозиторий для работы с командой"""

    model = TeamMember
    search_fields = ("name", "position", "bio")
    sortable_fields = ("order", "name", "position", "department", "experience", "joined_date", "created_at")
    default_sort = "order"
    secondary_sort = (("name", "asc"),)

    async def get_by_identifier(self, identifier: str, *conditions) -> Optional[TeamMember]:
        """Поиск сначала по slug, затем по id"""
        member = await self.get_one(TeamMember.slug == identifier, *conditions)
        if member:
            return member

        try:
            member_id = uuid.UUID(identifier)
        except ValueError:
            return None
        return await self.get_one(TeamMember.id == member_id, *conditions)
