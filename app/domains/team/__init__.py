from app.domains.team.schemas import (
    TeamMemberCreate, TeamMemberUpdate, TeamMemberPublicResponse, TeamMemberResponse,
    TeamListResponse, TeamAdminListResponse
)
from app.domains.team.services import TeamService

__all__ = [
    "TeamMemberCreate", "TeamMemberUpdate", "TeamMemberPublicResponse", "TeamMemberResponse",
    "TeamListResponse", "TeamAdminListResponse",
    "TeamService"
]
