from app.domains.identity.schemas import (
    UserBase, UserCreate, UserLogin, ProfileUpdate, UserAdminUpdate,
    UserResponse, Token, PasswordChange, UserListResponse
)
from app.domains.identity.services import IdentityService, AccountDeactivatedError

__all__ = [
    "UserBase", "UserCreate", "UserLogin", "ProfileUpdate", "UserAdminUpdate",
    "UserResponse", "Token", "PasswordChange", "UserListResponse",
    "IdentityService", "AccountDeactivatedError"
]
