from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user
from app.core.db import get_db
from app.db.models.user import User
from app.domains.identity.schemas import (
    PasswordChange, ProfileUpdate, Token, UserCreate, UserLogin, UserResponse
)
from app.domains.identity.services import AccountDeactivatedError, IdentityService
from app.domains.shared.schemas import ApiResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=ApiResponse[Token], status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Регистрация нового пользователя"""
    identity_service = IdentityService(db)

    try:
        user = await identity_service.register_user(user_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    token = Token(
        access_token=identity_service.issue_token(user),
        user=UserResponse.model_validate(user)
    )
    return ApiResponse(message="User registered successfully", data=token)


@router.post("/login", response_model=ApiResponse[Token])
async def login(
    login_data: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Вход пользователя"""
    identity_service = IdentityService(db)

    try:
        token = await identity_service.login_user(login_data)
    except AccountDeactivatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return ApiResponse(message="Login successful", data=Token(**token))


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(current_user: User = Depends(get_current_user)):
    """Данные текущего пользователя"""
    return ApiResponse(data=UserResponse.model_validate(current_user))


@router.put("/me", response_model=ApiResponse[UserResponse])
async def update_me(
    update_data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Обновление профиля текущего пользователя"""
    user = await IdentityService(db).update_profile(current_user, update_data)
    return ApiResponse(message="Profile updated successfully", data=UserResponse.model_validate(user))


@router.post("/change-password", response_model=ApiResponse[None])
async def change_password(
    password_data: PasswordChange,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Смена пароля"""
    try:
        await IdentityService(db).change_password(current_user, password_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="Password changed successfully")
