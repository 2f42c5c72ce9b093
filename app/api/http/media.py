from fastapi import APIRouter, Depends, File, Form, HTTPException, status, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import require_editor
from app.core.config import settings
from app.core.db import get_db
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.media.schemas import MediaListResponse, MediaResponse
from app.domains.media.services import MediaService
from app.domains.media.storage import MediaStorage, get_media_storage
from app.domains.shared.enums import MediaCategory
from app.domains.shared.schemas import ApiResponse

router = APIRouter(prefix="/media", tags=["media"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Media not found"
    )


@router.post("/upload", response_model=ApiResponse[MediaResponse], status_code=status.HTTP_201_CREATED)
async def upload_media(
    file: Optional[UploadFile] = File(None),
    alt: Optional[str] = Form(None, max_length=255),
    title: Optional[str] = Form(None, max_length=100),
    description: Optional[str] = Form(None, max_length=500),
    tags: Optional[str] = Form(None),
    is_public: bool = Form(True),
    current_user: User = Depends(require_editor),
    storage: MediaStorage = Depends(get_media_storage),
    db: AsyncSession = Depends(get_db)
):
    """Загрузка файла"""
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    service = MediaService(db, storage)
    # Читаем на байт больше лимита, чтобы обнаружить превышение
    data = await file.read(settings.max_upload_size + 1)

    try:
        media = await service.upload(
            original_name=file.filename,
            mimetype=file.content_type or "application/octet-stream",
            data=data,
            uploader=current_user,
            alt=alt,
            title=title,
            description=description,
            tags=tags.split(",") if tags else None,
            is_public=is_public
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return ApiResponse(message="File uploaded successfully", data=media)


@router.get("", response_model=ApiResponse[MediaListResponse])
async def get_media_files(
    params: ListParams = Depends(list_params(default_limit=20)),
    category: Optional[MediaCategory] = Query(None),
    current_user: User = Depends(require_editor),
    storage: MediaStorage = Depends(get_media_storage),
    db: AsyncSession = Depends(get_db)
):
    """Список медиафайлов"""
    data = await MediaService(db, storage).list_media(
        params,
        category=category.value if category else None
    )
    return ApiResponse(data=data)


@router.get("/{media_id}", response_model=ApiResponse[MediaResponse])
async def get_media(
    media_id: uuid.UUID,
    current_user: User = Depends(require_editor),
    storage: MediaStorage = Depends(get_media_storage),
    db: AsyncSession = Depends(get_db)
):
    """Получение медиафайла"""
    media = await MediaService(db, storage).get_media(media_id)

    if not media:
        raise _not_found()

    return ApiResponse(data=media)


@router.delete("/{media_id}", response_model=ApiResponse[None])
async def delete_media(
    media_id: uuid.UUID,
    current_user: User = Depends(require_editor),
    storage: MediaStorage = Depends(get_media_storage),
    db: AsyncSession = Depends(get_db)
):
    """Удаление медиафайла"""
    if not await MediaService(db, storage).delete_media(media_id):
        raise _not_found()

    return ApiResponse(message="Media deleted successfully")
