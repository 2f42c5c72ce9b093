from fastapi import APIRouter, Depends, HTTPException, Request, status, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from app.api.http.params import list_params
from app.core.auth import require_admin
from app.core.config import settings
from app.core.db import get_db
from app.core.middleware import client_ip
from app.db.models.user import User
from app.db.repositories.base import ListParams
from app.domains.contact.schemas import (
    ContactCreate, ContactListResponse, ContactResponse, ContactSubmitted, ContactUpdate
)
from app.domains.contact.services import ContactService
from app.domains.shared.enums import ContactPriority, ContactStatus, InquiryType
from app.domains.shared.schemas import ApiResponse

router = APIRouter(prefix="/contact", tags=["contact"])


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Contact not found"
    )


@router.post("", response_model=ApiResponse[ContactSubmitted])
async def submit_contact(
    contact_data: ContactCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Отправка формы обратной связи"""
    contact = await ContactService(db).submit(
        contact_data,
        ip_address=client_ip(request, settings.trust_proxy),
        user_agent=request.headers.get("user-agent")
    )

    return ApiResponse(
        message="Thank you for your message. We will get back to you soon!",
        data=ContactSubmitted(
            id=contact.id,
            name=contact.name,
            email=contact.email,
            subject=contact.subject
        )
    )


@router.get("", response_model=ApiResponse[ContactListResponse])
async def get_contacts(
    params: ListParams = Depends(list_params(default_limit=20)),
    status_filter: Optional[ContactStatus] = Query(None, alias="status"),
    priority: Optional[ContactPriority] = Query(None),
    inquiry_type: Optional[InquiryType] = Query(None),
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Список обращений"""
    data = await ContactService(db).list_contacts(
        params,
        status=status_filter.value if status_filter else None,
        priority=priority.value if priority else None,
        inquiry_type=inquiry_type.value if inquiry_type else None
    )
    return ApiResponse(data=data)


@router.get("/{contact_id}", response_model=ApiResponse[ContactResponse])
async def get_contact(
    contact_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Получение обращения"""
    contact = await ContactService(db).get_contact(contact_id)

    if not contact:
        raise _not_found()

    return ApiResponse(data=contact)


@router.put("/{contact_id}", response_model=ApiResponse[ContactResponse])
async def update_contact(
    contact_id: uuid.UUID,
    update_data: ContactUpdate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Обработка обращения"""
    try:
        contact = await ContactService(db).update_contact(contact_id, update_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    if not contact:
        raise _not_found()

    return ApiResponse(message="Contact updated successfully", data=contact)


@router.delete("/{contact_id}", response_model=ApiResponse[None])
async def delete_contact(
    contact_id: uuid.UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db)
):
    """Удаление обращения"""
    if not await ContactService(db).delete_contact(contact_id):
        raise _not_found()

    return ApiResponse(message="Contact deleted successfully")
