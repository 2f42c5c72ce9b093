import logging
from typing import Any, Dict, Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import utcnow
from app.db.models.contact import Contact
from app.db.repositories.base import ListParams
from app.db.repositories.contact_repository import ContactRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.contact.schemas import ContactCreate, ContactResponse, ContactUpdate
from app.domains.shared.enums import ContactPriority, ContactSource, ContactStatus

logger = logging.getLogger(__name__)


class ContactService:
    """Сервис для работы с обращениями через форму обратной связи"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.contact_repository = ContactRepository(session)
        self.user_repository = UserRepository(session)

    async def submit(
        self,
        data: ContactCreate,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None
    ) -> Contact:
        """Сохранение нового обращения"""
        contact = Contact(
            **data.model_dump(),
            ip_address=ip_address,
            user_agent=user_agent[:500] if user_agent else None,
            status=ContactStatus.NEW.value,
            priority=ContactPriority.MEDIUM.value,
            source=ContactSource.WEBSITE.value
        )
        contact = await self.contact_repository.create(contact)
        logger.info("Contact inquiry %s received (%s)", contact.id, contact.inquiry_type)
        return contact

    async def list_contacts(
        self,
        params: ListParams,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        inquiry_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """Список обращений со статистикой"""
        repo = self.contact_repository
        conditions = []
        if status:
            conditions.append(Contact.status == status)
        if priority:
            conditions.append(Contact.priority == priority)
        if inquiry_type:
            conditions.append(Contact.inquiry_type == inquiry_type)

        contacts, total = await repo.paginate(conditions, params)

        stats = {"total": await repo.count()}
        for contact_status in ContactStatus:
            stats[contact_status.value] = await repo.count(Contact.status == contact_status.value)
        stats["by_inquiry_type"] = await repo.count_by("inquiry_type")
        stats["by_priority"] = await repo.count_by("priority")

        return {
            "contacts": [ContactResponse.model_validate(contact) for contact in contacts],
            "pagination": params.pagination(total),
            "stats": stats
        }

    async def get_contact(self, contact_id: uuid.UUID) -> Optional[ContactResponse]:
        """Получение обращения (новое помечается прочитанным)"""
        contact = await self.contact_repository.get_by_id(contact_id)
        if not contact:
            return None

        if contact.status == ContactStatus.NEW:
            contact.status = ContactStatus.READ.value
            contact = await self.contact_repository.save(contact)

        return ContactResponse.model_validate(contact)

    async def update_contact(self, contact_id: uuid.UUID, update_data: ContactUpdate) -> Optional[ContactResponse]:
        """Обработка обращения"""
        contact = await self.contact_repository.get_by_id(contact_id)
        if not contact:
            return None

        changes = update_data.model_dump(exclude_unset=True)

        if "assigned_to" in changes:
            assignee_id = changes.pop("assigned_to")
            if assignee_id is not None and not await self.user_repository.get_by_id(assignee_id):
                raise ValueError("Assigned user not found")
            contact.assigned_to_id = assignee_id

        new_status = changes.get("status")
        if new_status == ContactStatus.REPLIED and contact.status != ContactStatus.REPLIED:
            contact.response_date = utcnow()

        for field, value in changes.items():
            setattr(contact, field, value)

        contact = await self.contact_repository.save(contact)
        return ContactResponse.model_validate(contact)

    async def delete_contact(self, contact_id: uuid.UUID) -> bool:
        """Удаление обращения"""
        contact = await self.contact_repository.get_by_id(contact_id)
        if not contact:
            return False

        await self.contact_repository.delete(contact)
        return True
