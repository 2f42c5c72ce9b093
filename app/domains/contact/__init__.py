from app.domains.contact.schemas import (
    ContactCreate, ContactUpdate, ContactSubmitted, ContactResponse, ContactListResponse
)
from app.domains.contact.services import ContactService

__all__ = [
    "ContactCreate", "ContactUpdate", "ContactSubmitted", "ContactResponse", "ContactListResponse",
    "ContactService"
]
