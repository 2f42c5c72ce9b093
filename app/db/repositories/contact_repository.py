from app.db.models.contact import Contact
from app.db.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """Репозиторий для работы с обращениями"""

    model = Contact
    search_fields = ("name", "email", "company", "subject", "message")
    sortable_fields = ("created_at", "updated_at", "name", "email", "status", "priority", "follow_up_date")
