from typing import Optional

from fastapi import Query

from app.db.repositories.base import ListParams
from app.domains.shared.enums import SortOrder

MAX_LIMIT = 100


def list_params(default_limit: int = 10, default_order: SortOrder = SortOrder.DESC):
    """Зависимость: параметры пагинации, поиска и сортировки из query string"""

    def dependency(
        page: int = Query(1, ge=1),
        limit: int = Query(default_limit, ge=1, le=MAX_LIMIT),
        search: Optional[str] = Query(None, max_length=200),
        sort: Optional[str] = Query(None, max_length=50),
        order: SortOrder = Query(default_order)
    ) -> ListParams:
        return ListParams(
            page=page,
            limit=limit,
            search=search.strip() if search and search.strip() else None,
            sort=sort,
            order=order.value
        )

    return dependency
