from app.domains.pages.schemas import (
    PageBase, PageCreate, PageUpdate, PageResponse, PageStats, PageListResponse
)
from app.domains.pages.services import PageService

__all__ = [
    "PageBase", "PageCreate", "PageUpdate", "PageResponse", "PageStats", "PageListResponse",
    "PageService"
]
