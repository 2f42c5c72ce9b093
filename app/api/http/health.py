from fastapi import APIRouter

from app.core.config import settings
from app.db.base import utcnow

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Проверка доступности API"""
    return {
        "success": True,
        "message": "CMS API is running",
        "data": {
            "timestamp": utcnow().isoformat(),
            "environment": settings.environment
        }
    }
