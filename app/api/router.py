from fastapi import APIRouter

from app.api.http import (
    auth_router, case_studies_router, contact_router, health_router, media_router,
    pages_router, posts_router, team_router, testimonials_router, users_router
)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(pages_router)
api_router.include_router(posts_router)
api_router.include_router(media_router)
api_router.include_router(contact_router)
api_router.include_router(case_studies_router)
api_router.include_router(team_router)
api_router.include_router(testimonials_router)
