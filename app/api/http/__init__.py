from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.users import router as users_router
from app.api.http.pages import router as pages_router
from app.api.http.posts import router as posts_router
from app.api.http.case_studies import router as case_studies_router
from app.api.http.testimonials import router as testimonials_router
from app.api.http.team import router as team_router
from app.api.http.contact import router as contact_router
from app.api.http.media import router as media_router

__all__ = [
    "health_router",
    "auth_router",
    "users_router",
    "pages_router",
    "posts_router",
    "case_studies_router",
    "testimonials_router",
    "team_router",
    "contact_router",
    "media_router"
]
