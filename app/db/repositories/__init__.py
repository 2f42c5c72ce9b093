from app.db.repositories.base import BaseRepository, ListParams
from app.db.repositories.user_repository import UserRepository
from app.db.repositories.page_repository import PageRepository
from app.db.repositories.post_repository import PostRepository
from app.db.repositories.case_study_repository import CaseStudyRepository
from app.db.repositories.testimonial_repository import TestimonialRepository
from app.db.repositories.team_repository import TeamRepository
from app.db.repositories.contact_repository import ContactRepository
from app.db.repositories.media_repository import MediaRepository

__all__ = [
    "BaseRepository",
    "ListParams",
    "UserRepository",
    "PageRepository",
    "PostRepository",
    "CaseStudyRepository",
    "TestimonialRepository",
    "TeamRepository",
    "ContactRepository",
    "MediaRepository"
]
