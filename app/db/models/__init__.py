from app.db.models.user import User
from app.db.models.page import Page, SiteSettings
from app.db.models.post import Post
from app.db.models.case_study import CaseStudy
from app.db.models.testimonial import Testimonial
from app.db.models.team import TeamMember
from app.db.models.contact import Contact
from app.db.models.media import Media

__all__ = [
    "User",
    "Page",
    "SiteSettings",
    "Post",
    "CaseStudy",
    "Testimonial",
    "TeamMember",
    "Contact",
    "Media"
]
