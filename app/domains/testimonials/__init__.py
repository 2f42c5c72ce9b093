from app.domains.testimonials.schemas import (
    TestimonialSubmit, TestimonialCreate, TestimonialUpdate, TestimonialResponse,
    TestimonialAdminResponse, TestimonialListResponse, TestimonialAdminListResponse
)
from app.domains.testimonials.services import TestimonialService

__all__ = [
    "TestimonialSubmit", "TestimonialCreate", "TestimonialUpdate", "TestimonialResponse",
    "TestimonialAdminResponse", "TestimonialListResponse", "TestimonialAdminListResponse",
    "TestimonialService"
]
