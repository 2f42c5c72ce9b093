from app.domains.case_studies.schemas import (
    CaseStudyBase, CaseStudyCreate, CaseStudyUpdate, CaseStudyResponse,
    CaseStudyDetailResponse, CaseStudyStats, CaseStudyListResponse
)
from app.domains.case_studies.services import CaseStudyService

__all__ = [
    "CaseStudyBase", "CaseStudyCreate", "CaseStudyUpdate", "CaseStudyResponse",
    "CaseStudyDetailResponse", "CaseStudyStats", "CaseStudyListResponse",
    "CaseStudyService"
]
