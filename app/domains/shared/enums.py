import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    EDITOR = "editor"
    AUTHOR = "author"
    VIEWER = "viewer"


class ContentStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class PageType(str, enum.Enum):
    HOME = "home"
    ABOUT = "about"
    SERVICES = "services"
    CONTACT = "contact"
    FAQ = "faq"
    CAREERS = "careers"
    CUSTOM = "custom"


class PostCategory(str, enum.Enum):
    NEWS = "news"
    INSIGHTS = "insights"
    TECHNOLOGY = "technology"
    COMPANY = "company"
    TUTORIALS = "tutorials"
    ANNOUNCEMENTS = "announcements"


class TestimonialStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TestimonialType(str, enum.Enum):
    CLIENT = "client"
    EMPLOYEE = "employee"
    PARTNER = "partner"
    GENERAL = "general"


class TestimonialSource(str, enum.Enum):
    WEBSITE = "website"
    EMAIL = "email"
    PHONE = "phone"
    LINKEDIN = "linkedin"
    REFERRAL = "referral"
    OTHER = "other"


class ProjectCategory(str, enum.Enum):
    WEB_DEVELOPMENT = "web-development"
    MOBILE_APP = "mobile-app"
    DESIGN = "design"
    CONSULTING = "consulting"
    MAINTENANCE = "maintenance"
    OTHER = "other"


class Department(str, enum.Enum):
    LEADERSHIP = "leadership"
    DEVELOPMENT = "development"
    DESIGN = "design"
    MARKETING = "marketing"
    SALES = "sales"
    OPERATIONS = "operations"


class TeamStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ALUMNI = "alumni"


class LanguageProficiency(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    NATIVE = "native"


class ContactStatus(str, enum.Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    CLOSED = "closed"


class ContactPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ContactSource(str, enum.Enum):
    WEBSITE = "website"
    REFERRAL = "referral"
    SOCIAL = "social"
    EMAIL = "email"
    PHONE = "phone"
    OTHER = "other"


class InquiryType(str, enum.Enum):
    GENERAL = "general"
    QUOTE = "quote"
    SUPPORT = "support"
    PARTNERSHIP = "partnership"
    CAREER = "career"
    OTHER = "other"


class Budget(str, enum.Enum):
    UNDER_5K = "under-5k"
    FROM_5K_TO_10K = "5k-10k"
    FROM_10K_TO_25K = "10k-25k"
    FROM_25K_TO_50K = "25k-50k"
    FROM_50K_TO_100K = "50k-100k"
    ABOVE_100K = "above-100k"
    NOT_SPECIFIED = "not-specified"


class Timeline(str, enum.Enum):
    ASAP = "asap"
    ONE_MONTH = "1-month"
    TWO_TO_THREE_MONTHS = "2-3-months"
    THREE_TO_SIX_MONTHS = "3-6-months"
    SIX_TO_TWELVE_MONTHS = "6-12-months"
    FLEXIBLE = "flexible"


class ServiceKind(str, enum.Enum):
    WEB_DEVELOPMENT = "web-development"
    MOBILE_APP = "mobile-app"
    UI_UX_DESIGN = "ui-ux-design"
    BRANDING = "branding"
    SEO = "seo"
    MAINTENANCE = "maintenance"
    CONSULTING = "consulting"
    OTHER = "other"


class MediaCategory(str, enum.Enum):
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    OTHER = "other"


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"
