import logging

from pydantic import model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str
    database_echo: bool = False
    database_auto_create: bool = True

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7

    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"

    api_prefix: str = "/api"
    frontend_url: str = "http://localhost:3000"

    # Ограничение запросов по IP (только /api)
    rate_limit_max: int = 100
    rate_limit_window_seconds: int = 15 * 60
    # X-Forwarded-For учитывается только за доверенным обратным прокси
    trust_proxy: bool = False

    max_request_size: int = 12 * 1024 * 1024
    max_upload_size: int = 10 * 1024 * 1024
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/uploads"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def check_jwt_secret(self):
        if self.environment == "production" and len(self.jwt_secret) < 32:
            logger.warning("JWT_SECRET should be at least 32 characters long in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
