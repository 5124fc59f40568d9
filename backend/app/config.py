from pydantic_settings import BaseSettings
from typing import List, Optional
from pydantic import model_validator


DEFAULT_SECRET_KEY = "chemledger-super-secret-key-change-in-production"
DEFAULT_ADMIN_SECRET = "chemledger-admin-registration-secret"


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./chemledger.db"
    ENVIRONMENT: str = "development"
    AUTO_CREATE_TABLES: bool = True
    SECRET_KEY: str = DEFAULT_SECRET_KEY
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    ADMIN_REGISTRATION_SECRET: str = DEFAULT_ADMIN_SECRET
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    DEBUG: bool = True
    APP_NAME: str = "ChemLedger"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    ENABLE_REQUEST_ID: bool = True
    ENABLE_REQUEST_LOGGING: bool = True
    ENABLE_SECURITY_HEADERS: bool = True
    STRICT_TRANSPORT_SECURITY_SECONDS: int = 31536000
    READINESS_CHECK_DATABASE: bool = True

    # Dashboard alerting
    CERTIFICATION_EXPIRY_WINDOW_DAYS: int = 30
    CERTIFICATION_CRITICAL_DAYS: int = 7
    DASHBOARD_ALERT_ORDER: str = "severity"
    DASHBOARD_ALERT_LIMIT: Optional[int] = None
    RECENT_BATCHES_LIMIT: int = 5

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in {"prod", "production"}

    @model_validator(mode="after")
    def validate_alerting(self):
        if self.DASHBOARD_ALERT_ORDER not in {"severity", "severity_date"}:
            raise ValueError("DASHBOARD_ALERT_ORDER must be 'severity' or 'severity_date'.")
        if self.DASHBOARD_ALERT_LIMIT is not None and self.DASHBOARD_ALERT_LIMIT < 1:
            raise ValueError("DASHBOARD_ALERT_LIMIT must be positive when set.")
        if not 0 <= self.CERTIFICATION_CRITICAL_DAYS <= self.CERTIFICATION_EXPIRY_WINDOW_DAYS:
            raise ValueError("CERTIFICATION_CRITICAL_DAYS must fall inside the expiry window.")
        return self

    @model_validator(mode="after")
    def validate_production_safety(self):
        if not self.is_production:
            return self

        if "sqlite" in self.DATABASE_URL.lower():
            raise ValueError("SQLite is not allowed when ENVIRONMENT is production.")

        if self.SECRET_KEY == DEFAULT_SECRET_KEY:
            raise ValueError("Default SECRET_KEY is not allowed in production.")

        if self.ADMIN_REGISTRATION_SECRET == DEFAULT_ADMIN_SECRET:
            raise ValueError("Default ADMIN_REGISTRATION_SECRET is not allowed in production.")

        if self.AUTO_CREATE_TABLES:
            raise ValueError("AUTO_CREATE_TABLES must be false in production; use Alembic migrations.")

        return self


settings = Settings()
