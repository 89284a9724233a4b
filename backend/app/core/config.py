"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.logging import LogLevel


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default="INFO")
    port: int = Field(default=3000)

    # CORS - the portfolio frontend
    frontend_url: str = Field(default="http://localhost:8080")
    trust_proxy: bool = Field(default=False)

    # Database (absent = persistence disabled)
    database_url: Optional[str] = Field(default=None)
    db_timeout_seconds: float = Field(default=10.0, gt=0)

    # Email (absent credentials = notifications disabled)
    email_service: str = Field(default="gmail")
    email_user: Optional[str] = Field(default=None)
    email_pass: Optional[str] = Field(default=None)
    smtp_host: Optional[str] = Field(default=None)
    smtp_port: Optional[int] = Field(default=None)
    smtp_use_ssl: Optional[bool] = Field(default=None)
    notify_email: Optional[str] = Field(default=None)
    mail_timeout_seconds: float = Field(default=15.0, gt=0)
    signature_name: str = Field(default="Portfolio Owner")

    # Admin
    admin_token: Optional[str] = Field(default=None)
    admin_list_limit: int = Field(default=50, ge=1)

    # Rate limiting
    global_rate_limit_window_seconds: int = Field(default=15 * 60, gt=0)
    global_rate_limit_max: int = Field(default=100, ge=1)
    contact_rate_limit_window_seconds: int = Field(default=60 * 60, gt=0)
    contact_rate_limit_max: int = Field(default=5, ge=1)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def email_configured(self) -> bool:
        return bool(self.email_user and self.email_pass)

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def notification_address(self) -> Optional[str]:
        """Where operator notices go; defaults to the mail account itself."""
        return self.notify_email or self.email_user


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
