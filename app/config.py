"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Application settings"""

    # Resend (email delivery)
    resend_api_key: str = ""
    from_email: str = ""
    to_email: str = ""
    from_name: str = "Website Inquiry"

    # Record store: "webhook" posts to an automation endpoint,
    # "sheets" appends directly through the Google Sheets API,
    # "none" runs email-only
    record_backend: Literal["webhook", "sheets", "none"] = "webhook"

    # Webhook relay
    record_webhook_url: str = ""
    webhook_success_field: str = "result"

    # Google Sheets
    google_sheet_id: str = ""
    google_sheet_name: str = "Form Submissions"
    google_service_account_file: str = ""
    google_service_account_base64: str = ""
    sheet_timezone: str = "America/New_York"

    # Application
    environment: str = "production"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    port: int = 5050

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
