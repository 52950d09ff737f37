from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv

# Load .env file explicitly
# Path from growth_crm/core/config.py to the project root .env
env_file = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_file)


class Settings(BaseSettings):
    APP_NAME: str = "Growth Accelerators CRM API"
    LOG_LEVEL: str = "INFO"

    # Allow all origins for development
    CORS_ORIGINS: List[str] = ["*"]

    # Record store
    SEED_SAMPLE_DATA: bool = True

    # Consultation intake
    MESSAGE_MIN_LENGTH: int = 10

    # Seeded admin user (skipped when no password is configured)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: Optional[str] = None

    # Email settings (SMTP - Gmail app password by default)
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_SECURE: bool = False
    SMTP_USER: Optional[str] = Field(
        None, validation_alias=AliasChoices("SMTP_USER", "GMAIL_USER")
    )
    SMTP_PASS: Optional[str] = Field(
        None, validation_alias=AliasChoices("SMTP_PASS", "GMAIL_APP_PASSWORD")
    )
    FROM_EMAIL: str = "georgie@thegrowthaccelerators.co.uk"
    NOTIFICATION_EMAIL: str = "georgie@thegrowthaccelerators.co.uk"

    model_config = SettingsConfigDict(
        env_file=env_file,
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="ignore",
        populate_by_name=True,
    )


# Create settings instance
settings = Settings()
