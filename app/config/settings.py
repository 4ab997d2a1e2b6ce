from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Firestore
    firebase_project_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "firebase_project_id", "next_public_firebase_project_id", "gcp_project_id"
        ),
    )
    gcp_service_account_key: Optional[str] = None  # JSON key as string or path
    firestore_database: Optional[str] = None  # None uses the "(default)" database

    # Communities
    default_community_id: str = "global-chat"

    # App
    app_name: str = "community-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
