from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

class Settings(BaseSettings):
    APP_NAME: str = "ALICE Bio Records"
    APP_VERSION: str = "0.1.0"

    # Database
    DATABASE_URL: str = Field(
        default="sqlite:///./alice_bio.db",
        description="SQLAlchemy database URL. Use Postgres in production.",
    )
    DATABASE_ECHO: bool = False

    # Identity store; set to "auth" when users live in Supabase's auth.users
    AUTH_USERS_SCHEMA: Optional[str] = Field(
        default=None,
        description="Schema of an externally managed users table. None means the table is managed here.",
    )

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
