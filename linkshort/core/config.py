from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

# Width of the links.short_url column
MAX_SHORT_CODE_LENGTH = 32

class Settings(BaseSettings):
    PROJECT_NAME: str = "Link Shortener"

    # Store (DATABASE_URL wins over the POSTGRES_* parts when set)
    DATABASE_URL: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "linkshort"

    # Public prefix for short links, e.g. https://sho.rt. Falls back to the request host.
    BASE_URL: Optional[str] = None

    SHORT_CODE_LENGTH: int = Field(13, ge=1, le=MAX_SHORT_CODE_LENGTH)
    SHORT_CODE_MAX_ATTEMPTS: int = Field(5, ge=1)

    TRUST_FORWARDED_FOR: bool = True
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:"
            f"{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    class Config:
        env_file = ".env"

settings = Settings()
