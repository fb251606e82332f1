"""Application settings and configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import Any, ClassVar, Dict, Optional


class Settings(BaseSettings):
    """Application settings with environment variable loading."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API settings
    PROJECT_NAME: str = "Syntax Club API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_STR: str = "/api/v1"

    # CORS
    CORS_ORIGINS: str = "*"
    CORS_HEADERS: str = "*"
    CORS_METHODS: str = "*"

    # Database
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "syntax_club"
    POSTGRES_PORT: str = "5432"
    SQLITE_PATH: str = "syntax_club.db"
    DATABASE_URI: Optional[str] = Field(default=None, validate_default=True)
    SQL_ECHO: bool = False

    # Database connection pool settings
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIRECTORY: str = "logs"
    LOG_MAX_BYTES: int = 10 * 1024 * 1024  # 10MB
    LOG_BACKUP_COUNT: int = 5
    SERVICE_NAME: str = "syntax-club-api"

    # Members
    DEFAULT_PAGE_SIZE: int = 20

    # Arvantis
    DEFAULT_CURRENCY: str = "INR"
    FEST_DEFAULT_NAME: str = "Arvantis"

    # Configure bleach for member and guest bios
    ALLOWED_TAGS: ClassVar[list[str]] = [
        "a", "b", "br", "code", "em", "i", "li", "ol", "p", "strong", "ul",
    ]

    ALLOWED_ATTRIBUTES: ClassVar[dict[str, list[str]]] = {
        "a": ["href", "title", "target", "rel"],
        "p": ["style"],
    }

    ALLOWED_CSS_PROPERTIES: ClassVar[list[str]] = [
        "text-align", "font-weight", "font-style", "color",
    ]

    # Allowed protocols for links
    ALLOWED_PROTOCOLS: ClassVar[list[str]] = ["http", "https", "mailto"]

    @field_validator("DATABASE_URI", mode="before")
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        """Build the async connection string from components."""
        if isinstance(v, str) and v:
            return v

        values: Dict[str, Any] = info.data
        host = values.get("POSTGRES_SERVER")
        if not host:
            return f"sqlite+aiosqlite:///{values.get('SQLITE_PATH', 'syntax_club.db')}"

        user = values.get("POSTGRES_USER", "")
        password = values.get("POSTGRES_PASSWORD", "")
        port = values.get("POSTGRES_PORT", "5432")
        db = values.get("POSTGRES_DB", "")

        auth = f"{user}:{password}" if password else user
        return f"postgresql+asyncpg://{auth}@{host}:{port}/{db}"

    @field_validator("API_V1_STR")
    def ensure_api_prefix_has_slash(cls, v: str) -> str:
        """Ensure API prefix starts with a slash."""
        if not v.startswith("/"):
            return f"/{v}"
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
