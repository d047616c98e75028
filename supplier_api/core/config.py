
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Supplier API"
    app_env: str = "development"
    frontend_url: str = "*"

    # Database (SQL Server via aioodbc, Postgres via asyncpg, or SQLite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./suppliers_dev.db",
        alias="DATABASE_URL",
    )
    db_pool_size: int = Field(default=5, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=10, alias="DB_MAX_OVERFLOW")
    verify_schema_on_startup: bool = Field(
        default=True, alias="VERIFY_SCHEMA_ON_STARTUP",
    )  # Fail fast when the Suppliers table is missing mapped columns

    # HTTP surface
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE")

    # When false, LastEdited stays null until the first update
    stamp_last_edited_on_create: bool = Field(
        default=False, alias="STAMP_LAST_EDITED_ON_CREATE",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
