"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./msc_admin.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SupabaseSettings(BaseModel):
    url: Optional[str] = None
    anon_key: Optional[str] = None
    service_role_key: Optional[str] = None
    jwt_secret: Optional[str] = None
    jwt_audience: str = "authenticated"

    @property
    def configured(self) -> bool:
        return bool(self.url and self.service_role_key)


class AccessSettings(BaseModel):
    login_path: str = "/admin-login"
    default_role: str = "collab"
    role_cookie: str = "user_role"
    session_cookie: str = "sb-access-token"


class LoggingSettings(BaseModel):
    level: str = "INFO"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "MSC Admin"
    api_prefix: str = "/api"
    static_dir: Path = Path("msc_admin/web/static")
    template_dir: Path = Path("msc_admin/web/templates")
    cors_origins: list[str] = ["*"]

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    supabase: SupabaseSettings = SupabaseSettings()
    access: AccessSettings = AccessSettings()
    logging: LoggingSettings = LoggingSettings()

    # Cloudinary keeps its conventional flat variable names.
    cloudinary_cloud_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("cloudinary_cloud_name", "CLOUDINARY_CLOUD_NAME")
    )
    cloudinary_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("cloudinary_api_key", "CLOUDINARY_API_KEY")
    )
    cloudinary_api_secret: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("cloudinary_api_secret", "CLOUDINARY_API_SECRET")
    )

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def cloudinary_config_status(self) -> dict[str, bool]:
        return {
            "cloud_name": bool(self.cloudinary_cloud_name),
            "api_key": bool(self.cloudinary_api_key),
            "api_secret": bool(self.cloudinary_api_secret),
        }

    @property
    def cloudinary_configured(self) -> bool:
        return all(self.cloudinary_config_status.values())


@lru_cache()
def get_settings() -> Settings:
    return Settings()
