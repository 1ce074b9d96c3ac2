"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    ``jwt_secret`` has no default: the application refuses to start without it.
    """

    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    token_ttl_days: int = Field(default=7, ge=1)

    seed_admin: bool = True
    seed_admin_email: str = "admin@zenly.com"
    seed_admin_password: str = Field(default="admin1234", min_length=6)
    seed_admin_name: str = "Admin"

    model_config = SettingsConfigDict(env_prefix="ZENLY_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
