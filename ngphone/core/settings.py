from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="ngphone API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cache_capacity: int = Field(default=1000, ge=1, alias="PHONE_CACHE_CAPACITY")
    cache_key: Literal["raw", "canonical"] = Field(default="raw", alias="PHONE_CACHE_KEY")
    default_format: Literal["local", "international", "e164"] = Field(
        default="e164",
        alias="PHONE_DEFAULT_FORMAT",
    )
    redact_phone_logs: bool = Field(default=True, alias="REDACT_PHONE_LOGS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
