from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..modules.text.infrastructure.http_typograf import DEFAULT_ENDPOINT_URL, DEFAULT_TIMEOUT_SECONDS


class TypografSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    endpoint_url: str = Field(DEFAULT_ENDPOINT_URL, alias="TYPOGRAF_ENDPOINT_URL")
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, le=120, alias="TYPOGRAF_TIMEOUT_SECONDS")
    # Locale of the resource table holding the response pattern
    resource_locale: Optional[str] = Field(None, alias="TYPOGRAF_RESOURCE_LOCALE")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")


def configure_logging(settings: TypografSettings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
