"""Environment backed settings for the URL builder."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from imgproxy_url.services.url_builder import UrlBuilder

DEFAULT_BASE_URL = "http://localhost:8080"


class _Settings(BaseSettings):
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="IMGPROXY_BASE_URL")
    key: Optional[str] = Field(default=None, alias="IMGPROXY_KEY")
    salt: Optional[str] = Field(default=None, alias="IMGPROXY_SALT")
    encode: bool = Field(default=True, alias="IMGPROXY_ENCODE")
    signature: Optional[str] = Field(default=None, alias="IMGPROXY_SIGNATURE")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached settings."""

    return _Settings()  # type: ignore[call-arg]


@lru_cache(maxsize=1)
def get_url_builder() -> UrlBuilder:
    """Return a builder configured from the environment.

    Raises :class:`imgproxy_url.errors.FormatError` when the key or salt is
    not hex.
    """

    settings = get_settings()
    return UrlBuilder(
        settings.base_url,
        key=settings.key,
        salt=settings.salt,
        encode=settings.encode,
        signature=settings.signature,
    )


def reset_settings_cache() -> None:
    """Clear cached settings and builder (primarily for tests)."""

    get_settings.cache_clear()
    get_url_builder.cache_clear()


__all__ = ["DEFAULT_BASE_URL", "get_settings", "get_url_builder", "reset_settings_cache"]
