"""Configuration helpers for the news reader."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://newsdata.io/api/1/news"
DEFAULT_LANGUAGE = "en"


class ConfigError(ValueError):
    """Raised when required configuration is missing or malformed."""


@dataclass
class ReaderConfig:
    """Top-level configuration for the reader."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    default_language: str = DEFAULT_LANGUAGE
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def load_config(require_api_key: bool = True, dotenv: bool = True) -> ReaderConfig:
    """Load configuration from environment variables with sensible defaults.

    Values from a ``.env`` file in the working directory are loaded first
    unless ``dotenv`` is False; variables already set in the environment win.
    """

    if dotenv:
        load_dotenv()

    api_key = os.getenv("NEWSDATA_API_KEY") or None
    if require_api_key and not api_key:
        raise ConfigError("NEWSDATA_API_KEY is not set")

    base_url = os.getenv("NEWSDATA_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
    timeout = _float_env("NEWSDATA_TIMEOUT", "10")
    if timeout <= 0:
        raise ConfigError("NEWSDATA_TIMEOUT must be positive")

    default_language = os.getenv("DEFAULT_LANGUAGE", DEFAULT_LANGUAGE).strip().lower()
    if not default_language:
        raise ConfigError("DEFAULT_LANGUAGE must not be empty")

    return ReaderConfig(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        default_language=default_language,
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=_int_env("PORT", "8080"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["ConfigError", "ReaderConfig", "load_config"]
