# -*- coding: utf-8 -*-
"""
Embed service configuration using Pydantic BaseSettings.
"""
from typing import Dict, List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigError(Exception):
    """Startup-time configuration error for an extractor."""

    pass


class MissingExtractorField(ConfigError):
    """A required field is missing from an extractor section."""

    def __init__(self, field: str):
        super().__init__(f"Missing extractor field: {field}")
        self.field = field


class InvalidExtractorField(ConfigError):
    """An extractor field holds a value that cannot be used."""

    def __init__(self, field: str):
        super().__init__(f"Invalid extractor field: {field}")
        self.field = field


class InvalidUserAgent(ConfigError):
    """A named user agent is missing or not a valid header value."""

    pass


def is_valid_header_value(value: str) -> bool:
    """Check that a string can be sent as an HTTP header value."""
    return all(c == "\t" or 0x20 <= ord(c) < 0x7F for c in value)


class Settings(BaseSettings):
    """
    Central service configuration loaded from environment variables.

    EXTRACTORS and USER_AGENTS are JSON objects when given through the
    environment, e.g. EXTRACTORS='{"furaffinity": {"a": "...", "b": "..."}}'.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8002

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Outbound HTTP client (seconds)
    HTTP_TIMEOUT: float = 10.0
    HTTP_CONNECT_TIMEOUT: float = 5.0
    MAX_CONNECTIONS: int = 100
    USER_AGENT: str = "Mozilla/5.0 (compatible; EmbedExtract/1.0)"

    # Named user agents, referenced by extractors with a "%name" key
    USER_AGENTS: Dict[str, str] = {
        "%browser": (
            "Mozilla/5.0 (X11; Linux x86_64; rv:131.0) Gecko/20100101 Firefox/131.0"
        ),
    }

    # Per-extractor sections. An absent section disables extractors that need one.
    EXTRACTORS: Dict[str, Dict[str, str]] = {}

    # Embeds
    MAX_EMBED_IMAGES: int = Field(default=4, ge=0)

    # API Documentation (disable in production for security)
    DOCS_ENABLED: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Request tracking
    REQUEST_ID_HEADER: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global configuration instance
settings = Settings()
