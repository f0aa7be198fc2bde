"""
Acquasitions Settings

Configuration management using pydantic settings.
Loaded once at startup from environment variables (no prefix) and passed
explicitly to the application factory and the entrypoint.
"""

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """
    Server configuration settings.

    Environment variables:
    - PORT: Network port to bind (default: 3000; unset, empty, unparsable
      or out-of-range values fall back to the default)
    - HOST: Bind address (default: 0.0.0.0)
    - LOG_LEVEL: Logging level name (default: info)
    - API_TOKENS: Comma-separated ``token:user_id:role`` entries for the
      static token verifier (default: none)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    log_level: str = "info"

    # Raw string for comma-separated token entries
    api_tokens: str = Field(default="", repr=False)

    @field_validator("port", mode="before")
    @classmethod
    def port_or_default(cls, value: Any) -> int:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        try:
            port = int(value)
        except (TypeError, ValueError):
            logger.warning(
                "Invalid PORT value, using default",
                extra={"value": value, "default": DEFAULT_PORT},
            )
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            logger.warning(
                "PORT out of range, using default",
                extra={"value": port, "default": DEFAULT_PORT},
            )
            return DEFAULT_PORT
        return port

    @property
    def token_table(self) -> dict[str, dict[str, str]]:
        """Parse API_TOKENS into ``{token: {"user_id": ..., "role": ...}}``.

        Entries missing a role default to ``user``; malformed entries are
        skipped with a warning.
        """
        table: dict[str, dict[str, str]] = {}
        for entry in self.api_tokens.split(","):
            entry = entry.strip()
            if not entry:
                continue
            parts = [p.strip() for p in entry.split(":")]
            if len(parts) == 2:
                parts.append("user")
            if len(parts) != 3 or not all(parts):
                logger.warning("Skipping malformed API_TOKENS entry", extra={"position": len(table)})
                continue
            token, user_id, role = parts
            table[token] = {"user_id": user_id, "role": role}
        return table

    @property
    def ready_url(self) -> str:
        return f"http://localhost:{self.port}"


def load_settings() -> Settings:
    """Read settings from the environment once, at startup."""
    return Settings()
