"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - The Attio API key comes from the environment (ATTIO_API_KEY), never hardcoded
    - attio_api_key has no default: absence is detected by the lifecycle, not here
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Missing key does not fail Settings() itself: the startup check owns the
      fatal path so it can log and exit 1 uniformly
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_VARIABLE = "ATTIO_API_KEY"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Attio
    attio_api_key: str | None = None
    attio_base_url: str = "https://api.attio.com/v2"

    @field_validator("attio_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths start with '/', so the base must not end with one."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # MCP server identity
    server_name: str = "attio-mcp-server"
    server_version: str = "0.0.1"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
