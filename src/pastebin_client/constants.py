"""
Loads client configuration from environment variables and `.env` files.

By default, the values defined in the classes are used, these can be overridden by an env var with the same name.

An `.env` file is used to populate env vars, if present.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvConfig(BaseSettings):
    """Our default configuration for models that should load from .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )


class _Miscellaneous(EnvConfig, env_prefix="pastebin_"):
    """Miscellaneous configuration."""

    debug: bool = False
    file_logs: bool = False


Miscellaneous = _Miscellaneous()

FILE_LOGS = Miscellaneous.file_logs
DEBUG_MODE = Miscellaneous.debug


class _Pastebin(EnvConfig, env_prefix="pastebin_"):
    """Pastebin API configuration."""

    api_url: str = "https://pastebin.com/api/api_post.php"
    base_url: str = "https://pastebin.com"
    api_key: str = ""
    # The service refuses anything bigger
    max_paste_size: int = Field(default=512_000, gt=0, le=512_000)


Pastebin = _Pastebin()


class _Sentry(EnvConfig, env_prefix="pastebin_sentry_"):
    """Sentry configuration."""

    dsn: str = ""
    environment: str = ""
    release_prefix: str = "pastebin-client"


Sentry = _Sentry()

API_URL = Pastebin.api_url

# Every successful upload answers with a paste URL starting with this
PASTEBIN_URL_START = Pastebin.base_url

# In bytes
MAX_PASTE_SIZE = Pastebin.max_paste_size
