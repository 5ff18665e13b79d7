"""
envflag Settings (Pydantic Settings).

Ambient configuration of the library itself, loaded from ENVFLAG_* environment
variables (.env file or system env). These never mix with the settings a
program declares; they only control logging and the global default instance.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Example:
        ENVFLAG_LOG_FORMAT=json ENVFLAG_DEBUG=true python -m apps.example_service.main
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVFLAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="text", pattern="^(json|text)$")
    DEBUG: bool = Field(
        default=False,
        description="Trace every environment binding at debug level",
    )

    # ========================================================================
    # GLOBAL DEFAULT INSTANCE
    # ========================================================================
    DEFAULT_PREFIX: str | None = Field(
        default=None,
        description="Prefix of the global instance (defaults to PROGRAM_ from sys.argv[0])",
    )
