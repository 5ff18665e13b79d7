"""
envflag Configuration Package.

Provides Pydantic Settings loaded from ENVFLAG_* environment variables.
"""

from envflag_config.settings import Settings

__all__ = ["Settings"]
