"""
Example Service Entry Point.

Declares its settings against the EXAMPLE_ prefix, parses the environment once
and logs what it resolved. Unexpected EXAMPLE_* variables are errors.

Usage:
    EXAMPLE_PORT=8080 EXAMPLE_KAFKAS=k1:9092,k2:9092 python -m apps.example_service.main
"""

import sys
from datetime import timedelta

from envflag_config.settings import Settings
from envflag_core import EnvParseError, EnvSet, new_environment
from envflag_obs.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_environment(environ=None, trace: bool = False) -> EnvSet:
    """Declare the service settings."""
    env = new_environment(
        "EXAMPLE_",
        error_on_extra_keys=True,
        usage_on_error=True,
        environ=environ,
        trace=trace,
    )
    env.string("HOST", "127.0.0.1", "host to bind")
    env.integer("PORT", 9999, "port to bind")
    env.boolean("DEBUG", False, "to debug or not to debug?")
    env.duration("TIMEOUT", timedelta(seconds=5), "timeout duration")
    env.custom(
        "KAFKAS",
        [],
        parse=lambda raw: raw.split(","),
        format=",".join,
        usage="kafka hosts to connect to",
    )
    return env


def resolved_values(env: EnvSet) -> dict[str, object]:
    """Current value of every declared setting, keyed by lower-cased name."""
    return {setting.name.lower(): setting.value.value for setting in env.visit_all()}


def main() -> int:
    settings = Settings()
    setup_logging(settings)

    env = build_environment(trace=settings.DEBUG)
    try:
        env.parse()
    except EnvParseError as e:
        logger.error("example_service_config_invalid", error=str(e))
        return 1

    values = resolved_values(env)
    values["timeout"] = str(env.lookup("TIMEOUT").value)
    logger.info("example_service_configured", **values)
    return 0


if __name__ == "__main__":
    sys.exit(main())
