"""
Global default environment.

Process-wide EnvSet for programs that don't need more than one prefix. It is
built lazily on first use; the prefix is the upper-cased program name plus
"_" (``myservice.py`` → ``MYSERVICE_``) unless ENVFLAG_DEFAULT_PREFIX is set.

Tests and libraries should construct their own EnvSet instead.
"""

import sys
from collections.abc import Callable, Iterable
from datetime import timedelta
from pathlib import Path
from typing import TextIO, TypeVar

from envflag_config.settings import Settings
from envflag_core.engine import EnvSet
from envflag_core.policy import SettingsPolicy
from envflag_core.values import (
    BoolValue,
    DurationValue,
    FuncValue,
    IntValue,
    ListValue,
    StringValue,
    Value,
)

T = TypeVar("T")
V = TypeVar("V", bound=Value)

_default_environment: EnvSet | None = None


def app_prefix(argv0: str) -> str:
    """Derive a variable prefix from an invocation path."""
    return Path(argv0).stem.upper() + "_"


def get_environment() -> EnvSet:
    """Get the global EnvSet, building it on first call."""
    global _default_environment

    if _default_environment is None:
        settings = Settings()
        prefix = settings.DEFAULT_PREFIX
        if prefix is None:
            prefix = app_prefix(sys.argv[0] if sys.argv else "")
        _default_environment = EnvSet(SettingsPolicy(prefix=prefix), trace=settings.DEBUG)

    return _default_environment


def reset_environment() -> None:
    """Discard the global EnvSet (and everything declared on it)."""
    global _default_environment
    _default_environment = None


def string(name: str, default: str, usage: str = "") -> StringValue:
    return get_environment().string(name, default, usage)


def integer(name: str, default: int, usage: str = "") -> IntValue:
    return get_environment().integer(name, default, usage)


def boolean(name: str, default: bool, usage: str = "") -> BoolValue:
    return get_environment().boolean(name, default, usage)


def duration(name: str, default: timedelta, usage: str = "") -> DurationValue:
    return get_environment().duration(name, default, usage)


def string_list(
    name: str, default: Iterable[str] = (), usage: str = "", separator: str = ","
) -> ListValue:
    return get_environment().string_list(name, default, usage, separator)


def custom(
    name: str,
    default: T,
    parse: Callable[[str], T],
    format: Callable[[T], str] = str,
    usage: str = "",
) -> FuncValue[T]:
    return get_environment().custom(name, default, parse, format, usage)


def var(value: V, name: str, usage: str = "") -> V:
    return get_environment().var(value, name, usage)


def parse() -> None:
    """Parse the process environment into the global EnvSet."""
    get_environment().parse()


def print_defaults(file: TextIO | None = None) -> None:
    get_environment().print_defaults(file)
