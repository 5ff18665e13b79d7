"""envflag core.

Typed settings bound to prefixed environment variables.

Usage:
    from envflag_core import new_environment

    env = new_environment("EXAMPLE_", error_on_extra_keys=True)
    port = env.integer("PORT", 9999, "port to bind")
    env.parse()
    print(port.value)
"""

from envflag_core.duration import format_duration, parse_duration
from envflag_core.engine import EnvSet, new_environment
from envflag_core.errors import (
    EnvParseError,
    EnvSetError,
    MalformedValueError,
    SettingRedefinedError,
)
from envflag_core.policy import SettingsPolicy
from envflag_core.report import ParseReport
from envflag_core.store import SetResult, SetStatus, Setting, SettingStore
from envflag_core.values import (
    BoolValue,
    DurationValue,
    FuncValue,
    IntValue,
    ListValue,
    StringValue,
    TypedValue,
    Value,
)

__all__ = [
    # Engine
    "EnvSet",
    "new_environment",
    "SettingsPolicy",
    "ParseReport",
    # Store
    "SettingStore",
    "Setting",
    "SetResult",
    "SetStatus",
    # Values
    "Value",
    "TypedValue",
    "StringValue",
    "IntValue",
    "BoolValue",
    "DurationValue",
    "ListValue",
    "FuncValue",
    # Duration grammar
    "parse_duration",
    "format_duration",
    # Exceptions
    "EnvSetError",
    "EnvParseError",
    "MalformedValueError",
    "SettingRedefinedError",
]
