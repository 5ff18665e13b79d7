"""
Environment Parse Engine.

Binds declared settings to PREFIX+NAME environment variables in a single pass
and classifies every problem found along the way:

- extra key: prefixed variable with no declared setting (policy-filtered)
- malformed value: value rejected by the setting's parser; the setting is
  always put back on its default, reported only when the policy asks
- unclassified: any other setter failure, always reported; the setting is
  put back on its default as well
- missing key: declared setting with no variable (policy-filtered)

The pass never stops at the first problem; everything ends up in one
ParseReport.
"""

import json
import os
import sys
from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import Any, TextIO, TypeVar

from envflag_core.errors import EnvParseError
from envflag_core.policy import SettingsPolicy
from envflag_core.report import ParseReport
from envflag_core.store import Setting, SettingStore, SetStatus
from envflag_core.values import (
    BoolValue,
    DurationValue,
    FuncValue,
    IntValue,
    ListValue,
    StringValue,
    Value,
)
from envflag_obs.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound=Value)

EnvironSource = Callable[[], Iterable[str]]


def os_environ() -> list[str]:
    """Snapshot the process environment as KEY=VALUE strings."""
    return [f"{key}={value}" for key, value in os.environ.items()]


class EnvSet:
    """
    Declared settings bound to one prefix.

    Example:
        env = EnvSet(SettingsPolicy(prefix="APP_", error_on_extra_keys=True))
        port = env.integer("PORT", 8000, "port to bind")
        env.parse()
        port.value  # 8000 unless APP_PORT is set
    """

    def __init__(
        self,
        policy: SettingsPolicy,
        store: SettingStore | None = None,
        environ: EnvironSource | None = None,
        trace: bool = False,
    ):
        """Initialize engine.

        Args:
            policy: Prefix and error-handling choices
            store: Setting store (a fresh one when omitted)
            environ: Callable returning KEY=VALUE strings (os.environ when omitted)
            trace: Log bindings, rollbacks and failed passes
        """
        self.policy = policy
        self.store = store if store is not None else SettingStore()
        self.environ = environ or os_environ
        self.trace = trace

    @property
    def prefix(self) -> str:
        return self.policy.prefix

    # ========================================================================
    # DECLARATION
    # ========================================================================

    def var(self, value: V, name: str, usage: str = "") -> V:
        """Declare a setting backed by any Value object."""
        self.store.declare(name, value, usage)
        return value

    def string(self, name: str, default: str, usage: str = "") -> StringValue:
        return self.var(StringValue(default), name, usage)

    def integer(self, name: str, default: int, usage: str = "") -> IntValue:
        return self.var(IntValue(default), name, usage)

    def boolean(self, name: str, default: bool, usage: str = "") -> BoolValue:
        return self.var(BoolValue(default), name, usage)

    def duration(self, name: str, default: timedelta, usage: str = "") -> DurationValue:
        return self.var(DurationValue(default), name, usage)

    def string_list(
        self, name: str, default: Iterable[str] = (), usage: str = "", separator: str = ","
    ) -> ListValue:
        return self.var(ListValue(default, separator), name, usage)

    def custom(
        self,
        name: str,
        default: T,
        parse: Callable[[str], T],
        format: Callable[[T], str] = str,
        usage: str = "",
    ) -> FuncValue[T]:
        """
        Declare a setting with a caller-supplied parser.

        Args:
            name: Bare setting name (without prefix)
            default: Typed default value
            parse: Converts raw text; ValueError marks the text malformed
            format: Renders a typed value for usage display
            usage: Help text

        Example:
            hosts = env.custom("KAFKAS", [], lambda raw: raw.split(","), ",".join)
        """
        return self.var(FuncValue(default, parse, format), name, usage)

    def lookup(self, name: str) -> Setting | None:
        return self.store.lookup(name)

    def visit_all(self) -> Iterable[Setting]:
        return self.store.visit_all()

    # ========================================================================
    # PARSING
    # ========================================================================

    def check(self, environ: Iterable[str] | None = None) -> ParseReport:
        """
        Run one parse pass and return its report without raising.

        Args:
            environ: KEY=VALUE strings to scan instead of the configured source

        Returns:
            ParseReport: Every problem recorded under the active policy
        """
        entries = self.environ() if environ is None else environ
        report = ParseReport()
        visited: set[str] = set()

        for entry in entries:
            # Values may contain "=" themselves
            key, _, value = entry.partition("=")
            if not key.startswith(self.prefix):
                continue
            name = key[len(self.prefix):]

            result = self.store.set(name, value)

            if result.status is SetStatus.OK:
                visited.add(key)
                if self.trace:
                    logger.debug("env_setting_applied", key=key)

            elif result.status is SetStatus.UNKNOWN_KEY:
                if self.policy.error_on_extra_keys:
                    report.extra_keys.append(key)
                elif self.trace:
                    logger.debug("env_extra_key_ignored", key=key)

            elif result.status is SetStatus.MALFORMED_VALUE:
                if self.policy.error_on_parse_errors:
                    report.malformed_entries.append(f"{key}={value}")
                self._roll_back(report, name, key, value)

            else:
                report.unclassified_errors.append(f"{key}={value}: {result.error}")
                self._roll_back(report, name, key, value)

        if self.policy.error_on_missing_keys:
            for setting in self.store.visit_all():
                key = self.prefix + setting.name
                if key not in visited:
                    report.missing_keys.append(key)

        if self.trace:
            logger.debug(
                "env_parse_completed",
                prefix=self.prefix,
                bound=len(visited),
                declared=len(self.store),
            )
        return report

    def _roll_back(self, report: ParseReport, name: str, key: str, value: str) -> None:
        """Put a setting whose write failed back on its default."""
        error = self.store.restore_default(name)
        if error is not None:
            report.unclassified_errors.append(f"{key}={value}: rollback failed: {error}")
        elif self.trace:
            logger.debug("env_setting_rolled_back", key=key)

    def parse(self, environ: Iterable[str] | None = None) -> None:
        """
        Populate declared settings from the environment.

        Raises:
            EnvParseError: If the pass recorded any problem; settings still
                hold their environment or default values
        """
        report = self.check(environ)
        if not report.is_error:
            return

        if self.trace:
            logger.warning(
                "env_parse_failed",
                prefix=self.prefix,
                missing=len(report.missing_keys),
                extra=len(report.extra_keys),
                malformed=len(report.malformed_entries),
                unclassified=len(report.unclassified_errors),
            )
        if self.policy.usage_on_error:
            self.print_defaults(file=sys.stderr)
        raise EnvParseError(report)

    # ========================================================================
    # USAGE
    # ========================================================================

    def format_defaults(self) -> str:
        """Render an export listing of every declared setting with its default."""
        lines = ["## Example Usage:"]
        for setting in self.store.visit_all():
            lines.append(f"# {setting.usage}")
            lines.append(f"export {self.prefix}{setting.name}={_quote(setting.default)}")
        return "\n".join(lines) + "\n"

    def print_defaults(self, file: TextIO | None = None) -> None:
        print(self.format_defaults(), end="", file=file or sys.stdout)

    def __repr__(self) -> str:
        return f"EnvSet(prefix={self.prefix!r}, settings={len(self.store)})"


def new_environment(prefix: str, **options: Any) -> EnvSet:
    """
    Build an engine for a prefix.

    Args:
        prefix: Variable name prefix, e.g. "EXAMPLE_"
        **options: SettingsPolicy flags plus EnvSet keyword arguments
            (store, environ, trace)

    Example:
        env = new_environment("EXAMPLE_", error_on_extra_keys=True)
    """
    engine_options = {k: options.pop(k) for k in ("store", "environ", "trace") if k in options}
    return EnvSet(SettingsPolicy(prefix=prefix, **options), **engine_options)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)
