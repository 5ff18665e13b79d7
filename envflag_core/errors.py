"""envflag exceptions.

Custom exception hierarchy for declaration and parse failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envflag_core.report import ParseReport


class EnvSetError(Exception):
    """Base exception for envflag."""

    pass


class MalformedValueError(EnvSetError, ValueError):
    """Raw environment value could not be parsed for the setting's type."""

    pass


class SettingRedefinedError(EnvSetError):
    """A setting with the same name was already declared."""

    def __init__(self, name: str):
        super().__init__(f"setting redefined: {name!r}")
        self.name = name


class EnvParseError(EnvSetError):
    """One or more problems found during a parse pass.

    The full classification is available on ``report``.
    """

    def __init__(self, report: ParseReport):
        super().__init__(str(report))
        self.report = report
