"""Setting Values.

Value objects hold the current typed value of a declared setting and know how
to parse it from a raw environment string.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import timedelta
from typing import Generic, TypeVar

from envflag_core.duration import format_duration, parse_duration
from envflag_core.errors import MalformedValueError

T = TypeVar("T")

_DECIMAL_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_TRUE_SPELLINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_SPELLINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Value(ABC):
    """
    Settable value bound to a declared setting.

    Subclass this to declare custom setting types. ``set`` raises
    MalformedValueError when the raw text cannot be parsed; any other
    exception is reported as an unclassified failure.

    Example:
        class Port(Value):
            def __init__(self):
                self.port = 0

            def set(self, raw):
                if not raw.isdigit():
                    raise MalformedValueError(f"not a port: {raw!r}")
                if int(raw) < 1024:
                    raise PermissionError("privileged port")
                self.port = int(raw)

            def __str__(self):
                return str(self.port)
    """

    @abstractmethod
    def set(self, raw: str) -> None:
        """Parse raw text and install it as the current value."""
        ...

    @abstractmethod
    def __str__(self) -> str:
        """Render the current value as text."""
        ...

    def restore(self, default: str) -> None:
        """Return to the declared default (given as captured text)."""
        self.set(default)


class TypedValue(Value, Generic[T]):
    """Value holding a typed default and a typed current value."""

    def __init__(self, default: T):
        self.default = default
        self.value = default

    @abstractmethod
    def parse(self, raw: str) -> T:
        """Convert raw text into the typed value."""
        ...

    def format(self, value: T) -> str:
        return str(value)

    def set(self, raw: str) -> None:
        self.value = self.parse(raw)

    def restore(self, default: str) -> None:
        self.value = self.default

    def __str__(self) -> str:
        return self.format(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class StringValue(TypedValue[str]):
    """String taken verbatim."""

    def parse(self, raw: str) -> str:
        return raw


class IntValue(TypedValue[int]):
    """Signed decimal integer in the 64-bit range."""

    def parse(self, raw: str) -> int:
        digits = raw[1:] if raw[:1] in ("-", "+") else raw
        if not digits or not set(digits) <= _DECIMAL_DIGITS:
            raise MalformedValueError(f"invalid integer {raw!r}")

        value = int(raw)
        if not _INT_MIN <= value <= _INT_MAX:
            raise MalformedValueError(f"integer out of range {raw!r}")
        return value


class BoolValue(TypedValue[bool]):
    """Boolean from 1/0, t/f, true/false in their usual capitalisations."""

    def parse(self, raw: str) -> bool:
        if raw in _TRUE_SPELLINGS:
            return True
        if raw in _FALSE_SPELLINGS:
            return False
        raise MalformedValueError(f"invalid boolean {raw!r}")

    def format(self, value: bool) -> str:
        return "true" if value else "false"


class DurationValue(TypedValue[timedelta]):
    """Duration such as "1m3s" (see envflag_core.duration)."""

    def parse(self, raw: str) -> timedelta:
        return parse_duration(raw)

    def format(self, value: timedelta) -> str:
        return format_duration(value)


class ListValue(TypedValue[list[str]]):
    """Separator-delimited list of strings; an empty string is an empty list."""

    def __init__(self, default: Iterable[str] = (), separator: str = ","):
        super().__init__(list(default))
        self.separator = separator

    def parse(self, raw: str) -> list[str]:
        if raw == "":
            return []
        return raw.split(self.separator)

    def format(self, value: list[str]) -> str:
        return self.separator.join(value)

    def restore(self, default: str) -> None:
        self.value = list(self.default)


class FuncValue(TypedValue[T]):
    """
    Custom value built from a caller-supplied parse/format pair.

    ValueError from ``parse`` marks the input as malformed. Any other
    exception is left alone and surfaces as an unclassified failure.
    """

    def __init__(
        self,
        default: T,
        parse: Callable[[str], T],
        format: Callable[[T], str] = str,
    ):
        super().__init__(default)
        self._parse = parse
        self._format = format

    def parse(self, raw: str) -> T:
        try:
            return self._parse(raw)
        except MalformedValueError:
            raise
        except ValueError as e:
            raise MalformedValueError(str(e)) from e

    def format(self, value: T) -> str:
        return self._format(value)
