"""Setting Store.

Registry of declared settings with a tagged-outcome setter.
"""

from collections.abc import Iterator
from enum import Enum

from envflag_core.errors import MalformedValueError, SettingRedefinedError
from envflag_core.values import Value


class SetStatus(str, Enum):
    """Outcome of assigning a raw string to a setting."""

    OK = "ok"
    UNKNOWN_KEY = "unknown_key"
    MALFORMED_VALUE = "malformed_value"
    OTHER = "other"


class SetResult:
    """Tagged result of SettingStore.set."""

    def __init__(self, status: SetStatus, error: Exception | None = None):
        self.status = status
        self.error = error

    @property
    def ok(self) -> bool:
        return self.status is SetStatus.OK

    def __repr__(self) -> str:
        return f"SetResult({self.status.value!r}, {self.error!r})"


class Setting:
    """Declared setting record."""

    def __init__(self, name: str, value: Value, usage: str):
        self.name = name
        self.value = value
        self.usage = usage
        # Captured at declaration, before any environment value is applied.
        self.default = str(value)


class SettingStore:
    """Declared settings keyed by bare name."""

    def __init__(self):
        self._settings: dict[str, Setting] = {}

    def declare(self, name: str, value: Value, usage: str = "") -> Value:
        """
        Register a value under a name.

        Returns:
            Value: The same value object, used as the caller's handle

        Raises:
            SettingRedefinedError: If the name is already declared
        """
        if name in self._settings:
            raise SettingRedefinedError(name)
        self._settings[name] = Setting(name, value, usage)
        return value

    def lookup(self, name: str) -> Setting | None:
        """Get setting by name."""
        return self._settings.get(name)

    def set(self, name: str, raw: str) -> SetResult:
        """Assign raw text to the named setting and report how it went."""
        setting = self._settings.get(name)
        if setting is None:
            return SetResult(SetStatus.UNKNOWN_KEY, KeyError(name))

        try:
            setting.value.set(raw)
        except MalformedValueError as e:
            return SetResult(SetStatus.MALFORMED_VALUE, e)
        except Exception as e:
            return SetResult(SetStatus.OTHER, e)
        return SetResult(SetStatus.OK)

    def restore_default(self, name: str) -> Exception | None:
        """
        Put the named setting back on its declared default.

        Returns:
            Exception | None: The error raised by the value while restoring,
                or None once the default is back in place
        """
        setting = self._settings[name]
        try:
            setting.value.restore(setting.default)
        except Exception as e:
            return e
        return None

    def visit_all(self) -> Iterator[Setting]:
        """Yield every declared setting in name order."""
        for name in sorted(self._settings):
            yield self._settings[name]

    def __len__(self) -> int:
        return len(self._settings)

    def __contains__(self, name: object) -> bool:
        return name in self._settings
