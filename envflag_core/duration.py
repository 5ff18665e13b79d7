"""Duration grammar.

Parses combined-unit durations such as ``"1m3s"``, ``"1.5h"`` or ``"-300ms"``
into ``timedelta`` and renders them back in the same compact form.

Accepted input: an optional sign followed by one or more ``<number><unit>``
groups, where the number may carry a decimal fraction and the unit is one of
``ns``, ``us``, ``µs``, ``μs``, ``ms``, ``s``, ``m``, ``h``. The bare string
``"0"`` is also accepted. ``timedelta`` only resolves microseconds, so
nanosecond remainders are truncated toward zero.
"""

import re
from datetime import timedelta

from envflag_core.errors import MalformedValueError

_GROUP_RE = re.compile(r"(?P<whole>\d*)(?:\.(?P<frac>\d*))?(?P<unit>[a-zµμ]+)")

_UNIT_TO_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

# Durations are bounded by a signed 64-bit nanosecond count.
_MAX_NANOSECONDS = 2**63


def parse_duration(text: str) -> timedelta:
    """
    Convert a duration string into a timedelta.

    Args:
        text: Duration such as "1m3s", "2h45m", "1.5s" or "-10ms"

    Returns:
        timedelta: Parsed duration

    Raises:
        MalformedValueError: If the text does not follow the grammar

    Example:
        parse_duration("1m3s")  # timedelta(seconds=63)
        parse_duration("0")  # timedelta(0)
    """
    original = text
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise MalformedValueError(f"invalid duration {original!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _GROUP_RE.match(text, pos)
        if match is None:
            raise MalformedValueError(f"invalid duration {original!r}")

        whole = match.group("whole")
        frac = match.group("frac") or ""
        if not whole and not frac:
            raise MalformedValueError(f"invalid duration {original!r}")

        unit = match.group("unit")
        scale = _UNIT_TO_NANOSECONDS.get(unit)
        if scale is None:
            raise MalformedValueError(f"unknown unit {unit!r} in duration {original!r}")

        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()

    if total > _MAX_NANOSECONDS or (total == _MAX_NANOSECONDS and not negative):
        raise MalformedValueError(f"invalid duration {original!r}")

    result = timedelta(microseconds=total // 1_000)
    return -result if negative else result


def format_duration(value: timedelta) -> str:
    """Render a timedelta in the compact form accepted by parse_duration."""
    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_decimal(micros, 1_000)}ms"

    hours, rest = divmod(micros, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    text = f"{_decimal(rest, 1_000_000)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


def _decimal(amount: int, scale: int) -> str:
    whole, frac = divmod(amount, scale)
    if not frac:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(frac).rjust(width, '0').rstrip('0')}"
