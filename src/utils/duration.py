"""Duration string utilities.

Timeouts are written the way Go-style tooling writes them ("300ms", "5s",
"1m30s", "1.5h"), and round-trip times are rendered back in the same form.
"""

import re

from src.exceptions import DurationFormatError


_UNITS_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = r"(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"^([+-]?)((?:{_COMPONENT})+)$")
_COMPONENT_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: str) -> float:
    """Parse a duration string into seconds.

    Args:
        value: Duration string, a signed sequence of decimal numbers each
            followed by a unit (ns, us, µs, ms, s, m, h). "0" is accepted.

    Returns:
        float: Duration in seconds.

    Raises:
        DurationFormatError: If the string is not a valid duration.

    Examples:
        >>> parse_duration("5s")
        5.0
        >>> parse_duration("1m30s")
        90.0
        >>> parse_duration("250ms")
        0.25
    """
    text = value.strip() if isinstance(value, str) else ""
    if text in ("0", "+0", "-0"):
        return 0.0

    match = _DURATION_RE.match(text)
    if not match:
        raise DurationFormatError(str(value))

    sign, body = match.groups()
    total_ns = 0.0
    for number, unit in _COMPONENT_RE.findall(body):
        total_ns += float(number) * _UNITS_NS[unit]

    seconds = total_ns / 1_000_000_000
    return -seconds if sign == "-" else seconds


def _fixed(value: int, unit: int) -> str:
    """Render value/unit exactly, trimming trailing zeros of the fraction."""
    whole, frac = divmod(value, unit)
    width = len(str(unit)) - 1
    frac_str = str(frac).rjust(width, "0").rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)


def format_duration(seconds: float) -> str:
    """Render a duration in seconds the way Go prints time.Duration.

    Examples:
        >>> format_duration(0.012345)
        '12.345ms'
        >>> format_duration(90.5)
        '1m30.5s'
        >>> format_duration(0)
        '0s'
    """
    ns = round(seconds * 1_000_000_000)
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < _UNITS_NS["us"]:
        return f"{sign}{ns}ns"
    if ns < _UNITS_NS["ms"]:
        return f"{sign}{_fixed(ns, _UNITS_NS['us'])}µs"
    if ns < _UNITS_NS["s"]:
        return f"{sign}{_fixed(ns, _UNITS_NS['ms'])}ms"

    hours, rest = divmod(ns, _UNITS_NS["h"])
    minutes, rest = divmod(rest, _UNITS_NS["m"])
    secs = _fixed(rest, _UNITS_NS["s"])
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"
