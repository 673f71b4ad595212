"""Degree/radian conversion and sexagesimal (DMS) formatting helpers.

Purely presentational: nothing here carries geometric meaning, and a
formatting failure never affects the vector core.

- ``to_radians`` / ``to_degrees``: plain numeric conversions
- ``to_dms``: unsigned ``d`` / ``dm`` / ``dms`` display strings
- ``to_lat`` / ``to_lon`` / ``to_bearing``: hemisphere-aware wrappers
- ``parse_dms``: signed decimal degrees from a DMS string
"""

from __future__ import annotations

import enum
import math
import re

from latlon_vectors.core.exceptions import InvalidArgumentError


class CoordinateFormatError(InvalidArgumentError):
    """Raised when a format is unsupported or a DMS string cannot be parsed."""

    default_operation = "dms"
    default_code = "COORDINATE_FORMAT_INVALID"


class CoordinateFormat(enum.Enum):
    """Display format for angles.

    Values:
        DEGREES:                 ``d``   — ``050.0664°``
        DEGREES_MINUTES:         ``dm``  — ``050°03.98′``
        DEGREES_MINUTES_SECONDS: ``dms`` — ``050°03′59″``
    """

    DEGREES = "d"
    DEGREES_MINUTES = "dm"
    DEGREES_MINUTES_SECONDS = "dms"

    @property
    def default_dp(self) -> int:
        """Decimal places used when none are given."""
        return _DEFAULT_DP[self]


_DEFAULT_DP = {
    CoordinateFormat.DEGREES: 4,
    CoordinateFormat.DEGREES_MINUTES: 2,
    CoordinateFormat.DEGREES_MINUTES_SECONDS: 0,
}

_DMS_SEPARATORS = re.compile(r"[^0-9.,]+")
_HEMISPHERE_SUFFIX = re.compile(r"[NSEW]$", re.IGNORECASE)
_NEGATIVE = re.compile(r"^-|[WS]$", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Numeric conversion
# ---------------------------------------------------------------------------


def to_radians(degrees: float) -> float:
    """Degrees to radians."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Radians to (signed) degrees."""
    return radians * 180 / math.pi


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def to_dms(
    degrees: float,
    fmt: CoordinateFormat | str = CoordinateFormat.DEGREES_MINUTES_SECONDS,
    dp: int | None = None,
) -> str:
    """Format an angle as unsigned degrees / minutes / seconds.

    Degrees are zero-padded to three digits, minutes and seconds to two.
    A component that rounds up to 60 carries into the next larger unit.

    Args:
        degrees: Angle in degrees; the sign is dropped.
        fmt: ``d``, ``dm`` or ``dms`` (or the ``CoordinateFormat`` member).
        dp: Decimal places on the smallest unit; defaults to 4 / 2 / 0.

    Raises:
        CoordinateFormatError: If the format is unsupported, ``dp`` is
            negative, or ``degrees`` is not finite.
    """
    fmt = _coerce_format(fmt)
    if dp is None:
        dp = fmt.default_dp
    if dp < 0:
        msg = f"Decimal places must be >= 0, got {dp}"
        raise CoordinateFormatError(msg)
    if isinstance(degrees, bool) or not isinstance(degrees, int | float):
        msg = f"Angle must be a number, got {type(degrees).__name__}"
        raise CoordinateFormatError(msg)
    if not math.isfinite(degrees):
        msg = f"Cannot format non-finite angle {degrees!r}"
        raise CoordinateFormatError(msg)

    degrees = abs(degrees)

    if fmt is CoordinateFormat.DEGREES:
        d = f"{degrees:.{dp}f}"
        return _pad(d, 3) + "°"

    if fmt is CoordinateFormat.DEGREES_MINUTES:
        minutes_total = degrees * 60
        d = int(minutes_total // 60)
        m = f"{minutes_total % 60:.{dp}f}"
        if float(m) == 60:
            m = f"{0:.{dp}f}"
            d += 1
        return f"{d:03d}°{_pad(m, 2)}′"

    seconds_total = degrees * 3600
    d = int(seconds_total // 3600)
    m = int(seconds_total // 60) % 60
    s = f"{seconds_total % 60:.{dp}f}"
    if float(s) == 60:
        s = f"{0:.{dp}f}"
        m += 1
    if m == 60:
        m = 0
        d += 1
    return f"{d:03d}°{m:02d}′{_pad(s, 2)}″"


def to_lat(
    degrees: float, fmt: CoordinateFormat | str = "dms", dp: int | None = None
) -> str:
    """Format a latitude with an ``N``/``S`` suffix (two-digit degrees)."""
    lat = to_dms(degrees, fmt, dp).removeprefix("0")
    return lat + ("S" if degrees < 0 else "N")


def to_lon(
    degrees: float, fmt: CoordinateFormat | str = "dms", dp: int | None = None
) -> str:
    """Format a longitude with an ``E``/``W`` suffix."""
    return to_dms(degrees, fmt, dp) + ("W" if degrees < 0 else "E")


def to_bearing(
    degrees: float, fmt: CoordinateFormat | str = "dms", dp: int | None = None
) -> str:
    """Format a compass bearing normalised to ``[0, 360)``."""
    if isinstance(degrees, int | float) and math.isfinite(degrees):
        degrees = (degrees + 360) % 360
    brng = to_dms(degrees, fmt, dp)
    # rounding may carry 359.99… up to 360
    return "000" + brng[3:] if brng.startswith("360") else brng


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_dms(text: str | float) -> float:
    """Parse degrees from decimal or sexagesimal text.

    Accepts ``"-3.07"``, ``"3°04′12″W"``, ``"51 28 40.12 N"``, ``"51d 28.7m N"``
    and similar; any non-numeric characters separate the components.  A
    leading ``-`` or a trailing ``S``/``W`` makes the result negative.

    Raises:
        CoordinateFormatError: If the text has no or too many numeric parts.
    """
    if isinstance(text, int | float) and not isinstance(text, bool):
        if not math.isfinite(text):
            msg = f"Cannot parse non-finite value {text!r}"
            raise CoordinateFormatError(msg, operation="parse_dms")
        return float(text)

    raw = str(text).strip()
    try:
        value = float(raw)
    except ValueError:
        pass
    else:
        if not math.isfinite(value):
            msg = f"Cannot parse non-finite value {text!r}"
            raise CoordinateFormatError(msg, operation="parse_dms")
        return value

    body = _HEMISPHERE_SUFFIX.sub("", raw.removeprefix("-"))
    parts = [p for p in _DMS_SEPARATORS.split(body) if p]
    if not 1 <= len(parts) <= 3:
        msg = f"Cannot parse {text!r} as degrees/minutes/seconds"
        raise CoordinateFormatError(msg, operation="parse_dms")

    try:
        numbers = [float(p.replace(",", ".")) for p in parts]
    except ValueError as exc:
        msg = f"Cannot parse {text!r} as degrees/minutes/seconds"
        raise CoordinateFormatError(msg, operation="parse_dms") from exc

    divisors = (1, 60, 3600)
    degrees = sum(n / div for n, div in zip(numbers, divisors, strict=False))

    return -degrees if _NEGATIVE.search(raw) else degrees


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _coerce_format(fmt: CoordinateFormat | str) -> CoordinateFormat:
    if isinstance(fmt, CoordinateFormat):
        return fmt
    try:
        return CoordinateFormat(str(fmt).lower())
    except ValueError as exc:
        msg = f"Unsupported coordinate format {fmt!r}; expected one of d, dm, dms"
        raise CoordinateFormatError(msg) from exc


def _pad(number: str, width: int) -> str:
    """Zero-pad the integer part of a formatted number to ``width`` digits."""
    integer, _, fraction = number.partition(".")
    padded = integer.zfill(width)
    return f"{padded}.{fraction}" if fraction else padded
