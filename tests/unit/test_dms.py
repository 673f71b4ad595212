"""Unit tests for degree conversion and DMS formatting/parsing."""

from __future__ import annotations

import math

import pytest

from latlon_vectors.core.exceptions import InvalidArgumentError
from latlon_vectors.utils.dms import (
    CoordinateFormat,
    CoordinateFormatError,
    parse_dms,
    to_bearing,
    to_degrees,
    to_dms,
    to_lat,
    to_lon,
    to_radians,
)

# ===========================================================================
# Numeric conversion
# ===========================================================================


class TestConversion:
    def test_to_radians(self) -> None:
        assert to_radians(180) == pytest.approx(math.pi)

    def test_to_degrees(self) -> None:
        assert to_degrees(-math.pi / 2) == pytest.approx(-90)

    def test_round_trip(self) -> None:
        assert to_degrees(to_radians(123.456)) == pytest.approx(123.456)


# ===========================================================================
# Formatting
# ===========================================================================


class TestToDms:
    """Unsigned d / dm / dms strings."""

    def test_dms_default(self) -> None:
        assert to_dms(50.066389) == "050°03′59″"

    def test_degrees(self) -> None:
        assert to_dms(-5.714722, "d") == "005.7147°"

    def test_degrees_minutes(self) -> None:
        assert to_dms(0.5, CoordinateFormat.DEGREES_MINUTES) == "000°30.00′"

    def test_explicit_dp(self) -> None:
        assert to_dms(50.066389, "dms", 2) == "050°03′59.00″"

    def test_format_is_case_insensitive(self) -> None:
        assert to_dms(1.5, "D", 1) == "001.5°"

    def test_seconds_carry_into_degrees(self) -> None:
        assert to_dms(1.99999999) == "002°00′00″"

    def test_minutes_carry_into_degrees(self) -> None:
        assert to_dms(2.9999999, "dm") == "003°00.00′"

    def test_default_dp_per_format(self) -> None:
        assert CoordinateFormat.DEGREES.default_dp == 4
        assert CoordinateFormat.DEGREES_MINUTES.default_dp == 2
        assert CoordinateFormat.DEGREES_MINUTES_SECONDS.default_dp == 0

    def test_unsupported_format(self) -> None:
        with pytest.raises(CoordinateFormatError, match=r"Unsupported coordinate format"):
            to_dms(1.0, "dd")

    def test_negative_dp(self) -> None:
        with pytest.raises(CoordinateFormatError, match=r"Decimal places"):
            to_dms(1.0, "d", -1)

    def test_non_finite(self) -> None:
        with pytest.raises(CoordinateFormatError, match=r"non-finite"):
            to_dms(math.nan)


class TestHemisphereWrappers:
    """to_lat / to_lon / to_bearing."""

    def test_lat_north(self) -> None:
        assert to_lat(50.066389) == "50°03′59″N"

    def test_lat_south(self) -> None:
        assert to_lat(-33.5, "d", 2) == "33.50°S"

    def test_lat_single_digit_keeps_two_digits(self) -> None:
        assert to_lat(5.5, "d", 1) == "05.5°N"

    def test_lat_out_of_range_keeps_all_digits(self) -> None:
        """Latitude range is not enforced, so three-digit degrees must survive."""
        assert to_lat(100) == "100°00′00″N"
        assert to_lat(-123.5, "d", 1) == "123.5°S"

    def test_lon_west(self) -> None:
        assert to_lon(-5.714722) == "005°42′53″W"

    def test_lon_east(self) -> None:
        assert to_lon(151.25, "d", 2) == "151.25°E"

    def test_bearing_normalised(self) -> None:
        assert to_bearing(-90) == "270°00′00″"

    def test_bearing_carry_to_360_wraps(self) -> None:
        assert to_bearing(359.9999999) == "000°00′00″"

    def test_bearing_decimal(self) -> None:
        assert to_bearing(9.1197, "d", 1) == "009.1°"


# ===========================================================================
# Parsing
# ===========================================================================


class TestParseDms:
    """Signed decimal degrees from text."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-3.07", -3.07),
            ("  12.5 ", 12.5),
            ("3°04′12″W", -3.07),
            ("3°04′12″w", -3.07),
            ("51° 28′ 40.12″ N", 51 + 28 / 60 + 40.12 / 3600),
            ("51 28 40.12 N", 51 + 28 / 60 + 40.12 / 3600),
            ("51d 28.7m N", 51 + 28.7 / 60),
            ("10 30 S", -10.5),
            ("-10 30", -10.5),
            ("51,5", 51.5),
            ("005°42′53″E", 5 + 42 / 60 + 53 / 3600),
        ],
    )
    def test_parse(self, text: str, expected: float) -> None:
        assert parse_dms(text) == pytest.approx(expected)

    def test_number_passes_through(self) -> None:
        assert parse_dms(45) == 45.0

    def test_formatted_latitude_round_trip(self) -> None:
        assert parse_dms(to_lat(50.066389)) == pytest.approx(50.066389, abs=1 / 7200)

    def test_formatted_longitude_round_trip(self) -> None:
        assert parse_dms(to_lon(-5.714722, "dm", 4)) == pytest.approx(-5.714722, abs=1e-5)

    @pytest.mark.parametrize("bad", ["", "abc", "1 2 3 4", "1.2.3°", "nan", math.inf])
    def test_unparseable(self, bad: str | float) -> None:
        with pytest.raises(CoordinateFormatError) as exc_info:
            parse_dms(bad)
        assert exc_info.value.operation == "parse_dms"

    def test_error_is_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_dms("north")
        assert exc_info.value.category == "invalid_argument"
        assert exc_info.value.code == "COORDINATE_FORMAT_INVALID"
