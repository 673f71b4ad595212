"""Geodesy configuration loaded from environment variables.

All values have sensible defaults (Earth mean radius in kilometres,
a tolerance that separates genuinely degenerate vectors from tiny but
meaningful ones, degrees-minutes-seconds display).

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so a bad environment is caught on first use rather
    than surfacing as wrong geometry later.
"""

from __future__ import annotations

import functools
import logging
import math
import os
from dataclasses import dataclass

from latlon_vectors.core.constants import (
    DEGENERATE_TOLERANCE,
    EARTH_MEAN_RADIUS_KM,
    MAX_DEGENERATE_TOLERANCE,
)
from latlon_vectors.core.exceptions import GeodesyError

logger = logging.getLogger("latlon_vectors.core.config")

VALID_COORDINATE_FORMATS = ("d", "dm", "dms")
MAX_DECIMAL_PLACES = 12


class ConfigValidationError(GeodesyError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")

    @property
    def category(self) -> str:
        return "config"


@dataclass(frozen=True, slots=True)
class GeodesyConfig:
    """Immutable geodesy configuration.

    Attributes:
        earth_radius: Default sphere radius for new points; distances are
            returned in the same unit.
        degenerate_tolerance: Vectors whose length is at or below this value
            are treated as zero (antipodal sums, coincident great circles).
        coordinate_format: Default display format (``d``, ``dm`` or ``dms``).
        decimal_places: Default display precision; ``None`` selects the
            per-format default.
    """

    earth_radius: float = EARTH_MEAN_RADIUS_KM
    degenerate_tolerance: float = DEGENERATE_TOLERANCE
    coordinate_format: str = "dms"
    decimal_places: int | None = None

    @classmethod
    def from_env(cls) -> GeodesyConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``LATLON_EARTH_RADIUS=abc``).
        """
        dp_raw = os.getenv("LATLON_DECIMAL_PLACES", "")
        config = cls(
            earth_radius=float(os.getenv("LATLON_EARTH_RADIUS", str(EARTH_MEAN_RADIUS_KM))),
            degenerate_tolerance=float(
                os.getenv("LATLON_DEGENERATE_TOLERANCE", str(DEGENERATE_TOLERANCE))
            ),
            coordinate_format=os.getenv("LATLON_COORDINATE_FORMAT", "dms").strip().lower(),
            decimal_places=int(dp_raw) if dp_raw.strip() else None,
        )
        _validate(config)
        return config


@functools.cache
def get_config() -> GeodesyConfig:
    """Return the process-wide configuration, loading it on first use."""
    config = GeodesyConfig.from_env()
    logger.debug(
        "Geodesy config loaded | radius=%s | tolerance=%g | format=%s | dp=%s",
        config.earth_radius,
        config.degenerate_tolerance,
        config.coordinate_format,
        config.decimal_places,
    )
    return config


def default_radius() -> float:
    """Default radius for points created without an explicit one."""
    return get_config().earth_radius


def _validate(config: GeodesyConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not math.isfinite(config.earth_radius) or config.earth_radius <= 0:
        raise ConfigValidationError(
            "LATLON_EARTH_RADIUS",
            config.earth_radius,
            "must be a finite number > 0",
        )

    if not 0.0 <= config.degenerate_tolerance < MAX_DEGENERATE_TOLERANCE:
        raise ConfigValidationError(
            "LATLON_DEGENERATE_TOLERANCE",
            config.degenerate_tolerance,
            f"must be >= 0 and < {MAX_DEGENERATE_TOLERANCE}",
        )

    if config.coordinate_format not in VALID_COORDINATE_FORMATS:
        raise ConfigValidationError(
            "LATLON_COORDINATE_FORMAT",
            config.coordinate_format,
            f"must be one of {', '.join(VALID_COORDINATE_FORMATS)}",
        )

    if config.decimal_places is not None and not (
        0 <= config.decimal_places <= MAX_DECIMAL_PLACES
    ):
        raise ConfigValidationError(
            "LATLON_DECIMAL_PLACES",
            config.decimal_places,
            f"must be between 0 and {MAX_DECIMAL_PLACES}",
        )
