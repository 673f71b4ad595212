"""Unified geodesy exception taxonomy.

Every domain exception inherits from ``GeodesyError`` and carries
structured context fields (operation, code, category) so callers can
tell a rejected argument apart from degenerate geometry without parsing
messages.

Taxonomy categories
-------------------
- ``InvalidArgumentError`` — malformed numeric input (non-finite lat/lon,
  radius, bearing or distance), rejected before any vector math runs.
- ``DegenerateInputError`` — the vector algebra produced a zero-length
  vector where a unit vector is required (antipodal midpoint, bearing at a
  pole, coincident great circles).
- ``InvalidPolygonError`` — a polygon that is non-convex or has too few
  vertices for an enclosure test.

Every exception exposes ``to_error_dict()`` for a stable structured
payload suitable for logging.
"""

from __future__ import annotations


class GeodesyError(Exception):
    """Base exception for all geodesy errors.

    Attributes:
        message: Human-readable error description.
        operation: Operation that failed (e.g. ``"bearing_to"``).
        code: Machine-readable error code (e.g. ``"DEGENERATE_INPUT"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, InvalidArgumentError):
            return "invalid_argument"
        if isinstance(self, DegenerateInputError):
            return "degenerate_input"
        if isinstance(self, InvalidPolygonError):
            return "invalid_polygon"
        return "geodesy"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category classes
# ---------------------------------------------------------------------------


class InvalidArgumentError(ValueError, GeodesyError):
    """Malformed numeric input rejected at the conversion boundary."""

    default_code = "INVALID_ARGUMENT"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeodesyError.__init__(self, message, **kwargs)


class DegenerateInputError(ArithmeticError, GeodesyError):
    """A zero-length vector appeared where a unit vector is required."""

    default_code = "DEGENERATE_INPUT"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeodesyError.__init__(self, message, **kwargs)


class InvalidPolygonError(ValueError, GeodesyError):
    """Polygon is non-convex or has too few distinct vertices."""

    default_operation = "enclosed_by"
    default_code = "INVALID_POLYGON"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        GeodesyError.__init__(self, message, **kwargs)
