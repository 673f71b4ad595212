"""Three-dimensional Cartesian vector.

A ``Vector3d`` plays two roles:

- an n-vector: a unit vector from the Earth's centre to a surface point;
- the normal to the plane of a great circle.

Vectors are immutable; every operation returns a new instance. Unit
length is never assumed at construction; callers normalise with
``unit()`` before treating a result as a location, and ``unit()`` refuses
to normalise a (near-)zero vector.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from latlon_vectors.core.config import get_config
from latlon_vectors.core.exceptions import DegenerateInputError, InvalidArgumentError

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint


@dataclass(frozen=True, slots=True)
class Vector3d:
    """Immutable 3-D vector with finite components.

    Attributes:
        x: Component towards 0°N, 0°E.
        y: Component towards 0°N, 90°E.
        z: Component towards 90°N.

    Raises:
        InvalidArgumentError: If any component is not a finite number.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, int | float)
                or not math.isfinite(value)
            ):
                msg = f"Vector component {name}={value!r} must be a finite number"
                raise InvalidArgumentError(msg, operation="Vector3d")

    # -- algebra -----------------------------------------------------------

    def plus(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def minus(self, other: Vector3d) -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def times(self, k: float) -> Vector3d:
        return Vector3d(self.x * k, self.y * k, self.z * k)

    def negate(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3d) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3d) -> Vector3d:
        """Vector normal to the plane of ``self`` and ``other`` (right-hand rule).

        Returns the zero vector when the inputs are parallel or anti-parallel.
        """
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def is_zero(self, tolerance: float | None = None) -> bool:
        """Whether the length is at or below ``tolerance`` (configured default)."""
        if tolerance is None:
            tolerance = get_config().degenerate_tolerance
        return self.length() <= tolerance

    def unit(self, tolerance: float | None = None) -> Vector3d:
        """Normalise to unit length.

        Raises:
            DegenerateInputError: If the vector is (near) zero and so has no
                direction.
        """
        if self.is_zero(tolerance):
            msg = f"Cannot normalise zero-length vector {self!r}"
            raise DegenerateInputError(msg, operation="unit")
        norm = self.length()
        return Vector3d(self.x / norm, self.y / norm, self.z / norm)

    def angle_to(self, other: Vector3d) -> float:
        """Angle between the two vectors in radians, in ``[0, π]``.

        ``atan2(|a×b|, a·b)`` stays accurate near 0 and π where ``acos`` of
        the dot product loses precision.
        """
        return math.atan2(self.cross(other).length(), self.dot(other))

    # -- operators -----------------------------------------------------------

    def __add__(self, other: Vector3d) -> Vector3d:
        return self.plus(other)

    def __sub__(self, other: Vector3d) -> Vector3d:
        return self.minus(other)

    def __mul__(self, k: float) -> Vector3d:
        return self.times(k)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3d:
        return self.negate()

    # -- conversion --------------------------------------------------------

    def to_lat_lon(self, radius: float | None = None) -> GeoPoint:
        """Latitude/longitude of the point this vector points to.

        The vector need not be normalised; only its direction is used.
        """
        from latlon_vectors.models.geo_point import to_lat_lon

        return to_lat_lon(self, radius=radius)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_dict(self) -> dict[str, float]:
        """Serialise to a plain dict with ``x``/``y``/``z`` keys."""
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Vector3d:
        """Deserialise from a dict payload.

        Raises:
            TypeError: If a component is missing or not numeric.
        """
        values = []
        for key in ("x", "y", "z"):
            raw = data.get(key)
            if isinstance(raw, bool) or not isinstance(raw, int | float):
                msg = f"{key} must be a number, got {type(raw).__name__}"
                raise TypeError(msg)
            values.append(float(raw))
        return cls(*values)


NORTH_POLE = Vector3d(0.0, 0.0, 1.0)
"""n-vector of the geographic North Pole."""
