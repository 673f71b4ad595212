"""Great-circle path specifications.

A path starts at a point and is continued either towards an end point or
along an initial compass bearing:

- ``Endpoint(point)`` — plane normal ``start × end``;
- ``Bearing(degrees)`` — plane normal from ``GeoPoint.great_circle``.

``PathSpec`` is resolved once, at the call boundary, into the plane normal
that ``intersection`` and ``cross_track_distance`` work with.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from latlon_vectors.core.exceptions import DegenerateInputError, InvalidArgumentError

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint
    from latlon_vectors.models.vector3d import Vector3d


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Path continues through ``point``."""

    point: GeoPoint


@dataclass(frozen=True, slots=True)
class Bearing:
    """Path leaves its start point on initial bearing ``degrees`` (from true north)."""

    degrees: float

    def __post_init__(self) -> None:
        if isinstance(self.degrees, bool) or not isinstance(self.degrees, int | float):
            msg = f"Bearing must be a number, got {type(self.degrees).__name__}"
            raise InvalidArgumentError(msg, operation="Bearing")
        if not math.isfinite(self.degrees):
            msg = f"Bearing {self.degrees!r} must be finite"
            raise InvalidArgumentError(msg, operation="Bearing")


PathSpec = Endpoint | Bearing


def as_path_spec(value: PathSpec | GeoPoint | float) -> PathSpec:
    """Coerce a bare point or number into a ``PathSpec``.

    Raises:
        InvalidArgumentError: If ``value`` is neither a point nor a number.
    """
    from latlon_vectors.models.geo_point import GeoPoint

    if isinstance(value, Endpoint | Bearing):
        return value
    if isinstance(value, GeoPoint):
        return Endpoint(value)
    if isinstance(value, int | float) and not isinstance(value, bool):
        return Bearing(float(value))
    msg = f"Path must be an end point or a bearing, got {type(value).__name__}"
    raise InvalidArgumentError(msg, operation="as_path_spec")


def resolve_path(start: GeoPoint, path: PathSpec | GeoPoint | float) -> Vector3d:
    """Plane normal of the great circle through ``start`` described by ``path``.

    Raises:
        DegenerateInputError: If an end point coincides with, or is antipodal
            to, the start point (the great circle is undefined).
    """
    spec = as_path_spec(path)
    if isinstance(spec, Bearing):
        return start.great_circle(spec.degrees)

    normal = start.to_vector().cross(spec.point.to_vector())
    if normal.is_zero():
        msg = (
            f"Path from {start.lat}, {start.lon} to {spec.point.lat}, {spec.point.lon} "
            "does not define a unique great circle"
        )
        raise DegenerateInputError(msg, operation="resolve_path")
    return normal
