"""Latitude/longitude point on a spherical Earth.

A ``GeoPoint`` is lowered to its n-vector for every calculation and the
vector result is lifted back to a point (or reduced to a scalar).  The
module also holds the conversion pair between the two representations:

- ``to_vector(lat, lon)`` — n-vector of a latitude/longitude in degrees;
- ``to_lat_lon(v)`` — latitude/longitude a (not necessarily unit) vector
  points to.

Frame: right-handed, ``(1, 0, 0)`` is 0°N 0°E, ``(0, 1, 0)`` is 0°N 90°E,
``(0, 0, 1)`` is the North Pole.

Example:
    >>> lands_end = GeoPoint(50.066389, -5.714722)
    >>> john_o_groats = GeoPoint(58.643889, -3.07)
    >>> round(lands_end.distance_to(john_o_groats), 1)
    968.9
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from latlon_vectors.core.config import default_radius, get_config
from latlon_vectors.core.exceptions import DegenerateInputError, InvalidArgumentError
from latlon_vectors.models.vector3d import NORTH_POLE, Vector3d
from latlon_vectors.utils.dms import to_degrees, to_lat, to_lon, to_radians

if TYPE_CHECKING:
    from latlon_vectors.models.path import PathSpec


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def to_vector(lat: float, lon: float) -> Vector3d:
    """n-vector (unit normal to the sphere) of a latitude/longitude in degrees.

    Raises:
        InvalidArgumentError: If either coordinate is not a finite number.
    """
    _require_finite("lat", lat, "to_vector")
    _require_finite("lon", lon, "to_vector")

    phi = to_radians(lat)
    lam = to_radians(lon)

    return Vector3d(
        math.cos(phi) * math.cos(lam),
        math.cos(phi) * math.sin(lam),
        math.sin(phi),
    )


def to_lat_lon(v: Vector3d, radius: float | None = None) -> GeoPoint:
    """Point that ``v`` points to, carrying ``radius`` (configured default).

    Only the direction of ``v`` is used, so raw cross products are accepted.

    Raises:
        DegenerateInputError: If ``v`` is (near) zero and has no direction.
    """
    if v.is_zero():
        msg = f"Zero-length vector {v!r} does not point to a location"
        raise DegenerateInputError(msg, operation="to_lat_lon")

    phi = math.atan2(v.z, math.sqrt(v.x * v.x + v.y * v.y))
    lam = math.atan2(v.y, v.x)

    if radius is None:
        return GeoPoint(to_degrees(phi), to_degrees(lam))
    return GeoPoint(to_degrees(phi), to_degrees(lam), radius)


# ---------------------------------------------------------------------------
# GeoPoint
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A point on a spherical Earth.

    Two points are equal only if latitude, longitude and radius are all
    equal; coordinates are not normalised first, so ``lon=180`` and
    ``lon=-180`` compare unequal.

    Attributes:
        lat: Latitude in degrees, -90..+90 by convention.
        lon: Longitude in degrees, -180..+180 by convention.
        radius: Sphere radius (default: configured Earth mean radius, km).
            Distances are returned in the same unit.

    Raises:
        InvalidArgumentError: If a coordinate is non-finite or the radius is
            not a finite positive number.
    """

    lat: float
    lon: float
    radius: float = field(default_factory=default_radius)

    def __post_init__(self) -> None:
        _require_finite("lat", self.lat, "GeoPoint")
        _require_finite("lon", self.lon, "GeoPoint")
        _require_finite("radius", self.radius, "GeoPoint")
        if self.radius <= 0:
            msg = f"radius={self.radius!r} must be > 0"
            raise InvalidArgumentError(msg, operation="GeoPoint")

    # -- conversion --------------------------------------------------------

    def to_vector(self) -> Vector3d:
        """n-vector of this point."""
        return to_vector(self.lat, self.lon)

    def great_circle(self, bearing: float) -> Vector3d:
        """Normal of the great circle leaving this point on ``bearing`` degrees.

        The result is already a unit vector.
        """
        _require_finite("bearing", bearing, "great_circle")

        phi = to_radians(self.lat)
        lam = to_radians(self.lon)
        theta = to_radians(bearing)

        x = math.sin(lam) * math.cos(theta) - math.sin(phi) * math.cos(lam) * math.sin(theta)
        y = -math.cos(lam) * math.cos(theta) - math.sin(phi) * math.sin(lam) * math.sin(theta)
        z = math.cos(phi) * math.sin(theta)

        return Vector3d(x, y, z)

    # -- pairwise operations -------------------------------------------------

    def distance_to(self, point: GeoPoint) -> float:
        """Great-circle distance to ``point`` in units of this point's radius."""
        return self.to_vector().angle_to(point.to_vector()) * self.radius

    def bearing_to(self, point: GeoPoint) -> float:
        """Initial bearing to ``point`` in compass degrees, ``[0, 360)``.

        The bearing is the signed angle between the great circle through both
        points and the great circle through this point and the North Pole.

        Raises:
            DegenerateInputError: If the points coincide or are antipodal, or
                this point is a pole.
        """
        p1 = self.to_vector()
        p2 = point.to_vector()

        c1 = p1.cross(p2)  # great circle through p1 & p2
        c2 = p1.cross(NORTH_POLE)  # great circle through p1 & north pole

        if c1.is_zero():
            msg = (
                f"Bearing from {self.lat}, {self.lon} to {point.lat}, {point.lon} is undefined: "
                "points coincide or are antipodal"
            )
            raise DegenerateInputError(msg, operation="bearing_to")
        if c2.is_zero():
            msg = f"Bearing from {self.lat}, {self.lon} is undefined at a pole"
            raise DegenerateInputError(msg, operation="bearing_to")

        c1xc2 = c1.cross(c2)
        sin_theta = c1xc2.length()
        if c1xc2.dot(p1) < 0:
            sin_theta = -sin_theta
        cos_theta = c1.dot(c2)

        bearing = to_degrees(math.atan2(sin_theta, cos_theta))
        return (bearing + 360) % 360

    def final_bearing_to(self, point: GeoPoint) -> float:
        """Bearing on arrival at ``point``, ``[0, 360)``."""
        return (point.bearing_to(self) + 180) % 360

    def midpoint_to(self, point: GeoPoint) -> GeoPoint:
        """Point half-way along the great circle to ``point``.

        Raises:
            DegenerateInputError: If the points are antipodal.
        """
        mid = self.to_vector().plus(point.to_vector())
        try:
            unit = mid.unit()
        except DegenerateInputError as exc:
            msg = (
                f"Midpoint of antipodal points {self.lat}, {self.lon} and "
                f"{point.lat}, {point.lon} is undefined"
            )
            raise DegenerateInputError(msg, operation="midpoint_to") from exc
        return to_lat_lon(unit, radius=self.radius)

    def intermediate_point_to(self, point: GeoPoint, fraction: float) -> GeoPoint:
        """Point at ``fraction`` (0 = this point, 1 = ``point``) along the great circle.

        Raises:
            DegenerateInputError: If the points are antipodal.
        """
        _require_finite("fraction", fraction, "intermediate_point_to")

        p1 = self.to_vector()
        p2 = point.to_vector()
        if fraction == 0 or (p1.cross(p2).is_zero() and p1.dot(p2) > 0):
            return self
        if p1.cross(p2).is_zero():
            msg = (
                f"Path between antipodal points {self.lat}, {self.lon} and "
                f"{point.lat}, {point.lon} is undefined"
            )
            raise DegenerateInputError(msg, operation="intermediate_point_to")

        delta = p1.angle_to(p2)
        a = math.sin((1 - fraction) * delta) / math.sin(delta)
        b = math.sin(fraction * delta) / math.sin(delta)
        return to_lat_lon(p1.times(a).plus(p2.times(b)).unit(), radius=self.radius)

    def destination_point(self, bearing: float, distance: float) -> GeoPoint:
        """Point reached after travelling ``distance`` on initial ``bearing``.

        ``distance`` is in units of this point's radius.

        Raises:
            InvalidArgumentError: If bearing or distance is non-finite.
        """
        _require_finite("distance", distance, "destination_point")

        delta = distance / self.radius  # angular distance in radians
        c = self.great_circle(bearing)
        p1 = self.to_vector()

        x = p1.times(math.cos(delta))  # component of p2 parallel to p1
        y = c.cross(p1).times(math.sin(delta))  # component of p2 perpendicular to p1

        return to_lat_lon(x.plus(y).unit(), radius=self.radius)

    # -- composite operations -----------------------------------------------

    def cross_track_distance_to(
        self, path_start: GeoPoint, path: PathSpec | GeoPoint | float
    ) -> float:
        """Signed distance to the great circle through ``path_start``.

        Positive when this point lies to the left of the direction of travel.
        """
        from latlon_vectors.operations.cross_track import cross_track_distance

        return cross_track_distance(self, path_start, path)

    def enclosed_by(self, polygon: Sequence[GeoPoint]) -> bool:
        """Whether this point lies inside the convex ``polygon``."""
        from latlon_vectors.operations.enclosure import enclosed_by

        return enclosed_by(self, polygon)

    @staticmethod
    def intersection(
        path1_start: GeoPoint,
        path1: PathSpec | GeoPoint | float,
        path2_start: GeoPoint,
        path2: PathSpec | GeoPoint | float,
    ) -> GeoPoint:
        """Intersection of two great-circle paths."""
        from latlon_vectors.operations.intersection import intersection

        return intersection(path1_start, path1, path2_start, path2)

    @staticmethod
    def mean_of(points: Sequence[GeoPoint], radius: float | None = None) -> GeoPoint:
        """Geographic mean of ``points``."""
        from latlon_vectors.operations.mean import mean_of

        return mean_of(points, radius=radius)

    # -- presentation / transport -------------------------------------------

    def to_string(self, fmt: str | None = None, dp: int | None = None) -> str:
        """Comma-separated formatted latitude/longitude (e.g. ``50°03′59″N, 005°42′53″W``)."""
        config = get_config()
        fmt = fmt or config.coordinate_format
        dp = config.decimal_places if dp is None else dp
        return f"{to_lat(self.lat, fmt, dp)}, {to_lon(self.lon, fmt, dp)}"

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self) -> dict[str, float]:
        """Serialise to a plain dict with ``lat``/``lon``/``radius`` keys."""
        return {"lat": self.lat, "lon": self.lon, "radius": self.radius}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> GeoPoint:
        """Deserialise from a dict payload.

        A missing ``radius`` takes the configured default.

        Raises:
            TypeError: If a field is missing or not numeric.
        """
        values: dict[str, float] = {}
        for key in ("lat", "lon", "radius"):
            if key == "radius" and key not in data:
                continue
            raw = data.get(key)
            if isinstance(raw, bool) or not isinstance(raw, int | float):
                msg = f"{key} must be a number, got {type(raw).__name__}"
                raise TypeError(msg)
            values[key] = float(raw)
        return cls(**values)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_finite(name: str, value: object, operation: str) -> None:
    """Reject anything but a finite real number.

    Raises:
        InvalidArgumentError: If ``value`` is not a finite int/float.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{name} must be a number, got {type(value).__name__}"
        raise InvalidArgumentError(msg, operation=operation)
    if not math.isfinite(value):
        msg = f"{name}={value!r} must be finite"
        raise InvalidArgumentError(msg, operation=operation)
