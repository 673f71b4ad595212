"""Signed cross-track distance from a point to a great-circle path."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from latlon_vectors.models.path import resolve_path

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint
    from latlon_vectors.models.path import PathSpec


def cross_track_distance(
    point: GeoPoint,
    path_start: GeoPoint,
    path: PathSpec | GeoPoint | float,
) -> float:
    """Signed distance from ``point`` to the great circle through ``path_start``.

    The angular offset is ``π/2 − angle(point, normal)``; it is positive when
    the point lies on the side the plane normal points to, which is to the
    left of the direction of travel.

    Returns:
        Distance in units of ``point.radius`` (zero for a point on the path).

    Raises:
        DegenerateInputError: If ``path`` does not define a great circle.
    """
    normal = resolve_path(path_start, path)
    alpha = math.pi / 2 - point.to_vector().angle_to(normal)
    return alpha * point.radius
