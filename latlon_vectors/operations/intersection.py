"""Intersection of two great-circle paths.

Each path is a start point plus either an end point or an initial bearing
(see ``latlon_vectors.models.path``).  The two great circles meet at two
antipodal points along ``c1 × c2``; the one returned is the one on the same
side of the sphere as the path start points, i.e. with a non-negative dot
product against the sum of their n-vectors.  When the start points are
themselves antipodal that sum vanishes and the first start point is the
reference instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from latlon_vectors.core.exceptions import DegenerateInputError
from latlon_vectors.models.geo_point import to_lat_lon
from latlon_vectors.models.path import resolve_path

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint
    from latlon_vectors.models.path import PathSpec

logger = logging.getLogger("latlon_vectors.operations.intersection")


def intersection(
    path1_start: GeoPoint,
    path1: PathSpec | GeoPoint | float,
    path2_start: GeoPoint,
    path2: PathSpec | GeoPoint | float,
) -> GeoPoint:
    """Point where the two great-circle paths cross.

    Args:
        path1_start: Start point of the first path.
        path1: End point (``Endpoint`` or ``GeoPoint``) or initial bearing
            (``Bearing`` or number, degrees) of the first path.
        path2_start: Start point of the second path.
        path2: End point or initial bearing of the second path.

    Returns:
        The intersection nearer the start points, carrying
        ``path1_start.radius``.

    Raises:
        DegenerateInputError: If a path does not define a great circle, or
            both paths lie on the same great circle.
    """
    c1 = resolve_path(path1_start, path1).unit()
    c2 = resolve_path(path2_start, path2).unit()

    candidate = c1.cross(c2)
    if candidate.is_zero():
        msg = "Paths lie on the same great circle: no unique intersection"
        raise DegenerateInputError(msg, operation="intersection")

    v1 = path1_start.to_vector()
    reference = v1.plus(path2_start.to_vector())
    if reference.is_zero():
        reference = v1

    if candidate.dot(reference) < 0:
        logger.debug("Intersection resolved to antipode of c1 x c2 (nearer the start points)")
        candidate = candidate.negate()

    return to_lat_lon(candidate.unit(), radius=path1_start.radius)
