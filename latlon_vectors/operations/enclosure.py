"""Point-in-polygon test for convex spherical polygons.

A polygon is an ordered sequence of vertices, implicitly closed: if the
caller repeats the first vertex at the end, the repeat is dropped.  Edges
are the explicit pairs ``(vertex[i], vertex[(i + 1) % n])``.

A point is enclosed when it lies strictly on the interior side of every
edge's great circle.  That only holds for convex polygons, so the vertex
sequence is validated first: the turn direction at every vertex must
agree, and that common direction tells which side of each edge is the
interior (left for counter-clockwise, right for clockwise winding).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from latlon_vectors.core.config import get_config
from latlon_vectors.core.constants import MIN_POLYGON_VERTICES
from latlon_vectors.core.exceptions import InvalidPolygonError
from latlon_vectors.models.path import Endpoint
from latlon_vectors.operations.cross_track import cross_track_distance

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint

logger = logging.getLogger("latlon_vectors.operations.enclosure")


def enclosed_by(point: GeoPoint, polygon: Sequence[GeoPoint]) -> bool:
    """Whether ``point`` lies inside the convex ``polygon``.

    Points on an edge (within the configured degenerate tolerance, as an
    angle) are not enclosed.  Winding order does not matter.

    Raises:
        InvalidPolygonError: If the polygon has fewer than three distinct
            vertices, repeats a vertex consecutively, or is not convex.
    """
    vertices, turn = _check_convex(polygon)
    n = len(vertices)
    # angular offsets at or below the tolerance count as on the edge
    on_edge = get_config().degenerate_tolerance * point.radius

    for i in range(n):
        xtd = cross_track_distance(point, vertices[i], Endpoint(vertices[(i + 1) % n]))
        if abs(xtd) <= on_edge or (xtd > 0) != (turn > 0):
            return False

    return True


def validate_convex(polygon: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Check that ``polygon`` is a convex vertex sequence.

    Returns:
        The open vertex list (closing repeat removed); the input is not
        modified.

    Raises:
        InvalidPolygonError: If the polygon is too small, has a zero-length
            or antipodal edge, has all vertices on one great circle, or
            turns both ways.
    """
    vertices, _ = _check_convex(polygon)
    return vertices


def _check_convex(polygon: Sequence[GeoPoint]) -> tuple[list[GeoPoint], int]:
    """Open vertex list and common turn direction (+1 left, -1 right)."""
    vertices = list(polygon)
    if len(vertices) > 1 and vertices[0] == vertices[-1]:
        logger.debug("Dropping closing vertex of explicitly closed polygon")
        vertices.pop()

    if len(vertices) < MIN_POLYGON_VERTICES:
        msg = (
            f"Polygon has only {len(vertices)} vertex(es), "
            f"need at least {MIN_POLYGON_VERTICES}"
        )
        raise InvalidPolygonError(msg)

    tolerance = get_config().degenerate_tolerance
    vectors = [v.to_vector() for v in vertices]
    n = len(vectors)

    edges = [vectors[i].cross(vectors[(i + 1) % n]) for i in range(n)]
    for i, edge in enumerate(edges):
        if edge.is_zero(tolerance):
            msg = (
                f"Edge {i} from {vertices[i].lat}, {vertices[i].lon} to "
                f"{vertices[(i + 1) % n].lat}, {vertices[(i + 1) % n].lon} "
                "does not define a great circle"
            )
            raise InvalidPolygonError(msg)

    normals = [edge.unit(tolerance) for edge in edges]

    turn = 0
    for i in range(n):
        # sine of the next vertex's offset from the great circle of edge (i-1 → i)
        t = normals[i - 1].dot(vectors[(i + 1) % n])
        if abs(t) <= tolerance:
            continue
        vertex_turn = 1 if t > 0 else -1
        if turn == 0:
            turn = vertex_turn
        elif vertex_turn != turn:
            msg = f"Polygon must be convex: turn direction reverses at vertex {i}"
            raise InvalidPolygonError(msg)

    if turn == 0:
        msg = "Polygon vertices all lie on one great circle"
        raise InvalidPolygonError(msg)

    return vertices, turn
