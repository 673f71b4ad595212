"""Geographic mean of a set of points."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import TYPE_CHECKING

from latlon_vectors.core.exceptions import DegenerateInputError, InvalidArgumentError
from latlon_vectors.models.geo_point import to_lat_lon

if TYPE_CHECKING:
    from latlon_vectors.models.geo_point import GeoPoint


def mean_of(points: Sequence[GeoPoint], radius: float | None = None) -> GeoPoint:
    """Point in the direction of the sum of the points' n-vectors.

    Args:
        points: Points to average.
        radius: Radius carried by the result (configured default if omitted).

    Raises:
        InvalidArgumentError: If ``points`` is empty.
        DegenerateInputError: If the n-vectors cancel out (for example an
            exactly antipodal pair).
    """
    if not points:
        msg = "Cannot take the mean of an empty set of points"
        raise InvalidArgumentError(msg, operation="mean_of")

    total = reduce(lambda acc, v: acc.plus(v), (p.to_vector() for p in points))
    try:
        centre = total.unit()
    except DegenerateInputError as exc:
        msg = f"Mean of {len(points)} points is undefined: their n-vectors cancel out"
        raise DegenerateInputError(msg, operation="mean_of") from exc

    return to_lat_lon(centre, radius=radius)
