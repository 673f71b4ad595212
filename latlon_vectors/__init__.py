"""Vector-based spherical geodesy.

Great-circle calculations on a spherical Earth model using n-vectors (unit
vectors normal to the sphere) in place of spherical trigonometry: distance,
bearing, midpoint, destination, intersection, cross-track distance, polygon
enclosure and geographic mean.
"""

from latlon_vectors.core.exceptions import (
    DegenerateInputError,
    GeodesyError,
    InvalidArgumentError,
    InvalidPolygonError,
)
from latlon_vectors.models.geo_point import GeoPoint, to_lat_lon, to_vector
from latlon_vectors.models.path import Bearing, Endpoint, PathSpec
from latlon_vectors.models.vector3d import Vector3d

__version__ = "0.1.0"

__all__ = [
    "Bearing",
    "DegenerateInputError",
    "Endpoint",
    "GeoPoint",
    "GeodesyError",
    "InvalidArgumentError",
    "InvalidPolygonError",
    "PathSpec",
    "Vector3d",
    "to_lat_lon",
    "to_vector",
]
