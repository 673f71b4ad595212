"""Value types.

- Vector3d: 3-D Cartesian vector (n-vector or great-circle normal)
- GeoPoint: Latitude/longitude/radius point on a spherical Earth
- Endpoint, Bearing: Great-circle path specifications (PathSpec)
"""

from latlon_vectors.models.geo_point import GeoPoint, to_lat_lon, to_vector
from latlon_vectors.models.path import Bearing, Endpoint, PathSpec, as_path_spec, resolve_path
from latlon_vectors.models.vector3d import NORTH_POLE, Vector3d

__all__ = [
    "NORTH_POLE",
    "Bearing",
    "Endpoint",
    "GeoPoint",
    "PathSpec",
    "Vector3d",
    "as_path_spec",
    "resolve_path",
    "to_lat_lon",
    "to_vector",
]
