"""Cross-check against pyproj's geodesic solver on a sphere.

On a sphere (flattening 0) the geodesic is the great circle, so pyproj's
inverse/forward problems must agree with the n-vector results to within
rounding.  pyproj works in metres; the points here use kilometres.
"""

from __future__ import annotations

import pytest

from latlon_vectors.models.geo_point import GeoPoint

pyproj = pytest.importorskip("pyproj")

RADIUS_M = 6_371_000.0

PAIRS = [
    ((50.066389, -5.714722), (58.643889, -3.07)),
    ((51.8853, 0.2545), (49.0034, 2.5735)),
    ((-33.8688, 151.2093), (40.7128, -74.006)),
    ((0.0, 0.0), (0.0, 90.0)),
    ((-60.0, -70.0), (10.0, 100.0)),
    ((89.0, 0.0), (-45.0, 170.0)),
]


@pytest.fixture(scope="module")
def geod():
    return pyproj.Geod(a=RADIUS_M, f=0.0)


class TestInverseProblem:
    """distance_to / bearing_to / final_bearing_to vs Geod.inv."""

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_distance(self, geod, a: tuple[float, float], b: tuple[float, float]) -> None:
        _, _, dist_m = geod.inv(a[1], a[0], b[1], b[0])
        assert GeoPoint(*a).distance_to(GeoPoint(*b)) == pytest.approx(dist_m / 1000, rel=1e-9)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_initial_bearing(self, geod, a: tuple[float, float], b: tuple[float, float]) -> None:
        az12, _, _ = geod.inv(a[1], a[0], b[1], b[0])
        bearing = GeoPoint(*a).bearing_to(GeoPoint(*b))
        diff = (bearing - az12 % 360 + 180) % 360 - 180
        assert diff == pytest.approx(0, abs=1e-7)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_final_bearing(self, geod, a: tuple[float, float], b: tuple[float, float]) -> None:
        _, az21, _ = geod.inv(a[1], a[0], b[1], b[0])
        final = GeoPoint(*a).final_bearing_to(GeoPoint(*b))
        diff = (final - (az21 + 180) % 360 + 180) % 360 - 180
        assert diff == pytest.approx(0, abs=1e-7)


class TestForwardProblem:
    """destination_point vs Geod.fwd."""

    @pytest.mark.parametrize(
        ("lat", "lon", "bearing", "distance_km"),
        [
            (53.3206, -1.7297, 96.0217, 124.8),
            (0.0, 0.0, 45.0, 10_000.0),
            (-33.87, 151.21, 15.0, 12_000.0),
            (70.0, -150.0, 300.0, 2_500.0),
        ],
    )
    def test_destination(
        self, geod, lat: float, lon: float, bearing: float, distance_km: float
    ) -> None:
        lon2, lat2, _ = geod.fwd(lon, lat, bearing, distance_km * 1000)
        dest = GeoPoint(lat, lon).destination_point(bearing, distance_km)
        assert dest.lat == pytest.approx(lat2, abs=1e-7)
        assert (dest.lon - lon2 + 180) % 360 - 180 == pytest.approx(0, abs=1e-7)
