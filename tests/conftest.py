"""Shared pytest fixtures for the latlon-vectors test suite."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from latlon_vectors.core.config import get_config
from latlon_vectors.models.geo_point import GeoPoint

# ---------------------------------------------------------------------------
# Configuration isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _fresh_config() -> Generator[None, None, None]:
    """Reload configuration around every test so env patches never leak."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


# ---------------------------------------------------------------------------
# Reference points
# ---------------------------------------------------------------------------


@pytest.fixture()
def lands_end() -> GeoPoint:
    """Land's End, Cornwall."""
    return GeoPoint(50.066389, -5.714722)


@pytest.fixture()
def john_o_groats() -> GeoPoint:
    """John o' Groats, Caithness."""
    return GeoPoint(58.643889, -3.07)


@pytest.fixture()
def square_polygon() -> list[GeoPoint]:
    """Convex 2° x 2° square centred on 0°N 0°E, counter-clockwise."""
    return [
        GeoPoint(-1.0, -1.0),
        GeoPoint(-1.0, 1.0),
        GeoPoint(1.0, 1.0),
        GeoPoint(1.0, -1.0),
    ]
