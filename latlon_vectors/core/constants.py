"""Shared geodesy constants — single source of truth.

Centralises the Earth model, numeric tolerances and polygon limits that
the vector algebra, the point model and the configuration layer all need.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_MEAN_RADIUS_KM: float = 6371.0
"""Mean Earth radius; distances come back in the same unit as the radius."""

# ---------------------------------------------------------------------------
# Numeric tolerances
# ---------------------------------------------------------------------------

DEGENERATE_TOLERANCE: float = 1e-12
"""Vectors at or below this length are treated as the zero vector.

Antipodal n-vectors sum to ~1e-16 rather than exactly zero; points 1 mm
apart on the Earth still produce cross products around 1e-10.
"""

MAX_DEGENERATE_TOLERANCE: float = 1e-3

# ---------------------------------------------------------------------------
# Polygons
# ---------------------------------------------------------------------------

MIN_POLYGON_VERTICES = 3
