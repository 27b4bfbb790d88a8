"""Shared geometry constants — single source of truth.

Coordinate bounds, ring sizes and WKT keywords used by both the decoder
and the encoder.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE: float = -180.0
MAX_LONGITUDE: float = 180.0
MIN_LATITUDE: float = -90.0
MAX_LATITUDE: float = 90.0

WEB_MERCATOR_MAX_LATITUDE: float = 85.0511287798
"""Latitude limit of Web Mercator map widgets (poles cannot be displayed)."""

# ---------------------------------------------------------------------------
# Rings
# ---------------------------------------------------------------------------

MIN_RING_POINTS: int = 3
"""Minimum distinct points in a valid ring (closing duplicate excluded)."""

WORLD_RING_LONGITUDE_STEP: float = 90.0
"""Spacing of the densified world ring along each parallel, in degrees."""

# ---------------------------------------------------------------------------
# WKT keywords
# ---------------------------------------------------------------------------

POLYGON_KEYWORD: str = "POLYGON"
MULTIPOLYGON_KEYWORD: str = "MULTIPOLYGON"
