"""Inverted polygons — "everything on Earth except this area".

WKT has no inversion keyword. An inverted area is written as a
``POLYGON`` whose outer ring spans the whole coordinate domain and whose
hole is the area itself; even-odd fill renderers then shade everything
outside the hole.

This module owns the world ring used for that encoding, recognises such
polygons after decoding, and converts decoded geometry back into the
``Drawing`` payload the map editor works with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from annotation_wkt.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LONGITUDE,
    WORLD_RING_LONGITUDE_STEP,
)
from annotation_wkt.models.drawing import Drawing

if TYPE_CHECKING:
    from annotation_wkt.models.geometry import MultiPolygon, PolygonWithHoles, Ring

# An outer ring counts as world-spanning above these extents (degrees).
WORLD_LATITUDE_SPAN_THRESHOLD = 170.0
WORLD_LONGITUDE_SPAN_THRESHOLD = 350.0

_MIN_WORLD_RING_POINTS = 4


def world_ring(max_latitude: float = MAX_LATITUDE) -> Ring:
    """Closed ``(lat, lon)`` ring around the whole domain.

    Edges along each parallel are densified every 90° so renderers
    cannot take the short way across the antimeridian.
    """
    steps = int((MAX_LONGITUDE - MIN_LONGITUDE) / WORLD_RING_LONGITUDE_STEP)
    south = [(-max_latitude, MIN_LONGITUDE + i * WORLD_RING_LONGITUDE_STEP) for i in range(steps + 1)]
    north = [(max_latitude, MAX_LONGITUDE - i * WORLD_RING_LONGITUDE_STEP) for i in range(steps + 1)]
    return (*south, *north, south[0])


WORLD_RING: Ring = world_ring()


def is_inverted_polygon(polygon: PolygonWithHoles) -> bool:
    """Whether *polygon* is a world-spanning outer ring with at least one hole."""
    if not polygon.has_holes or len(polygon.outer) < _MIN_WORLD_RING_POINTS:
        return False
    lats = [p[0] for p in polygon.outer]
    lons = [p[1] for p in polygon.outer]
    return (
        max(lats) - min(lats) > WORLD_LATITUDE_SPAN_THRESHOLD
        and max(lons) - min(lons) > WORLD_LONGITUDE_SPAN_THRESHOLD
    )


def drawing_from_geometry(geometry: MultiPolygon) -> Drawing:
    """Convert decoded geometry into the editor's ``Drawing`` payload.

    - One inverted polygon: its hole becomes the drawn ring with
      ``is_inverted`` set; several holes become a multi-ring drawing.
    - One plain polygon: its outer ring.
    - Several polygons: their outer rings as a multi-ring drawing.
      Holes of plain polygons are not representable in a drawing and
      are left out.
    """
    if len(geometry) == 0:
        return Drawing()

    if len(geometry) == 1:
        polygon = geometry[0]
        if is_inverted_polygon(polygon):
            if len(polygon.holes) == 1:
                return Drawing(coordinates=list(polygon.holes[0]), is_inverted=True)
            # Several holes: the inverted flag cannot be combined with
            # multi-ring encoding, so the holes come back as plain rings.
            return Drawing(
                coordinates=[list(hole) for hole in polygon.holes],
                is_multi_polygon=True,
            )
        return Drawing(coordinates=list(polygon.outer))

    return Drawing(
        coordinates=[list(polygon.outer) for polygon in geometry],
        is_multi_polygon=True,
    )
