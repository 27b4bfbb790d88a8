"""WKT encoder — coordinates or structured geometry to text.

``encode`` is the map editor's entry point: it takes the drawn ring (or
rings) in ``(lat, lon)`` order plus the two mode flags and returns WKT
in ``lon lat`` order. Rings are always written closed.

Encoding failure is an empty string, not an exception: a ring with
fewer than 3 distinct finite points simply has no WKT yet (the user is
still drawing). The only exception is ``UnsupportedEncodingError`` for
the undefined ``is_multi_polygon`` + ``is_inverted`` combination.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from annotation_wkt.codec._normalization import close_ring, format_ring
from annotation_wkt.codec._validation import check_encode_flags, clean_ring, is_valid_ring
from annotation_wkt.codec.inversion import world_ring
from annotation_wkt.core.config import DEFAULT_CONFIG, GeometryConfig
from annotation_wkt.core.constants import MULTIPOLYGON_KEYWORD, POLYGON_KEYWORD
from annotation_wkt.models.geometry import MultiPolygon, PolygonWithHoles

if TYPE_CHECKING:
    from collections.abc import Sequence

    from annotation_wkt.models.drawing import Drawing

logger = logging.getLogger("annotation_wkt.codec")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def encode(
    coordinates: Sequence[Sequence[float]] | Sequence[Sequence[Sequence[float]]],
    is_multi_polygon: bool = False,
    is_inverted: bool = False,
    *,
    config: GeometryConfig | None = None,
) -> str:
    """Encode a drawn ring, or a list of rings, as WKT.

    Args:
        coordinates: One ring of ``(lat, lon)`` points, or a list of rings
            when ``is_multi_polygon`` is set.
        is_multi_polygon: Write ``MULTIPOLYGON`` with one polygon per ring.
            Rings that are too small are skipped.
        is_inverted: Write the ring as a hole inside the world ring.
        config: Codec configuration (longitude wrapping, world ring latitude).

    Returns:
        The WKT text, or ``""`` if no ring has 3 distinct finite points.
        Points are counted after de-duplication, so a degenerate ring
        such as ``[(0, 0), (1, 1), (0, 0)]`` also encodes to ``""``.

    Raises:
        UnsupportedEncodingError: If both mode flags are set.
    """
    check_encode_flags(is_multi_polygon=is_multi_polygon, is_inverted=is_inverted)
    config = config or DEFAULT_CONFIG

    if is_multi_polygon:
        bodies: list[str] = []
        for idx, ring in enumerate(coordinates):
            text = _ring_text(ring, f"ring {idx}", config)  # type: ignore[arg-type]
            if text is not None:
                bodies.append(f"(({text}))")
        if not bodies:
            return ""
        return f"{MULTIPOLYGON_KEYWORD} ({', '.join(bodies)})"

    text = _ring_text(coordinates, "ring", config)  # type: ignore[arg-type]
    if text is None:
        return ""
    if is_inverted:
        world = format_ring(world_ring(config.max_latitude))
        return f"{POLYGON_KEYWORD} (({world}), ({text}))"
    return f"{POLYGON_KEYWORD} (({text}))"


def encode_polygon(polygon: PolygonWithHoles, *, config: GeometryConfig | None = None) -> str:
    """Encode a polygon with its holes as ``POLYGON ((outer), (hole), ...)``."""
    body = _polygon_body(polygon, config or DEFAULT_CONFIG, "POLYGON")
    return f"{POLYGON_KEYWORD} {body}" if body else ""


def encode_multipolygon(geometry: MultiPolygon, *, config: GeometryConfig | None = None) -> str:
    """Encode every polygon, with holes, as one ``MULTIPOLYGON``."""
    config = config or DEFAULT_CONFIG
    bodies = [
        body
        for idx, polygon in enumerate(geometry)
        if (body := _polygon_body(polygon, config, f"MULTIPOLYGON part {idx}"))
    ]
    if not bodies:
        return ""
    return f"{MULTIPOLYGON_KEYWORD} ({', '.join(bodies)})"


def dumps(
    geometry: PolygonWithHoles | MultiPolygon, *, config: GeometryConfig | None = None
) -> str:
    """Encode structured geometry, dispatching on its type.

    Raises:
        TypeError: If *geometry* is neither a polygon nor a multipolygon.
    """
    if isinstance(geometry, PolygonWithHoles):
        return encode_polygon(geometry, config=config)
    if isinstance(geometry, MultiPolygon):
        return encode_multipolygon(geometry, config=config)
    msg = f"Cannot encode {type(geometry).__name__} as WKT"
    raise TypeError(msg)


def encode_drawing(drawing: Drawing, *, config: GeometryConfig | None = None) -> str:
    """Encode a map-editor ``Drawing`` payload."""
    return encode(
        drawing.coordinates,
        is_multi_polygon=drawing.is_multi_polygon,
        is_inverted=drawing.is_inverted,
        config=config,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _ring_text(
    ring: Sequence[Sequence[float]], label: str, config: GeometryConfig
) -> str | None:
    """Closed ``lon lat`` text for one ring, or ``None`` if it is too small."""
    points = clean_ring(ring, label)
    if not is_valid_ring(points):
        logger.debug("Not encoding %s: fewer than 3 distinct points", label)
        return None
    return format_ring(close_ring(points), wrap=config.wrap_longitude)


def _polygon_body(polygon: PolygonWithHoles, config: GeometryConfig, label: str) -> str:
    outer = _ring_text(polygon.outer, f"{label} outer ring", config)
    if outer is None:
        return ""
    rings = [outer]
    for idx, hole in enumerate(polygon.holes):
        text = _ring_text(hole, f"{label} hole {idx}", config)
        if text is not None:
            rings.append(text)
    return "(" + ", ".join(f"({r})" for r in rings) + ")"
