"""WKT codec — composable decode / encode pipeline.

Converts ``POLYGON`` and ``MULTIPOLYGON`` Well-Known Text to and from the
``(lat, lon)`` model used by the map editor and the annotation store.

The codec is split into focused stages:
- **_tokenizer / _parser**: structure of the text (keywords, parentheses, separators)
- **_normalization**: axis swap, latitude clamp, longitude wrap, closure, number text
- **_validation**: ring size, encoder input cleaning, mode-flag contract
- **decoder**: text → ``PolygonWithHoles`` / ``MultiPolygon`` (never raises)
- **encoder**: coordinates or geometry → text (empty string on failure)
- **inversion**: world ring, inverted-polygon detection, geometry → ``Drawing``

Conventions:
- WKT pairs are ``lon lat``; every decoded or accepted point is ``(lat, lon)``
- Input rings may be open or closed; output rings are always closed
- One bad pair or hole does not fail the polygon; a bad outer ring does
"""

from __future__ import annotations

from annotation_wkt.codec._validation import UnsupportedEncodingError
from annotation_wkt.codec.decoder import (
    decode_geometry,
    decode_multipolygon,
    decode_polygon,
    parse_geometry,
    parse_multipolygon,
    parse_polygon,
    parse_polygon_outer,
)
from annotation_wkt.codec.encoder import (
    dumps,
    encode,
    encode_drawing,
    encode_multipolygon,
    encode_polygon,
)
from annotation_wkt.codec.inversion import (
    WORLD_RING,
    drawing_from_geometry,
    is_inverted_polygon,
    world_ring,
)
from annotation_wkt.models.result import DecodeFailureReason, WktDecodeError

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "WORLD_RING",
    "DecodeFailureReason",
    "UnsupportedEncodingError",
    "WktDecodeError",
    "decode_geometry",
    "decode_multipolygon",
    "decode_polygon",
    "drawing_from_geometry",
    "dumps",
    "encode",
    "encode_drawing",
    "encode_multipolygon",
    "encode_polygon",
    "is_inverted_polygon",
    "parse_geometry",
    "parse_multipolygon",
    "parse_polygon",
    "parse_polygon_outer",
    "world_ring",
]
