"""Data models and schemas.

Defines the data structures exchanged with callers:
- PolygonWithHoles / MultiPolygon: decoded geometry in ``(lat, lon)`` order
- DecodeResult: decode outcome with a failure reason
- Drawing: map-editor payload (coordinates + encoder mode flags)
"""

from annotation_wkt.models.drawing import Drawing
from annotation_wkt.models.geometry import (
    MultiPolygon,
    Point,
    PolygonWithHoles,
    Ring,
    distinct_point_count,
)
from annotation_wkt.models.result import (
    DecodeFailure,
    DecodeFailureReason,
    DecodeResult,
    WktDecodeError,
)

__all__ = [
    "DecodeFailure",
    "DecodeFailureReason",
    "DecodeResult",
    "Drawing",
    "MultiPolygon",
    "Point",
    "PolygonWithHoles",
    "Ring",
    "WktDecodeError",
    "distinct_point_count",
]
