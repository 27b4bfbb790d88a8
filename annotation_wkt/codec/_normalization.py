"""Coordinate normalization helpers shared by the decoder and encoder.

Responsibilities:
- Convert raw WKT pair words to finite ``(lon, lat)`` floats
- Swap wire ``(lon, lat)`` to internal ``(lat, lon)`` and back
- Clamp latitude, wrap longitude
- Close rings and format numbers for output

Axis order is swapped in exactly two places: ``wire_pair_to_point``
(decode) and ``format_point`` (encode).
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from annotation_wkt.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LONGITUDE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from annotation_wkt.codec._parser import RawPair
    from annotation_wkt.models.geometry import Point

logger = logging.getLogger("annotation_wkt.codec")

_FULL_TURN = 360.0

# ASCII decimal or exponent notation only; float() alone also takes "1_0", "nan" and non-ASCII digits.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# ---------------------------------------------------------------------------
# Decode side
# ---------------------------------------------------------------------------


def parse_pair(raw: RawPair) -> tuple[float, float] | None:
    """Return the finite ``(lon, lat)`` of a raw pair, or ``None`` if malformed."""
    if len(raw.words) != 2 or not all(_NUMBER_RE.fullmatch(w) for w in raw.words):
        return None
    try:
        lon = float(raw.words[0])
        lat = float(raw.words[1])
    except ValueError:
        return None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        return None
    return (lon, lat)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def wire_pair_to_point(lon: float, lat: float, *, max_latitude: float = MAX_LATITUDE) -> Point:
    """Convert a wire ``(lon, lat)`` to an internal ``(lat, lon)`` point.

    Latitude is clamped to ``[-max_latitude, max_latitude]``. Longitude
    is kept as written. Input that looks axis-swapped is logged, never
    swapped.
    """
    if abs(lat) > MAX_LATITUDE and abs(lon) <= MAX_LATITUDE:
        logger.warning(
            "Possible axis swap in WKT pair '%s %s': WKT order is 'lon lat'",
            lon,
            lat,
        )
    clamped = clamp(lat, -max_latitude, max_latitude)
    if clamped != lat:
        logger.info("Clamped latitude from %s to %s (limit ±%s)", lat, clamped, max_latitude)
    return (clamped, lon)


# ---------------------------------------------------------------------------
# Encode side
# ---------------------------------------------------------------------------


def is_finite_point(point: Sequence[float]) -> bool:
    try:
        return len(point) == 2 and math.isfinite(point[0]) and math.isfinite(point[1])
    except TypeError:
        return False


def wrap_longitude(lon: float) -> float:
    """Wrap *lon* into ``[-180, 180]`` by whole turns (180 stays 180)."""
    if lon > MAX_LONGITUDE:
        return lon - _FULL_TURN * math.ceil((lon - MAX_LONGITUDE) / _FULL_TURN)
    if lon < MIN_LONGITUDE:
        return lon + _FULL_TURN * math.ceil((MIN_LONGITUDE - lon) / _FULL_TURN)
    return lon


def close_ring(points: Sequence[Point]) -> list[Point]:
    """Return *points* with the first point repeated at the end if needed."""
    closed = list(points)
    if closed and closed[0] != closed[-1]:
        closed.append(closed[0])
    return closed


def format_coordinate(value: float) -> str:
    """Shortest text for *value*; integral values drop the ``.0``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def format_point(point: Point, *, wrap: bool = False) -> str:
    """Format an internal ``(lat, lon)`` point as wire ``"lon lat"``."""
    lat, lon = point
    if wrap:
        lon = wrap_longitude(lon)
    return f"{format_coordinate(lon)} {format_coordinate(lat)}"


def format_ring(points: Sequence[Point], *, wrap: bool = False) -> str:
    return ", ".join(format_point(p, wrap=wrap) for p in points)
