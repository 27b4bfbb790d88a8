"""Ring validation helpers for the WKT codec.

Responsibilities:
- Ring size checks (3 distinct points, closing duplicate excluded)
- Encoder input cleaning (drop non-finite points)
- Encoder mode-flag contract
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from annotation_wkt.codec._normalization import is_finite_point
from annotation_wkt.core.constants import MIN_RING_POINTS
from annotation_wkt.core.exceptions import ContractError
from annotation_wkt.models.geometry import distinct_point_count

if TYPE_CHECKING:
    from collections.abc import Sequence

    from annotation_wkt.models.geometry import Point

logger = logging.getLogger("annotation_wkt.codec")


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class UnsupportedEncodingError(ContractError):
    """Raised when encoder mode flags are combined in an undefined way."""

    default_operation = "encode"
    default_code = "WKT_ENCODING_UNSUPPORTED"


# ---------------------------------------------------------------------------
# Ring checks
# ---------------------------------------------------------------------------


def is_valid_ring(points: Sequence[Point]) -> bool:
    """Whether *points* has at least 3 distinct points."""
    return distinct_point_count(points) >= MIN_RING_POINTS


def clean_ring(points: Sequence[Sequence[float]], ring_label: str) -> list[Point]:
    """Return the finite ``(lat, lon)`` points of an encoder input ring.

    Non-finite or malformed points are dropped with a warning.
    """
    cleaned: list[Point] = []
    for idx, p in enumerate(points):
        if not is_finite_point(p):
            logger.warning("Dropping non-finite point %d %r from %s", idx, p, ring_label)
            continue
        cleaned.append((float(p[0]), float(p[1])))
    return cleaned


def check_encode_flags(*, is_multi_polygon: bool, is_inverted: bool) -> None:
    """Reject inverted multipolygon encoding.

    Raises:
        UnsupportedEncodingError: If both flags are set.
    """
    if is_multi_polygon and is_inverted:
        msg = "Inverted encoding is only defined for a single ring, not a multipolygon"
        raise UnsupportedEncodingError(msg)
