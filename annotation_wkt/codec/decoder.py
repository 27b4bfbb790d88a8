"""WKT decoder — text to ``PolygonWithHoles`` / ``MultiPolygon``.

Two families of entry points share one implementation:

- ``decode_*`` return a :class:`DecodeResult` carrying either the value
  or a :class:`DecodeFailure` with a reason and a character position.
- ``parse_*`` return the value or ``None``, for callers that only need
  "valid geometry or not".

Neither family raises for malformed text. Failures are resolved at the
lowest level possible:

- a malformed or non-finite coordinate pair is dropped from its ring;
- a hole with fewer than 3 distinct points is discarded;
- a polygon whose *outer* ring is too small fails, and inside a
  ``MULTIPOLYGON`` it is skipped;
- a ``MULTIPOLYGON`` with no surviving polygon fails.

Latitudes are clamped to ``config.max_latitude``; longitudes are kept as
written. WKT pairs are ``lon lat``; decoded points are ``(lat, lon)``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from annotation_wkt.codec._normalization import parse_pair, wire_pair_to_point
from annotation_wkt.codec._parser import parse_wkt, peek_keyword
from annotation_wkt.codec._validation import is_valid_ring
from annotation_wkt.core.config import DEFAULT_CONFIG, GeometryConfig
from annotation_wkt.core.constants import MIN_RING_POINTS, MULTIPOLYGON_KEYWORD, POLYGON_KEYWORD
from annotation_wkt.models.geometry import MultiPolygon, PolygonWithHoles, distinct_point_count
from annotation_wkt.models.result import DecodeFailureReason, DecodeResult, WktDecodeError

if TYPE_CHECKING:
    from collections.abc import Callable

    from annotation_wkt.codec._parser import ParsedGeometry, RawPolygon, RawRing
    from annotation_wkt.models.geometry import Point, Ring

logger = logging.getLogger("annotation_wkt.codec")

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Public API: result-returning
# ---------------------------------------------------------------------------


def decode_polygon(
    text: str | None, *, config: GeometryConfig | None = None
) -> DecodeResult[PolygonWithHoles]:
    """Decode a ``POLYGON (...)`` literal, reporting why it failed if it did."""
    return _guarded(_build_polygon_text, text, config, POLYGON_KEYWORD)


def decode_multipolygon(
    text: str | None, *, config: GeometryConfig | None = None
) -> DecodeResult[MultiPolygon]:
    """Decode a ``MULTIPOLYGON (...)`` literal, reporting why it failed if it did."""
    return _guarded(_build_multipolygon_text, text, config, MULTIPOLYGON_KEYWORD)


def decode_geometry(
    text: str | None, *, config: GeometryConfig | None = None
) -> DecodeResult[MultiPolygon]:
    """Decode either keyword; a single polygon becomes a one-element MultiPolygon."""
    return _guarded(_build_geometry_text, text, config, "geometry")


# ---------------------------------------------------------------------------
# Public API: optional-returning
# ---------------------------------------------------------------------------


def parse_polygon(
    text: str | None, *, config: GeometryConfig | None = None
) -> PolygonWithHoles | None:
    """Parse a ``POLYGON`` literal, or return ``None``.

    Example::

        >>> parse_polygon("POLYGON ((30 10, 40 40, 20 40, 30 10))").outer[0]
        (10.0, 30.0)
    """
    return decode_polygon(text, config=config).value


def parse_multipolygon(
    text: str | None, *, config: GeometryConfig | None = None
) -> MultiPolygon | None:
    """Parse a ``MULTIPOLYGON`` literal, or return ``None``."""
    return decode_multipolygon(text, config=config).value


def parse_geometry(
    text: str | None, *, config: GeometryConfig | None = None
) -> MultiPolygon | None:
    """Parse a ``POLYGON`` or ``MULTIPOLYGON`` literal as a MultiPolygon, or ``None``.

    Returns ``None`` for empty input and for any other geometry type.
    """
    return decode_geometry(text, config=config).value


def parse_polygon_outer(text: str | None, *, config: GeometryConfig | None = None) -> Ring | None:
    """Parse a ``POLYGON`` literal and return only its outer ring, or ``None``."""
    polygon = parse_polygon(text, config=config)
    return polygon.outer if polygon is not None else None


# ---------------------------------------------------------------------------
# Entry-point guard
# ---------------------------------------------------------------------------


def _guarded(
    build: Callable[[str, GeometryConfig], T],
    text: str | None,
    config: GeometryConfig | None,
    label: str,
) -> DecodeResult[T]:
    """Run *build* and convert every failure into a failed ``DecodeResult``."""
    try:
        if text is None or not text.strip():
            raise WktDecodeError(
                "WKT input is empty", reason=DecodeFailureReason.EMPTY_INPUT, position=0
            )
        return DecodeResult.success(build(text, config or DEFAULT_CONFIG))
    except WktDecodeError as exc:
        if exc.reason is DecodeFailureReason.EMPTY_INPUT:
            logger.debug("No %s to decode: input is empty", label)
        else:
            logger.warning("Could not decode %s (%s): %s", label, exc.reason.value, exc.message)
        return DecodeResult.fail(exc.reason, exc.message, exc.position)
    except Exception as exc:
        logger.exception("Unexpected error while decoding %s", label)
        return DecodeResult.fail(
            DecodeFailureReason.SYNTAX_ERROR,
            f"Unexpected error while decoding {label}: {exc}",
        )


def _parse_expecting(text: str, *keywords: str) -> ParsedGeometry:
    keyword = peek_keyword(text)
    if keyword not in keywords:
        expected = " or ".join(keywords)
        shown = keyword or text.strip()[:20]
        msg = f"Expected {expected}, found {shown!r}"
        raise WktDecodeError(
            msg,
            reason=DecodeFailureReason.UNKNOWN_KEYWORD,
            position=len(text) - len(text.lstrip()),
        )
    return parse_wkt(text)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _build_polygon_text(text: str, config: GeometryConfig) -> PolygonWithHoles:
    parsed = _parse_expecting(text, POLYGON_KEYWORD)
    return _build_polygon(parsed.polygons[0], config, "POLYGON")


def _build_multipolygon_text(text: str, config: GeometryConfig) -> MultiPolygon:
    parsed = _parse_expecting(text, MULTIPOLYGON_KEYWORD)
    return _build_multipolygon(parsed, config)


def _build_geometry_text(text: str, config: GeometryConfig) -> MultiPolygon:
    parsed = _parse_expecting(text, POLYGON_KEYWORD, MULTIPOLYGON_KEYWORD)
    if parsed.keyword == POLYGON_KEYWORD:
        return MultiPolygon(polygons=(_build_polygon(parsed.polygons[0], config, "POLYGON"),))
    return _build_multipolygon(parsed, config)


def _build_multipolygon(parsed: ParsedGeometry, config: GeometryConfig) -> MultiPolygon:
    polygons: list[PolygonWithHoles] = []
    first_failure: WktDecodeError | None = None
    for idx, raw_polygon in enumerate(parsed.polygons):
        try:
            polygons.append(_build_polygon(raw_polygon, config, f"MULTIPOLYGON part {idx}"))
        except WktDecodeError as exc:
            logger.warning("Skipping MULTIPOLYGON part %d: %s", idx, exc.message)
            if first_failure is None:
                first_failure = exc

    if not polygons:
        if first_failure is None:
            msg = "MULTIPOLYGON has no polygons"
            raise WktDecodeError(msg, reason=DecodeFailureReason.INSUFFICIENT_POINTS)
        msg = f"MULTIPOLYGON has no valid polygon; first failure: {first_failure.message}"
        raise WktDecodeError(msg, reason=first_failure.reason, position=first_failure.position)
    return MultiPolygon(polygons=tuple(polygons))


def _build_polygon(raw: RawPolygon, config: GeometryConfig, label: str) -> PolygonWithHoles:
    """Build one polygon; only an invalid outer ring is fatal."""
    outer_raw, *hole_raws = raw.rings

    outer, dropped = _build_ring(outer_raw, config, f"{label} outer ring")
    if not is_valid_ring(outer):
        distinct = distinct_point_count(outer)
        reason = (
            DecodeFailureReason.COORDINATE_PARSE_FAILURE
            if dropped
            else DecodeFailureReason.INSUFFICIENT_POINTS
        )
        msg = (
            f"{label} outer ring has {distinct} distinct valid point(s), "
            f"need at least {MIN_RING_POINTS}"
        )
        if dropped:
            msg += f" ({dropped} malformed pair(s) dropped)"
        raise WktDecodeError(msg, reason=reason, position=outer_raw.position)

    holes: list[Ring] = []
    for idx, hole_raw in enumerate(hole_raws):
        hole, _ = _build_ring(hole_raw, config, f"{label} hole {idx}")
        if not is_valid_ring(hole):
            logger.warning(
                "Discarding %s hole %d at position %d: %d distinct valid point(s)",
                label,
                idx,
                hole_raw.position,
                distinct_point_count(hole),
            )
            continue
        holes.append(tuple(hole))

    return PolygonWithHoles(outer=tuple(outer), holes=tuple(holes))


def _build_ring(raw: RawRing, config: GeometryConfig, label: str) -> tuple[list[Point], int]:
    """Convert raw pairs to points; returns the points and the number dropped."""
    points: list[Point] = []
    dropped = 0
    for pair in raw.pairs:
        parsed = parse_pair(pair)
        if parsed is None:
            logger.warning(
                "Dropping malformed coordinate pair %r at position %d in %s",
                " ".join(pair.words),
                pair.position,
                label,
            )
            dropped += 1
            continue
        lon, lat = parsed
        points.append(wire_pair_to_point(lon, lat, max_latitude=config.max_latitude))
    return points, dropped
