"""Conversion between codec geometry and shapely geometries.

shapely works in ``(x, y)`` = ``(lon, lat)``; codec geometry is
``(lat, lon)``. The swap happens here and nowhere else in this module.

Used by callers that need area, containment or reprojection, which the
codec itself deliberately does not compute.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from annotation_wkt.core.exceptions import ContractError
from annotation_wkt.models.geometry import MultiPolygon, PolygonWithHoles

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
    from shapely.geometry import Polygon as ShapelyPolygon
    from shapely.geometry.base import BaseGeometry

    from annotation_wkt.models.geometry import Ring

logger = logging.getLogger("annotation_wkt.utils.shapely_interop")


class InteropError(ContractError):
    """Raised when a shapely geometry has no codec equivalent."""

    default_operation = "shapely_interop"
    default_code = "SHAPELY_INTEROP_FAILED"


def _to_xy(ring: Ring) -> list[tuple[float, float]]:
    return [(lon, lat) for lat, lon in ring]


def _from_xy(coords: Sequence[Sequence[float]]) -> Ring:
    return tuple((float(c[1]), float(c[0])) for c in coords)


def polygon_to_shapely(polygon: PolygonWithHoles) -> ShapelyPolygon:
    """Build a shapely ``Polygon`` from a codec polygon."""
    from shapely.geometry import Polygon

    return Polygon(_to_xy(polygon.outer), [_to_xy(h) for h in polygon.holes])


def to_shapely(geometry: PolygonWithHoles | MultiPolygon) -> ShapelyPolygon | ShapelyMultiPolygon:
    """Build the shapely equivalent of *geometry*.

    Raises:
        TypeError: If *geometry* is not a codec polygon or multipolygon.
    """
    from shapely.geometry import MultiPolygon as ShapelyMultiPolygon

    if isinstance(geometry, PolygonWithHoles):
        return polygon_to_shapely(geometry)
    if isinstance(geometry, MultiPolygon):
        return ShapelyMultiPolygon([polygon_to_shapely(p) for p in geometry])
    msg = f"Cannot convert {type(geometry).__name__} to shapely"
    raise TypeError(msg)


def from_shapely(geom: BaseGeometry) -> MultiPolygon:
    """Convert a shapely ``Polygon`` or ``MultiPolygon`` to a codec MultiPolygon.

    Raises:
        InteropError: If *geom* is empty or of another geometry type.
    """
    if geom.is_empty:
        msg = "Cannot convert an empty shapely geometry"
        raise InteropError(msg)

    if geom.geom_type == "Polygon":
        parts = [geom]
    elif geom.geom_type == "MultiPolygon":
        parts = list(geom.geoms)
    else:
        msg = f"Unsupported shapely geometry type {geom.geom_type}; expected Polygon or MultiPolygon"
        raise InteropError(msg)

    if any(getattr(part, "has_z", False) for part in parts):
        logger.warning("Dropping Z values while converting %s from shapely", geom.geom_type)

    polygons = [
        PolygonWithHoles(
            outer=_from_xy(part.exterior.coords),
            holes=tuple(_from_xy(interior.coords) for interior in part.interiors),
        )
        for part in parts
    ]
    return MultiPolygon(polygons=tuple(polygons))
