"""Value types for decoded and drawable polygon geometry.

All points are ``(lat, lon)`` tuples — the axis order used by the map
widgets and the annotation store. WKT's ``(lon, lat)`` order only exists
inside the codec.

Structures are frozen dataclasses; lists passed in by callers are copied
into tuples on construction so a value can be shared freely between
threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from annotation_wkt.core.constants import MIN_RING_POINTS
from annotation_wkt.core.exceptions import GeometryValidationError

Point: TypeAlias = tuple[float, float]
Ring: TypeAlias = tuple[Point, ...]


def distinct_point_count(ring: Sequence[Sequence[float]]) -> int:
    """Number of distinct points in *ring* (a closing duplicate counts once)."""
    return len({(float(p[0]), float(p[1])) for p in ring})


def _coerce_ring(model: str, field_name: str, raw: Iterable[Sequence[float]]) -> Ring:
    points: list[Point] = []
    for idx, p in enumerate(raw):
        if len(p) != 2:
            raise GeometryValidationError(
                model, field_name, f"point {idx} must be a (lat, lon) pair, got {len(p)} value(s)"
            )
        points.append((float(p[0]), float(p[1])))
    return tuple(points)


@dataclass(frozen=True, slots=True)
class PolygonWithHoles:
    """One outer ring plus zero or more hole rings.

    Holes keep their source order; no containment check is performed.

    Attributes:
        outer: Outer boundary as ``(lat, lon)`` points, open or closed.
        holes: Interior rings, each as ``(lat, lon)`` points.

    Raises:
        GeometryValidationError: If the outer ring or any hole has fewer
            than 3 distinct points.
    """

    outer: Ring
    holes: tuple[Ring, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        outer = _coerce_ring("PolygonWithHoles", "outer", self.outer)
        if distinct_point_count(outer) < MIN_RING_POINTS:
            raise GeometryValidationError(
                "PolygonWithHoles",
                "outer",
                f"needs at least {MIN_RING_POINTS} distinct points, got {distinct_point_count(outer)}",
            )
        holes = tuple(_coerce_ring("PolygonWithHoles", "holes", h) for h in self.holes)
        for idx, hole in enumerate(holes):
            if distinct_point_count(hole) < MIN_RING_POINTS:
                raise GeometryValidationError(
                    "PolygonWithHoles",
                    "holes",
                    f"hole {idx} needs at least {MIN_RING_POINTS} distinct points",
                )
        object.__setattr__(self, "outer", outer)
        object.__setattr__(self, "holes", holes)

    @property
    def vertex_count(self) -> int:
        """Number of points in the outer ring as stored."""
        return len(self.outer)

    @property
    def has_holes(self) -> bool:
        return len(self.holes) > 0

    def to_dict(self) -> dict[str, object]:
        """Serialise to JSON-friendly nested lists of ``[lat, lon]``."""
        return {
            "outer": [list(p) for p in self.outer],
            "holes": [[list(p) for p in ring] for ring in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PolygonWithHoles:
        """Deserialise from :meth:`to_dict` output.

        Raises:
            TypeError: If ``outer`` or ``holes`` is not a list.
            GeometryValidationError: If a ring is too small.
        """
        outer_raw = data.get("outer", [])
        if not isinstance(outer_raw, list):
            msg = f"outer must be a list, got {type(outer_raw).__name__}"
            raise TypeError(msg)
        holes_raw = data.get("holes", [])
        if not isinstance(holes_raw, list):
            msg = f"holes must be a list, got {type(holes_raw).__name__}"
            raise TypeError(msg)
        return cls(outer=tuple(outer_raw), holes=tuple(holes_raw))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """An ordered collection of polygons, in source order.

    A decoded single ``POLYGON`` is wrapped as a one-element
    ``MultiPolygon`` so downstream code handles one shape only.
    """

    polygons: tuple[PolygonWithHoles, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        polygons = tuple(self.polygons)
        for idx, polygon in enumerate(polygons):
            if not isinstance(polygon, PolygonWithHoles):
                raise GeometryValidationError(
                    "MultiPolygon",
                    "polygons",
                    f"item {idx} must be PolygonWithHoles, got {type(polygon).__name__}",
                )
        object.__setattr__(self, "polygons", polygons)

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[PolygonWithHoles]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> PolygonWithHoles:
        return self.polygons[index]

    def to_dict(self) -> dict[str, object]:
        return {"polygons": [p.to_dict() for p in self.polygons]}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> MultiPolygon:
        """Deserialise from :meth:`to_dict` output.

        Raises:
            TypeError: If ``polygons`` is not a list of dicts.
        """
        polygons_raw = data.get("polygons", [])
        if not isinstance(polygons_raw, list):
            msg = f"polygons must be a list, got {type(polygons_raw).__name__}"
            raise TypeError(msg)
        polygons: list[PolygonWithHoles] = []
        for item in polygons_raw:
            if not isinstance(item, dict):
                msg = f"polygon entries must be dicts, got {type(item).__name__}"
                raise TypeError(msg)
            polygons.append(PolygonWithHoles.from_dict(item))
        return cls(polygons=tuple(polygons))
