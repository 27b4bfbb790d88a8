"""Tests for inverted-polygon helpers.

Covers:
- World ring shape
- Detection of decoded inverted polygons
- Geometry → Drawing conversion for re-opening saved WKT in the editor
"""

from __future__ import annotations

from annotation_wkt.codec import (
    WORLD_RING,
    drawing_from_geometry,
    encode,
    encode_drawing,
    is_inverted_polygon,
    parse_geometry,
    parse_polygon,
    world_ring,
)
from annotation_wkt.models.geometry import MultiPolygon, PolygonWithHoles


class TestWorldRing:
    def test_closed_and_densified(self) -> None:
        assert len(WORLD_RING) == 11
        assert WORLD_RING[0] == WORLD_RING[-1] == (-90.0, -180.0)

    def test_spans_domain(self) -> None:
        lats = {p[0] for p in WORLD_RING}
        lons = {p[1] for p in WORLD_RING}
        assert lats == {-90.0, 90.0}
        assert lons == {-180.0, -90.0, 0.0, 90.0, 180.0}

    def test_custom_latitude(self) -> None:
        ring = world_ring(80.0)
        assert {p[0] for p in ring} == {-80.0, 80.0}


class TestIsInvertedPolygon:
    def test_encoded_inversion_detected(self) -> None:
        polygon = parse_polygon(encode([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)], is_inverted=True))
        assert polygon is not None
        assert is_inverted_polygon(polygon)

    def test_simple_world_rectangle_detected(self) -> None:
        polygon = parse_polygon(
            "POLYGON ((-180 -90, 180 -90, 180 90, -180 90, -180 -90), (0 0, 10 0, 10 10, 0 0))"
        )
        assert polygon is not None
        assert is_inverted_polygon(polygon)

    def test_world_without_hole_is_not_inverted(self) -> None:
        assert not is_inverted_polygon(PolygonWithHoles(outer=WORLD_RING))

    def test_small_polygon_with_hole_is_not_inverted(self, square_with_hole_wkt: str) -> None:
        polygon = parse_polygon(square_with_hole_wkt)
        assert polygon is not None
        assert not is_inverted_polygon(polygon)


class TestDrawingFromGeometry:
    def test_inverted_single_hole(self) -> None:
        ring = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)]
        geometry = parse_geometry(encode(ring, is_inverted=True))
        assert geometry is not None

        drawing = drawing_from_geometry(geometry)

        assert drawing.is_inverted
        assert not drawing.is_multi_polygon
        assert drawing.coordinates == [*ring, ring[0]]

    def test_inverted_round_trip_through_drawing(self) -> None:
        text = encode([(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)], is_inverted=True)
        geometry = parse_geometry(text)
        assert geometry is not None
        assert encode_drawing(drawing_from_geometry(geometry)) == text

    def test_inverted_several_holes_become_plain_rings(self) -> None:
        geometry = parse_geometry(
            "POLYGON ((-180 -90, 180 -90, 180 90, -180 90, -180 -90),"
            " (0 0, 10 0, 10 10, 0 0), (20 20, 30 20, 30 30, 20 20))"
        )
        assert geometry is not None

        drawing = drawing_from_geometry(geometry)

        assert drawing.is_multi_polygon
        assert not drawing.is_inverted
        assert len(drawing.coordinates) == 2

    def test_plain_polygon_uses_outer_ring(self, square_with_hole_wkt: str) -> None:
        geometry = parse_geometry(square_with_hole_wkt)
        assert geometry is not None

        drawing = drawing_from_geometry(geometry)

        assert not drawing.is_inverted
        assert not drawing.is_multi_polygon
        assert drawing.coordinates == list(geometry[0].outer)

    def test_multipolygon_uses_outer_rings(self, two_triangles_wkt: str) -> None:
        geometry = parse_geometry(two_triangles_wkt)
        assert geometry is not None

        drawing = drawing_from_geometry(geometry)

        assert drawing.is_multi_polygon
        assert drawing.coordinates == [list(p.outer) for p in geometry]

    def test_empty_geometry(self) -> None:
        drawing = drawing_from_geometry(MultiPolygon())
        assert drawing.coordinates == []
