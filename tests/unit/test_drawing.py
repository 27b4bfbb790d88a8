"""Tests for the Drawing payload model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from annotation_wkt.models.drawing import Drawing


class TestDrawingPayload:
    """Validation of the map editor payload."""

    def test_defaults(self) -> None:
        drawing = Drawing()
        assert drawing.coordinates == []
        assert not drawing.is_multi_polygon
        assert not drawing.is_inverted
        assert drawing.rings == []

    def test_camel_case_keys_from_ui(self) -> None:
        drawing = Drawing.model_validate(
            {"coordinates": [[0, 0], [0, 10], [10, 10]], "isInverted": True}
        )
        assert drawing.is_inverted
        assert drawing.coordinates == [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)]

    def test_snake_case_keys(self) -> None:
        drawing = Drawing(coordinates=[[(0, 0), (0, 1), (1, 1)]], is_multi_polygon=True)
        assert drawing.is_multi_polygon
        assert drawing.rings == [[(0.0, 0.0), (0.0, 1.0), (1.0, 1.0)]]

    def test_single_ring_rings_property(self) -> None:
        drawing = Drawing(coordinates=[(0, 0), (0, 1), (1, 1)])
        assert drawing.rings == [[(0.0, 0.0), (0.0, 1.0), (1.0, 1.0)]]

    def test_multi_and_inverted_rejected(self) -> None:
        with pytest.raises(ValidationError, match="single ring"):
            Drawing(coordinates=[[(0, 0), (0, 1), (1, 1)]], is_multi_polygon=True, is_inverted=True)

    def test_multi_requires_rings(self) -> None:
        with pytest.raises(ValidationError, match="list of rings"):
            Drawing(coordinates=[(0, 0), (0, 1), (1, 1)], is_multi_polygon=True)

    def test_rings_require_multi(self) -> None:
        with pytest.raises(ValidationError, match="requires is_multi_polygon"):
            Drawing(coordinates=[[(0, 0), (0, 1), (1, 1)]])

    def test_frozen(self) -> None:
        drawing = Drawing()
        with pytest.raises(ValidationError):
            drawing.is_inverted = True  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        drawing = Drawing(coordinates=[(0, 0), (0, 1), (1, 1)], is_inverted=True)
        restored = Drawing.model_validate_json(drawing.model_dump_json(by_alias=True))
        assert restored == drawing
