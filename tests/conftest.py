"""Shared pytest fixtures for the annotation_wkt test suite."""

from __future__ import annotations

import pytest

from annotation_wkt.core.config import GeometryConfig
from annotation_wkt.core.constants import WEB_MERCATOR_MAX_LATITUDE

# ---------------------------------------------------------------------------
# Sample WKT fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_with_hole_wkt() -> str:
    """10x10 square at the origin with a 2x2 hole."""
    return "POLYGON ((0 0, 10 0, 10 10, 0 10, 0 0), (2 2, 4 2, 4 4, 2 4, 2 2))"


@pytest.fixture()
def two_triangles_wkt() -> str:
    """MULTIPOLYGON of two closed triangles."""
    return "MULTIPOLYGON (((0 0, 1 0, 1 1, 0 0)), ((5 5, 6 5, 6 6, 5 5)))"


# ---------------------------------------------------------------------------
# Drawn rings, in (lat, lon) order
# ---------------------------------------------------------------------------


@pytest.fixture()
def drawn_triangle() -> list[tuple[float, float]]:
    """Open triangle as the map editor hands it over."""
    return [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0)]


@pytest.fixture()
def drawn_field() -> list[tuple[float, float]]:
    """Open quadrilateral over a survey field in Central Europe."""
    return [(46.6040, 7.5210), (46.6130, 7.5210), (46.6130, 7.5080), (46.6040, 7.5080)]


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def web_mercator_config() -> GeometryConfig:
    """Config for consumers that cannot display the poles."""
    return GeometryConfig(max_latitude=WEB_MERCATOR_MAX_LATITUDE)
