"""Pydantic model for the drawing payload exchanged with map widgets.

A drawing is what the map editor holds while a user draws or edits an
annotation area: raw ``(lat, lon)`` coordinates plus the two mode flags
the encoder understands. Saved polygons round-trip through this shape:
``encode_drawing`` turns it into WKT, ``drawing_from_geometry`` turns a
decoded WKT back into it.

The UI sends camelCase keys (``isMultiPolygon``, ``isInverted``); both
spellings are accepted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Drawing(BaseModel):
    """Coordinates plus encoder mode flags.

    Attributes:
        coordinates: One ring of ``(lat, lon)`` points, or a list of
            rings when ``is_multi_polygon`` is set.
        is_multi_polygon: Encode each ring as its own polygon.
        is_inverted: Encode the ring as a hole in a world-spanning ring.
            Only valid for a single ring.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    coordinates: list[tuple[float, float]] | list[list[tuple[float, float]]] = Field(
        default_factory=list
    )
    is_multi_polygon: bool = Field(default=False, alias="isMultiPolygon")
    is_inverted: bool = Field(default=False, alias="isInverted")

    @model_validator(mode="after")
    def _check_mode(self) -> Drawing:
        if self.is_multi_polygon and self.is_inverted:
            msg = "is_inverted is only supported for a single ring"
            raise ValueError(msg)
        nested = [isinstance(c, list) for c in self.coordinates]
        if self.is_multi_polygon and not all(nested):
            msg = "is_multi_polygon requires a list of rings"
            raise ValueError(msg)
        if not self.is_multi_polygon and any(nested):
            msg = "a list of rings requires is_multi_polygon"
            raise ValueError(msg)
        return self

    @property
    def rings(self) -> list[list[tuple[float, float]]]:
        """Coordinates as a list of rings regardless of mode."""
        if self.is_multi_polygon:
            return [list(ring) for ring in self.coordinates]  # type: ignore[arg-type]
        return [list(self.coordinates)] if self.coordinates else []  # type: ignore[arg-type]
