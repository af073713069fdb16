"""Validated layout settings for projecting the spiral onto a window."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import Point, Pos
from .projection import hex_corners, point_to_pos, pos_to_point


class SpiralLayout(BaseModel):
    """Hex radius and window centre shared by the projection helpers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hex_radius: float = Field(default=32.0, gt=0.0)
    center_x: float = Field(default=0.0)
    center_y: float = Field(default=0.0)

    @field_validator("hex_radius", "center_x", "center_y")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @classmethod
    def from_window(cls, width: float, height: float, hex_radius: float = 32.0) -> "SpiralLayout":
        """Layout with the centre hex in the middle of a ``width`` x ``height`` window."""

        if width < 0 or height < 0:
            raise ValueError("window dimensions must be non-negative")
        return cls(hex_radius=hex_radius, center_x=width / 2.0, center_y=height / 2.0)

    @property
    def center(self) -> Point:
        return self.center_x, self.center_y

    def to_point(self, pos: Pos) -> Point:
        return pos_to_point(pos, self.hex_radius, self.center)

    def to_position(self, point: Point) -> Pos:
        return point_to_pos(point, self.hex_radius, self.center)

    def corners(self, pos: Pos) -> list[Point]:
        return hex_corners(pos, self.hex_radius, self.center)


__all__ = ["SpiralLayout"]
