"""Exceptions raised when converting between coordinate systems."""

from __future__ import annotations


class SpiralError(ValueError):
    """Base class for spiral coordinate errors."""


class InvalidCubeError(SpiralError):
    """Raised when cube components do not sum to zero."""

    def __init__(self, q: int, r: int, s: int) -> None:
        super().__init__(f"q + r + s != 0 for cube ({q}, {r}, {s})")
        self.q = q
        self.r = r
        self.s = s


class CubeNotFoundError(SpiralError):
    """Raised when no spiral position on the expected ring matches a cube."""


__all__ = ["CubeNotFoundError", "InvalidCubeError", "SpiralError"]
