from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidCubeError

Pos = int  # spiral position, 0 is the centre hex
RingIdx = int
EdgeIdx = int  # 0 (top) .. 5, clockwise
Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r


@dataclass(frozen=True, slots=True)
class Cube:
    q: int
    r: int
    s: int

    ORIGIN: ClassVar["Cube"]

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCubeError(self.q, self.r, self.s)

    def abs_largest(self) -> int:
        """Largest absolute component, i.e. the ring the cube lies on."""
        return max(abs(self.q), abs(self.r), abs(self.s))

    def as_tuple(self) -> tuple[int, int, int]:
        return self.q, self.r, self.s


Cube.ORIGIN = Cube(0, 0, 0)
