from __future__ import annotations
from dataclasses import dataclass, field
from typing import NamedTuple


class RGB(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(slots=True, frozen=True)
class Viewport:
    # drawable area in terminal cells; origin is added to every cell write
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def contains(self, col: int, row: int) -> bool:
        """True if (col, row), relative to the origin, falls inside the area."""
        return 0 <= col < self.width and 0 <= row < self.height


@dataclass(slots=True, frozen=True)
class CellDraw:
    x: int
    y: int
    glyph: str
    fg: RGB
    bg: RGB


@dataclass(slots=True)
class SkyFrame:
    viewport: Viewport
    background: RGB
    cells: list[CellDraw] = field(default_factory=list)
