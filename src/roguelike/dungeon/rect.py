from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room rectangle with ``x2 = x1 + w`` and ``y2 = y1 + h``.

    The outermost rows/columns are walls; only the interior is carved.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> Tuple[int, int]:
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2

    def intersects(self, other: "Rect") -> bool:
        # Inclusive bounds: rectangles sharing an edge coordinate count as overlapping
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> Tuple[range, range]:
        """Column and row ranges of the carvable interior."""
        return range(self.x1 + 1, self.x2), range(self.y1 + 1, self.y2)
