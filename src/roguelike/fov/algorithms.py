"""Field-of-view oracles.

Both algorithms answer the same question: which cells within ``radius``
(Euclidean, ``dx*dx + dy*dy <= radius*radius``) of the origin are connected
to it by a line of non-sight-blocking cells. ``light_walls`` decides whether
the sight-blocking cell that ends a line is itself reported visible. A radius
of 0 means unlimited range. The origin is always visible.

- BASIC: casts a ray to every cell on the perimeter of the bounding square.
- SHADOWCAST: recursive shadowcasting over eight octants.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Protocol, Set, Tuple

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

# Octant transforms (xx, xy, yx, yy) for shadowcasting
_OCTANTS = (
    (1, 0, 0, 1),
    (0, 1, 1, 0),
    (0, -1, 1, 0),
    (-1, 0, 0, 1),
    (-1, 0, 0, -1),
    (0, -1, -1, 0),
    (0, 1, -1, 0),
    (1, 0, 0, -1),
)


class SightMap(Protocol):
    """Read-only view of the sight-blocking layer used by the FOV oracles."""

    @property
    def width(self) -> int: ...
    @property
    def height(self) -> int: ...
    def in_bounds(self, x: int, y: int) -> bool: ...
    def blocks_sight(self, x: int, y: int) -> bool: ...


class FovAlgorithm(Enum):
    BASIC = "basic"
    SHADOWCAST = "shadowcast"

    @classmethod
    def parse(cls, value: "str | FovAlgorithm") -> "FovAlgorithm":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown FOV algorithm {value!r}; expected one of: {names}") from None


def _effective_radius(grid: SightMap, radius: int) -> int:
    if radius <= 0:
        # Unlimited: reach the farthest corner under the Euclidean test
        return math.ceil(math.hypot(grid.width, grid.height))
    return radius


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def _cast_basic(grid: SightMap, origin: Coord, radius: int, light_walls: bool) -> Set[Coord]:
    ox, oy = origin
    r2 = radius * radius
    visible: Set[Coord] = {origin}

    targets = []
    for i in range(-radius, radius + 1):
        targets.append((i, -radius))
        targets.append((i, radius))
    for j in range(-radius + 1, radius):
        targets.append((-radius, j))
        targets.append((radius, j))

    for tx, ty in targets:
        steps = max(abs(tx), abs(ty))
        sx = 1 if tx >= 0 else -1
        sy = 1 if ty >= 0 else -1
        for i in range(1, steps + 1):
            # Step along the major axis; round the minor one symmetrically
            dx = sx * _round_half_up(i * abs(tx) / steps)
            dy = sy * _round_half_up(i * abs(ty) / steps)
            if dx * dx + dy * dy > r2:
                break
            x, y = ox + dx, oy + dy
            if not grid.in_bounds(x, y):
                break
            if grid.blocks_sight(x, y):
                if light_walls:
                    visible.add((x, y))
                break
            visible.add((x, y))
    return visible


def _cast_octant(
    grid: SightMap,
    origin: Coord,
    row: int,
    start: float,
    end: float,
    radius: int,
    transform: Tuple[int, int, int, int],
    light_walls: bool,
    visible: Set[Coord],
) -> None:
    if start < end:
        return
    ox, oy = origin
    xx, xy, yx, yy = transform
    r2 = radius * radius
    new_start = 0.0
    for j in range(row, radius + 1):
        dx, dy = -j - 1, -j
        blocked = False
        while dx <= 0:
            dx += 1
            x = ox + dx * xx + dy * xy
            y = oy + dx * yx + dy * yy
            l_slope = (dx - 0.5) / (dy + 0.5)
            r_slope = (dx + 0.5) / (dy - 0.5)
            if start < r_slope:
                continue
            if end > l_slope:
                break
            if not grid.in_bounds(x, y):
                continue
            opaque = grid.blocks_sight(x, y)
            if dx * dx + dy * dy <= r2 and (light_walls or not opaque):
                visible.add((x, y))
            if blocked:
                if opaque:
                    new_start = r_slope
                    continue
                blocked = False
                start = new_start
            elif opaque and j < radius:
                blocked = True
                _cast_octant(grid, origin, j + 1, start, l_slope, radius, transform, light_walls, visible)
                new_start = r_slope
        if blocked:
            break


def _cast_shadow(grid: SightMap, origin: Coord, radius: int, light_walls: bool) -> Set[Coord]:
    visible: Set[Coord] = {origin}
    for transform in _OCTANTS:
        _cast_octant(grid, origin, 1, 1.0, 0.0, radius, transform, light_walls, visible)
    return visible


def compute_fov(
    grid: SightMap,
    origin: Coord,
    radius: int,
    light_walls: bool = True,
    algorithm: "FovAlgorithm | str" = FovAlgorithm.BASIC,
) -> Set[Coord]:
    """Return the set of (x, y) cells visible from ``origin``.

    Raises:
        IndexError: if ``origin`` lies outside the grid.
        ValueError: for a negative radius or an unknown algorithm.
    """
    ox, oy = origin
    if not grid.in_bounds(ox, oy):
        raise IndexError(f"FOV origin out of bounds: ({ox}, {oy})")
    if radius < 0:
        raise ValueError("radius must not be negative")
    algo = FovAlgorithm.parse(algorithm)
    r = _effective_radius(grid, radius)
    if algo is FovAlgorithm.SHADOWCAST:
        visible = _cast_shadow(grid, origin, r, light_walls)
    else:
        visible = _cast_basic(grid, origin, r, light_walls)
    logger.debug("FOV %s from %s r=%d: %d cells", algo.value, origin, r, len(visible))
    return visible


__all__ = ["Coord", "FovAlgorithm", "SightMap", "compute_fov"]
