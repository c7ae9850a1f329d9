import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from roguelike.settings import GameConfig  # noqa: E402


class ScriptedRandom:
    """Replays fixed draws for randint() and random(), checking randint ranges."""

    def __init__(self, ints: Iterable[int], floats: Iterable[float] = ()) -> None:
        self._ints: List[int] = list(ints)
        self._floats: List[float] = list(floats)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        if not self._ints:
            raise AssertionError(f"randint({a}, {b}) called after script ran out")
        value = self._ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside randint({a}, {b})"
        self.calls.append(("randint", a, b, value))
        return value

    def random(self) -> float:
        if not self._floats:
            raise AssertionError("random() called after script ran out")
        value = self._floats.pop(0)
        self.calls.append(("random", value))
        return value

    @property
    def exhausted(self) -> bool:
        return not self._ints and not self._floats


@pytest.fixture
def scripted_rng():
    return ScriptedRandom


@pytest.fixture
def small_config():
    """30x20 map, two attempts, no monsters."""
    return GameConfig(
        map_width=30,
        map_height=20,
        room_min_size=5,
        room_max_size=8,
        max_rooms=2,
        max_room_monsters=0,
        torch_radius=10,
        seed=1,
    )
