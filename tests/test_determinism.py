from roguelike.dungeon.generator import DungeonGenerator
from roguelike.settings import GameConfig


def _layout(seed):
    dungeon = DungeonGenerator(GameConfig(seed=seed)).generate()
    entities = [(e.name, e.pos) for e in dungeon.entities]
    return dungeon.grid.snapshot(), dungeon.rooms, entities


def test_same_seed_same_layout():
    assert _layout(42) == _layout(42)


def test_injected_random_matches_seed():
    import random

    a = DungeonGenerator(GameConfig(seed=7)).generate()
    b = DungeonGenerator(GameConfig(), rng=random.Random(7)).generate()
    assert a.grid.snapshot() == b.grid.snapshot()
    assert a.rooms == b.rooms
