from roguelike.dungeon.generator import Dungeon
from roguelike.dungeon.grid import TileGrid
from roguelike.engine.session import GameSession
from roguelike.entities.monsters import ORC, spawn_monster, spawn_player
from roguelike.entities.registry import EntityRegistry
from roguelike.input.actions import Intent
from roguelike.rendering.ascii import render_ascii
from roguelike.rendering.snapshot import (
    COLOR_DARK_GROUND,
    COLOR_LIGHT_WALL,
    CellState,
    build_frame,
    cell_state,
)
from roguelike.settings import GameConfig

# Two rooms joined by a doorway; the right room is out of sight at first
ROWS = [
    "###########",
    "#...#.....#",
    "#.........#",
    "#...#.....#",
    "###########",
]


def make_session():
    grid = TileGrid.from_lines(ROWS)
    entities = EntityRegistry()
    player_id = spawn_player(entities, (1, 1))
    spawn_monster(entities, ORC, 8, 3)
    config = GameConfig(
        map_width=11,
        map_height=5,
        room_min_size=2,
        room_max_size=3,
        torch_radius=3,
        fov_algorithm="shadowcast",
    )
    return GameSession(config, dungeon=Dungeon(grid=grid, entities=entities, player_id=player_id))


def walk_east(session):
    """Step through the doorway row to (7, 2), next to the orc."""
    session.handle_intent(Intent.MOVE_DOWN)
    for _ in range(6):
        session.handle_intent(Intent.MOVE_RIGHT)
    assert session.player.pos == (7, 2)


def test_three_presentation_states():
    session = make_session()
    grid, tracker = session.grid, session.visibility
    assert cell_state(grid, tracker, 1, 1) is CellState.VISIBLE
    assert cell_state(grid, tracker, 9, 2) is CellState.UNEXPLORED

    walk_east(session)
    # (1, 1) was seen from the start but is now beyond the torch radius
    assert cell_state(grid, tracker, 1, 1) is CellState.REMEMBERED


def test_frame_lists_only_visible_living_entities():
    session = make_session()
    frame = build_frame(session)
    assert [e.name for e in frame.entities] == ["player"]
    assert frame.entities[0].glyph == "@"

    walk_east(session)
    frame = build_frame(session)
    assert [e.name for e in frame.entities] == ["player", "orc"]

    session.entities.kill(1)
    frame = build_frame(session)
    assert [e.name for e in frame.entities] == ["player"]


def test_cell_colors_follow_state():
    session = make_session()
    frame = build_frame(session)
    assert frame.cell(0, 0).state is CellState.VISIBLE
    assert frame.cell(0, 0).color == COLOR_LIGHT_WALL
    assert frame.cell(10, 4).color is None

    walk_east(session)
    frame = build_frame(session)
    assert frame.cell(1, 1).state is CellState.REMEMBERED
    assert frame.cell(1, 1).color == COLOR_DARK_GROUND


def test_render_ascii_draws_player_over_terrain():
    session = make_session()
    lines = render_ascii(build_frame(session))
    assert len(lines) == 5
    assert all(len(line) == 11 for line in lines)
    assert lines[1][1] == "@"
    assert lines[0][0] == "#"
    assert lines[4][10] == " "
