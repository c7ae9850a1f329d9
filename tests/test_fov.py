import pytest

from roguelike.dungeon.grid import TileGrid
from roguelike.fov.algorithms import FovAlgorithm, compute_fov

ALGORITHMS = [FovAlgorithm.BASIC, FovAlgorithm.SHADOWCAST]


def disk(grid, origin, radius):
    ox, oy = origin
    return {
        (x, y)
        for x, y in grid.coords()
        if (x - ox) ** 2 + (y - oy) ** 2 <= radius * radius
    }


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_open_grid_visibility_is_exactly_the_radius_disk(algorithm):
    grid = TileGrid(80, 45, fill_wall=False)
    origin = (40, 22)
    visible = compute_fov(grid, origin, 10, algorithm=algorithm)
    assert visible == disk(grid, origin, 10)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_disk_is_clipped_at_grid_edges(algorithm):
    grid = TileGrid(12, 8, fill_wall=False)
    visible = compute_fov(grid, (1, 1), 5, algorithm=algorithm)
    assert visible == disk(grid, (1, 1), 5)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_wall_blocks_sight_and_wall_is_visible(algorithm):
    rows = [
        "..#....",
        "..#....",
        "..#....",
        "..#....",
        "..#....",
    ]
    grid = TileGrid.from_lines(rows)
    visible = compute_fov(grid, (1, 2), 10, light_walls=True, algorithm=algorithm)

    assert (2, 2) in visible
    assert all(x <= 2 for x, _ in visible)
    assert (0, 2) in visible and (1, 0) in visible


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_light_walls_off_hides_walls(algorithm):
    rows = [
        "..#....",
        "..#....",
        "..#....",
    ]
    grid = TileGrid.from_lines(rows)
    visible = compute_fov(grid, (1, 1), 10, light_walls=False, algorithm=algorithm)
    assert (2, 1) not in visible
    assert all(not grid.blocks_sight(x, y) for x, y in visible)
    assert (0, 1) in visible


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_pillar_casts_a_shadow(algorithm):
    rows = [
        "........",
        "........",
        "....#...",
        "........",
        "........",
    ]
    grid = TileGrid.from_lines(rows)
    visible = compute_fov(grid, (1, 2), 10, algorithm=algorithm)
    assert (4, 2) in visible
    assert (5, 2) not in visible
    assert (6, 2) not in visible


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_origin_always_visible_even_when_enclosed(algorithm):
    rows = [
        "###",
        "#.#",
        "###",
    ]
    grid = TileGrid.from_lines(rows)
    visible = compute_fov(grid, (1, 1), 4, light_walls=True, algorithm=algorithm)
    assert visible == {(x, y) for x, y in grid.coords()}
    visible = compute_fov(grid, (1, 1), 4, light_walls=False, algorithm=algorithm)
    assert visible == {(1, 1)}


def test_zero_radius_is_unlimited():
    grid = TileGrid(30, 3, fill_wall=False)
    visible = compute_fov(grid, (0, 1), 0, algorithm="shadowcast")
    assert visible == set(grid.coords())


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_zero_radius_reaches_far_corner_of_full_size_map(algorithm):
    grid = TileGrid(80, 45, fill_wall=False)
    visible = compute_fov(grid, (0, 0), 0, algorithm=algorithm)
    assert (79, 44) in visible
    assert visible == set(grid.coords())


def test_invalid_parameters():
    grid = TileGrid(3, 3, fill_wall=False)
    with pytest.raises(IndexError):
        compute_fov(grid, (-1, 0), 3)
    with pytest.raises(ValueError):
        compute_fov(grid, (0, 0), -1)
    with pytest.raises(ValueError):
        compute_fov(grid, (0, 0), 3, algorithm="permissive")


def test_algorithm_parse():
    assert FovAlgorithm.parse("Basic") is FovAlgorithm.BASIC
    assert FovAlgorithm.parse(" shadowcast ") is FovAlgorithm.SHADOWCAST
    assert FovAlgorithm.parse(FovAlgorithm.BASIC) is FovAlgorithm.BASIC
