import textwrap

import pytest

from roguelike.exceptions import ConfigError
from roguelike.fov.algorithms import FovAlgorithm
from roguelike.settings import GameConfig


def test_packaged_defaults_match_dataclass_defaults():
    cfg = GameConfig.from_sources(env={})
    assert cfg == GameConfig()
    assert cfg.algorithm is FovAlgorithm.BASIC


def test_yaml_file_overrides_defaults(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        textwrap.dedent(
            """
            map:
              width: 60
            fov:
              algorithm: shadowcast
              light_walls: false
            seed: 5
            """
        ),
        encoding="utf-8",
    )
    cfg = GameConfig.from_sources(env={}, file_path=path)
    assert cfg.map_width == 60
    assert cfg.map_height == 45
    assert cfg.algorithm is FovAlgorithm.SHADOWCAST
    assert cfg.light_walls is False
    assert cfg.seed == 5


def test_env_overrides_file(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("rooms:\n  max_rooms: 12\n", encoding="utf-8")
    env = {
        "ROGUELIKE_CONFIG_FILE": str(path),
        "ROGUELIKE_MAX_ROOMS": "4",
        "ROGUELIKE_LIGHT_WALLS": "off",
        "ROGUELIKE_SEED": "17",
    }
    cfg = GameConfig.from_sources(env=env)
    assert cfg.max_rooms == 4
    assert cfg.light_walls is False
    assert cfg.seed == 17


def test_invalid_values_raise_config_error(tmp_path):
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={"ROGUELIKE_MAP_WIDTH": "wide"})
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={"ROGUELIKE_LIGHT_WALLS": "maybe"})
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={"ROGUELIKE_FOV_ALGORITHM": "permissive"})
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={}, file_path=tmp_path / "missing.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("map: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={}, file_path=bad)


@pytest.mark.parametrize(
    "overrides",
    [
        {"map_width": 2},
        {"room_min_size": 8, "room_max_size": 6},
        {"room_max_size": 44},
        {"max_rooms": -1},
        {"torch_radius": -3},
    ],
)
def test_validate_rejects_unplayable_geometry(overrides):
    with pytest.raises(ConfigError):
        GameConfig.from_dict(overrides)


def test_from_dict_ignores_unknown_keys():
    cfg = GameConfig.from_dict({"torch_radius": 6, "font": "arial10x10.png"})
    assert cfg.torch_radius == 6
    assert "font" not in cfg.as_dict()


def test_yaml_values_are_coerced_to_field_types(tmp_path):
    path = tmp_path / "quoted.yaml"
    path.write_text('map:\n  width: "60"\nfov:\n  torch_radius: "8"\n  light_walls: "no"\n', encoding="utf-8")
    cfg = GameConfig.from_sources(env={}, file_path=path)
    assert cfg.map_width == 60
    assert cfg.torch_radius == 8
    assert cfg.light_walls is False


@pytest.mark.parametrize(
    "body",
    [
        'map:\n  width: "wide"\n',
        "fov:\n  torch_radius: [1, 2]\n",
        "rooms:\n  max_rooms: true\n",
    ],
)
def test_mistyped_yaml_value_raises_config_error(tmp_path, body):
    path = tmp_path / "mistyped.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ConfigError):
        GameConfig.from_sources(env={}, file_path=path)
