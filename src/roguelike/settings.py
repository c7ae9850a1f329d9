from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError
from .fov.algorithms import FovAlgorithm

logger = logging.getLogger(__name__)

ENV_PREFIX = "ROGUELIKE_"
ENV_CONFIG_FILE = "ROGUELIKE_CONFIG_FILE"

# YAML section -> {yaml key: field name}
_SECTIONS: Dict[str, Dict[str, str]] = {
    "map": {"width": "map_width", "height": "map_height"},
    "rooms": {
        "min_size": "room_min_size",
        "max_size": "room_max_size",
        "max_rooms": "max_rooms",
        "max_monsters": "max_room_monsters",
    },
    "fov": {
        "torch_radius": "torch_radius",
        "light_walls": "light_walls",
        "algorithm": "fov_algorithm",
    },
}


def _as_bool(value: Any) -> bool:
    """Interpret common truthy/falsey spellings into a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"1", "true", "yes", "y", "on"}:
            return True
        if v in {"0", "false", "no", "n", "off"}:
            return False
    raise ConfigError(f"Cannot interpret {value!r} as a boolean")


def _as_optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in {"", "none", "null"}:
        return None
    return int(value)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Expected an integer, got {value!r}")
    return int(value)


def _as_algorithm_name(value: Any) -> str:
    if isinstance(value, FovAlgorithm):
        return value.value
    return str(value)


# Field name -> converter applied to every source (YAML values, env strings)
_CASTERS = {
    "map_width": _as_int,
    "map_height": _as_int,
    "room_min_size": _as_int,
    "room_max_size": _as_int,
    "max_rooms": _as_int,
    "max_room_monsters": _as_int,
    "torch_radius": _as_int,
    "light_walls": _as_bool,
    "fov_algorithm": _as_algorithm_name,
    "seed": _as_optional_int,
}


@dataclass
class GameConfig:
    """Session configuration, recognized at start-up and fixed afterwards.

    Sources, lowest to highest precedence:
    - The packaged ``defaults.yaml`` resource
    - An optional YAML file (argument, or env ROGUELIKE_CONFIG_FILE)
    - Environment variables with the ROGUELIKE_ prefix, e.g.
      ROGUELIKE_MAP_WIDTH=60 or ROGUELIKE_LIGHT_WALLS=no
    """

    map_width: int = 80
    map_height: int = 45
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    max_room_monsters: int = 3
    torch_radius: int = 10
    light_walls: bool = True
    fov_algorithm: str = FovAlgorithm.BASIC.value
    seed: Optional[int] = None

    @property
    def algorithm(self) -> FovAlgorithm:
        return FovAlgorithm.parse(self.fov_algorithm)

    def validate(self) -> None:
        """Raise ConfigError if the values cannot produce a playable map."""
        if self.map_width < 3 or self.map_height < 3:
            raise ConfigError(f"Map must be at least 3x3, got {self.map_width}x{self.map_height}")
        if self.room_min_size < 2:
            raise ConfigError("room_min_size must be at least 2 to leave an interior")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        # A room of max size still needs a one-cell margin on the far side
        if self.room_max_size >= self.map_width - 1 or self.room_max_size >= self.map_height - 1:
            raise ConfigError(
                f"room_max_size {self.room_max_size} does not fit a "
                f"{self.map_width}x{self.map_height} map"
            )
        if self.max_rooms < 0:
            raise ConfigError("max_rooms must not be negative")
        if self.max_room_monsters < 0:
            raise ConfigError("max_room_monsters must not be negative")
        if self.torch_radius < 0:
            raise ConfigError("torch_radius must not be negative")
        try:
            FovAlgorithm.parse(self.fov_algorithm)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(k for k in data if k not in allowed)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        filtered: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in allowed:
                continue
            try:
                filtered[key] = _CASTERS[key](value)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for {key}={value!r}: {exc}") from exc
        cfg = cls(**filtered)
        cfg.validate()
        return cfg

    @staticmethod
    def flatten_yaml(doc: Any) -> Dict[str, Any]:
        """Flatten the sectioned YAML layout into GameConfig field names."""
        if doc is None:
            return {}
        if not isinstance(doc, dict):
            raise ConfigError("Config document must be a mapping")
        flat: Dict[str, Any] = {}
        for section, keys in _SECTIONS.items():
            body = doc.get(section)
            if body is None:
                continue
            if not isinstance(body, dict):
                raise ConfigError(f"Config section '{section}' must be a mapping")
            for key, value in body.items():
                if key in keys:
                    flat[keys[key]] = value
                else:
                    logger.warning("Ignoring unknown key '%s.%s'", section, key)
        # Direct top-level field names are accepted as well
        for key, value in doc.items():
            if key in _SECTIONS:
                continue
            flat[key] = value
        return flat

    @classmethod
    def load_defaults(cls) -> Dict[str, Any]:
        text = resource_files("roguelike").joinpath("defaults.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded default config resource")
        return cls.flatten_yaml(yaml.safe_load(text))

    @classmethod
    def from_yaml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                doc = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        logger.debug("Loaded config from path: %s", path)
        return cls.flatten_yaml(doc)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = os.environ if env is None else env
        out: Dict[str, Any] = {}
        for field_name, caster in _CASTERS.items():
            env_key = ENV_PREFIX + field_name.upper()
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            try:
                out[field_name] = caster(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for {env_key}={raw!r}: {exc}") from exc
        return out

    @classmethod
    def from_sources(
        cls,
        *,
        env: Optional[Mapping[str, str]] = None,
        file_path: Optional[Path | str] = None,
    ) -> "GameConfig":
        # Order of precedence (lowest to highest): defaults < file < env
        env = os.environ if env is None else env
        data: Dict[str, Any] = cls.load_defaults()
        if file_path is None and env.get(ENV_CONFIG_FILE):
            file_path = env[ENV_CONFIG_FILE]
        if file_path is not None:
            data.update(cls.from_yaml_file(Path(file_path).expanduser().resolve()))
        data.update(cls.from_env(env))
        cfg = cls.from_dict(data)
        logger.info(
            "Config: map=%dx%d rooms<=%d sizes=%d..%d torch=%d fov=%s",
            cfg.map_width,
            cfg.map_height,
            cfg.max_rooms,
            cfg.room_min_size,
            cfg.room_max_size,
            cfg.torch_radius,
            cfg.fov_algorithm,
        )
        return cfg


__all__ = ["GameConfig", "ENV_PREFIX", "ENV_CONFIG_FILE"]
