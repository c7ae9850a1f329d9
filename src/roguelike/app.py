from __future__ import annotations

import logging
from typing import Callable, Optional

from .engine.session import GameSession
from .input.actions import Intent
from .input.mapping import InputMapper
from .rendering.ascii import render_ascii
from .rendering.snapshot import CellState, build_frame
from .settings import GameConfig

logger = logging.getLogger(__name__)

TILE_SIZE = 12
LOG_HEIGHT = 5  # rows below the map reserved for messages
WINDOW_TITLE = "roguelike"


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except ImportError:
        return False


def run_headless(config: GameConfig, out: Optional[Callable[[str], None]] = None) -> int:
    """Generate a session and print the opening frame as ASCII.

    Returns a process exit code.
    """
    write = out or print
    session = GameSession(config)
    frame = build_frame(session)
    for line in render_ascii(frame):
        write(line)
    write(f"rooms={len(session.dungeon.rooms)} entities={len(session.entities)} player={session.player.pos}")
    return 0


def _arcade_key_aliases(mapper: InputMapper) -> None:  # pragma: no cover - requires arcade
    import arcade

    key = arcade.key
    for code, name in (
        (key.UP, "UP"),
        (key.DOWN, "DOWN"),
        (key.LEFT, "LEFT"),
        (key.RIGHT, "RIGHT"),
        (key.W, "W"),
        (key.A, "A"),
        (key.S, "S"),
        (key.D, "D"),
        (key.ESCAPE, "ESCAPE"),
        (key.ENTER, "ENTER"),
    ):
        mapper.set_alias(code, name)


def run_gui(config: GameConfig) -> int:  # pragma: no cover - manual usage
    """Open an Arcade window that draws frame snapshots and feeds intents."""
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(config)

    import arcade

    session = GameSession(config)
    mapper = InputMapper.default()
    _arcade_key_aliases(mapper)
    rows = config.map_height + LOG_HEIGHT

    class DungeonWindow(arcade.Window):
        def __init__(self) -> None:
            super().__init__(config.map_width * TILE_SIZE, rows * TILE_SIZE, title=WINDOW_TITLE)
            arcade.set_background_color(arcade.color.BLACK)

        def _bottom(self, y: int) -> int:
            # Grid rows grow downwards, window y grows upwards
            return (rows - 1 - y) * TILE_SIZE

        def on_draw(self) -> None:
            self.clear()
            frame = build_frame(session, message_count=LOG_HEIGHT)
            for y in range(frame.height):
                for x in range(frame.width):
                    view = frame.cell(x, y)
                    if view.state is CellState.UNEXPLORED:
                        continue
                    left = x * TILE_SIZE
                    bottom = self._bottom(y)
                    arcade.draw_lrbt_rectangle_filled(left, left + TILE_SIZE, bottom, bottom + TILE_SIZE, view.color)
            for ent in reversed(frame.entities):
                arcade.draw_text(
                    ent.glyph,
                    ent.x * TILE_SIZE + TILE_SIZE // 2,
                    self._bottom(ent.y) + TILE_SIZE // 2,
                    ent.color,
                    font_size=TILE_SIZE - 2,
                    anchor_x="center",
                    anchor_y="center",
                )
            for i, text in enumerate(frame.messages):
                arcade.draw_text(text, 4, self._bottom(frame.height + i), arcade.color.WHITE, font_size=TILE_SIZE - 3)

        def on_key_press(self, symbol: int, modifiers: int) -> None:
            intent = mapper.translate(symbol, alt=bool(modifiers & arcade.key.MOD_ALT))
            if intent is None:
                return
            if intent is Intent.TOGGLE_FULLSCREEN:
                self.set_fullscreen(not self.fullscreen)
                return
            result = session.handle_intent(intent)
            if result.exit:
                self.close()

    DungeonWindow()
    logger.info("Launching Arcade window")
    arcade.run()
    logger.info("Arcade loop finished after %d turns", session.turn)
    return 0


def run_auto(config: GameConfig) -> int:  # pragma: no cover - depends on environment
    if not _arcade_available():
        return run_headless(config)
    return run_gui(config)


__all__ = ["run_auto", "run_gui", "run_headless"]
