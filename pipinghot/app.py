"""The application: menus, level loading and the game, driven frame by frame."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from .game import AppState, GameSession
from .level import Level, LevelError, TilePlacement, layout_tiles, parse_level
from .menu import (
    TITLE,
    UI_FONT,
    ActionKind,
    Button,
    Interaction,
    MenuAction,
    level_path,
    level_select_menu,
    main_menu,
)
from .pipes import PIPE_MODEL, Pipe, pipe_archetypes

log = logging.getLogger(__name__)

REQUIRED_ASSETS = (PIPE_MODEL, UI_FONT)


class App:
    """The whole game, advanced by calling ``update`` once per frame."""

    def __init__(self, asset_root: str | Path = "assets") -> None:
        self.asset_root = Path(asset_root)
        self.state = AppState.default()
        self.archetypes: dict[int, Pipe] = pipe_archetypes()
        self.buttons: list[Button] = []
        self.exit_requested = False
        self.level: Level | None = None
        self.placements: list[TilePlacement] = []
        self.session: GameSession | None = None
        self._level_in_loading: str | None = None

    def _read_asset(self, path: str) -> bytes:
        return (self.asset_root / path).read_bytes()

    def _enter(self, state: AppState) -> None:
        if self.state is AppState.IN_GAME and self.session is not None:
            self.session.close()
            self.session = None
        self.state = state
        if state is AppState.MAIN_MENU:
            self.buttons = main_menu(UI_FONT)
        elif state is AppState.LEVEL_SELECT:
            self.buttons = level_select_menu(UI_FONT)
        else:
            self.buttons = []
        if state is AppState.IN_GAME and self.level is not None:
            self.session = GameSession(self.level)

    def press(self, label: str) -> MenuAction | None:
        """Press the button labelled ``label`` in the current menu."""
        item = next((b for b in self.buttons if b.text == label), None)
        if item is None:
            raise ValueError(f"no button labelled {label!r} in {self.state.name}")
        action = item.set_interaction(Interaction.PRESSED)
        if action is None:
            return None
        if action.kind is ActionKind.START_GAME:
            self._enter(AppState.LEVEL_SELECT)
        elif action.kind is ActionKind.PLAY_LEVEL:
            self._level_in_loading = level_path(action.level)
            log.info("Loading next level: %s", self._level_in_loading)
            self._enter(AppState.LOADING_LEVEL)
        elif action.kind in (ActionKind.QUIT, ActionKind.BACK):
            self.exit_requested = True
        return action

    def _load_assets(self) -> None:
        missing = [p for p in REQUIRED_ASSETS if not (self.asset_root / p).is_file()]
        if missing:
            raise FileNotFoundError(f"missing assets: {', '.join(missing)}")
        self._enter(AppState.MAIN_MENU)

    def _load_level(self) -> None:
        path = self._level_in_loading
        try:
            data = self._read_asset(path)
        except OSError as exc:
            raise LevelError.io(exc) from exc
        level = parse_level(data, path, self._read_asset)
        log.info("Level asset loaded, spawning tiles")
        self.placements = layout_tiles(level, self.archetypes)
        self.level = level
        self._level_in_loading = None
        self._enter(AppState.IN_GAME)

    def update(self, delta: float) -> AppState:
        """Advance one frame of ``delta`` seconds and return the app state."""
        if self.state is AppState.LOADING_ASSETS:
            self._load_assets()
        elif self.state is AppState.LOADING_LEVEL and self._level_in_loading:
            self._load_level()
        elif self.state is AppState.IN_GAME and self.session is not None:
            self.session.update(delta)
        return self.state


def _show(app: App) -> None:
    if app.state is AppState.MAIN_MENU:
        print(TITLE)
    if app.buttons:
        print(" | ".join(b.text for b in app.buttons))
    elif app.state is AppState.IN_GAME and app.session is not None:
        name = app.level.name if app.level else ""
        print(f"{name}: {len(app.placements)} pipes, {app.session.state.name.lower()}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game as a text menu read from standard input."""
    parser = argparse.ArgumentParser(prog="pipinghot")
    parser.add_argument("asset_root", nargs="?", default="assets")
    parser.add_argument("--step", type=float, default=1.0, help="seconds per turn in game")
    args = parser.parse_args(argv)

    app = App(args.asset_root)
    try:
        app.update(0.0)
    except FileNotFoundError as exc:
        print(exc)
        return 1
    while not app.exit_requested:
        _show(app)
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if app.state is AppState.IN_GAME:
            if line == "q":
                break
            app.update(args.step)
            continue
        try:
            app.press(line)
            app.update(0.0)
        except (ValueError, LevelError) as exc:
            print(exc)
    return 0