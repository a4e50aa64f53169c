"""Application and game states and the in-game session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from .level import Level

log = logging.getLogger(__name__)

WARMUP_SECONDS = 1.0


class AppState(Enum):
    """Top-level application state; starts in ``LOADING_ASSETS``."""

    LOADING_ASSETS = auto()
    MAIN_MENU = auto()
    LEVEL_SELECT = auto()
    LOADING_LEVEL = auto()
    IN_GAME = auto()

    @classmethod
    def default(cls) -> AppState:
        return cls.LOADING_ASSETS


class PipeGameState(Enum):
    """State of a game in progress; starts in ``WARMUP``."""

    WARMUP = auto()
    PREPARE = auto()
    FLOWING = auto()
    LEVEL_WON = auto()
    LEVEL_FAILED = auto()

    @classmethod
    def default(cls) -> PipeGameState:
        return cls.WARMUP


@dataclass
class WarmupTimer:
    """A one-shot timer."""

    duration: float = WARMUP_SECONDS
    elapsed: float = 0.0
    just_finished: bool = False

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return whether it finished on this tick."""
        if delta < 0:
            raise ValueError("time cannot run backwards")
        if self.finished:
            self.just_finished = False
            return False
        self.elapsed = min(self.elapsed + delta, self.duration)
        self.just_finished = self.finished
        return self.just_finished


@dataclass(frozen=True)
class SceneObject:
    """A camera or light placed in the game scene."""

    kind: str
    position: tuple[float, float, float]
    looking_at: tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass
class GameSession:
    """A level being played, from entering the game until leaving it."""

    level: Level
    state: PipeGameState | None = field(default_factory=PipeGameState.default)
    timer: WarmupTimer | None = field(default_factory=WarmupTimer)
    scene: list[SceneObject] = field(default_factory=list)

    def __init__(self, level: Level) -> None:
        log.info("Setting up game scene")
        self.level = level
        self.state = PipeGameState.default()
        self.scene = [
            SceneObject("camera", (0.0, 15.0, 5.0)),
            SceneObject("light", (4.0, 10.0, 8.0)),
        ]
        # Grace period before the board becomes interactive.
        self.timer = WarmupTimer(WARMUP_SECONDS)

    def update(self, delta: float) -> PipeGameState | None:
        """Advance the session by ``delta`` seconds and return its state."""
        if self.state is PipeGameState.WARMUP and self.timer is not None:
            if self.timer.tick(delta):
                log.info("Warmup is finished")
                self.state = PipeGameState.PREPARE
        return self.state

    def close(self) -> None:
        """Tear down the scene and leave the game."""
        self.scene.clear()
        self.timer = None
        self.state = None

    def __enter__(self) -> GameSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()