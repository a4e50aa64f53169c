"""Pipe tiles: slots, internal routing and the built-in archetypes."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

PIPE_MODEL = "models/pipe.glb"

FluidId = str
SlotId = int


class Slot(Enum):
    """How fluid may cross one side of a tile."""

    NONE = "none"
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"


class Function(Enum):
    """What an internal route does with the fluid it carries."""

    PASSTHROUGH = "passthrough"
    MIX = "mix"


@dataclass(frozen=True)
class InternalRouting:
    """Pipe routing internal to a tile.

    Slot ids 0 to 3 are the tile's sides, 4 to 99 are internal containers
    used for functions such as mixing, 100 is the internal source and
    101 the internal sink.
    """

    from_slot: SlotId
    to_slot: SlotId
    function: Function

    @classmethod
    def passthrough(cls, from_slot: SlotId, to_slot: SlotId) -> InternalRouting:
        return cls(from_slot, to_slot, Function.PASSTHROUGH)

    @classmethod
    def mix(cls, from_slot: SlotId, to_slot: SlotId) -> InternalRouting:
        return cls(from_slot, to_slot, Function.MIX)


@dataclass
class Pipe:
    """A pipe tile.

    Side indices of ``slots``::

           0
        3 |P| 1
           2
    """

    source: FluidId | None
    sink: FluidId | None
    slots: tuple[Slot, Slot, Slot, Slot]
    model: str
    progress: float = 0.0
    progress_rate: float = 1.0
    internal_routing: list[InternalRouting] = field(default_factory=list)
    locked: bool = False

    def __post_init__(self) -> None:
        self.slots = tuple(self.slots)
        if len(self.slots) != 4:
            raise ValueError("a pipe has exactly four slots")

    def clone(self) -> Pipe:
        """Return an independent copy of this pipe."""
        return copy.deepcopy(self)


@dataclass
class Fluid:
    """A fluid that can flow through pipes."""

    id: FluidId
    material: str


def scene_path(index: int) -> str:
    """Asset path of scene ``index`` inside the pipe model."""
    return f"{PIPE_MODEL}#Scene{index}"


def pipe_archetypes() -> dict[int, Pipe]:
    """Build the table of pipe archetypes keyed by tile id."""
    none, bi = Slot.NONE, Slot.BIDIRECTIONAL
    passthrough, mix = InternalRouting.passthrough, InternalRouting.mix
    return {
        # Input
        16: Pipe(
            source="water",
            sink=None,
            slots=(Slot.OUTPUT, none, none, none),
            model=scene_path(6),
        ),
        # Output
        32: Pipe(
            source=None,
            sink="water",
            slots=(Slot.INPUT, none, none, none),
            model=scene_path(6),
        ),
        # Straight pipe
        0: Pipe(
            source=None,
            sink=None,
            slots=(bi, none, bi, none),
            internal_routing=[passthrough(0, 2)],
            model=scene_path(0),
        ),
        # Curved pipe
        1: Pipe(
            source=None,
            sink=None,
            slots=(bi, bi, none, none),
            internal_routing=[passthrough(0, 1)],
            model=scene_path(1),
        ),
        # Cork
        2: Pipe(
            source=None,
            sink=None,
            slots=(bi, none, none, none),
            internal_routing=[passthrough(0, 5)],
            model=scene_path(2),
        ),
        # T pipe
        3: Pipe(
            source=None,
            sink=None,
            slots=(bi, bi, bi, none),
            internal_routing=[
                mix(0, 5),
                mix(1, 5),
                mix(2, 5),
                passthrough(5, 0),
                passthrough(5, 1),
                passthrough(5, 2),
            ],
            model=scene_path(3),
        ),
    }