import pytest

from pipinghot.pipes import (
    Fluid,
    Function,
    InternalRouting,
    Pipe,
    Slot,
    pipe_archetypes,
    scene_path,
)


def test_archetype_keys():
    assert set(pipe_archetypes()) == {0, 1, 2, 3, 16, 32}


def test_input_and_output_pipes():
    pipes = pipe_archetypes()
    assert pipes[16].source == "water"
    assert pipes[16].sink is None
    assert pipes[16].slots == (Slot.OUTPUT, Slot.NONE, Slot.NONE, Slot.NONE)
    assert pipes[32].sink == "water"
    assert pipes[32].source is None
    assert pipes[32].slots[0] is Slot.INPUT
    assert pipes[16].model == pipes[32].model == scene_path(6)


def test_straight_pipe_routing():
    straight = pipe_archetypes()[0]
    assert straight.slots == (Slot.BIDIRECTIONAL, Slot.NONE, Slot.BIDIRECTIONAL, Slot.NONE)
    assert straight.internal_routing == [InternalRouting.passthrough(0, 2)]


def test_t_pipe_routing():
    tee = pipe_archetypes()[3]
    mixes = [r for r in tee.internal_routing if r.function is Function.MIX]
    passes = [r for r in tee.internal_routing if r.function is Function.PASSTHROUGH]
    assert {(r.from_slot, r.to_slot) for r in mixes} == {(0, 5), (1, 5), (2, 5)}
    assert {(r.from_slot, r.to_slot) for r in passes} == {(5, 0), (5, 1), (5, 2)}
    assert tee.slots.count(Slot.BIDIRECTIONAL) == 3


def test_defaults_of_archetypes():
    for pipe in pipe_archetypes().values():
        assert pipe.progress == 0.0
        assert pipe.progress_rate == 1.0
        assert pipe.locked is False


def test_routing_constructors():
    route = InternalRouting.mix(1, 7)
    assert (route.from_slot, route.to_slot, route.function) == (1, 7, Function.MIX)
    route = InternalRouting.passthrough(3, 2)
    assert (route.from_slot, route.to_slot, route.function) == (3, 2, Function.PASSTHROUGH)


def test_scene_path():
    assert scene_path(6) == "models/pipe.glb#Scene6"
    assert scene_path(0).startswith("models/pipe.glb")


def test_archetype_tables_are_independent():
    first = pipe_archetypes()
    first[0].internal_routing.append(InternalRouting.mix(0, 1))
    first[0].progress = 0.5
    second = pipe_archetypes()
    assert len(second[0].internal_routing) == 1
    assert second[0].progress == 0.0


def test_clone_is_deep():
    pipe = pipe_archetypes()[3]
    copy = pipe.clone()
    copy.internal_routing.clear()
    assert len(pipe.internal_routing) == 6
    assert copy == Pipe(
        source=None,
        sink=None,
        slots=pipe.slots,
        model=pipe.model,
        internal_routing=[],
    )


def test_pipe_needs_four_slots():
    with pytest.raises(ValueError):
        Pipe(source=None, sink=None, slots=(Slot.NONE,), model=scene_path(0))


def test_fluid_fields():
    fluid = Fluid(id="water", material="blue")
    assert fluid.id == "water"
    assert fluid.material == "blue"