import random

from ecs.components.game_state import GameMode
from ecs.events.bus import (
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NUMBER_GENERATED,
    EVENT_PLACEMENT_REJECTED,
    EVENT_SLOT_CLICK,
    EventBus,
)
from ecs.systems.number_game_system import NumberGameSystem
from ecs.systems.random_ai_system import RandomAISystem
from ecs.world import create_world
from tests.helpers import capture, fill_grid, grid_of, mode_of, session_of, stats_of


def _autoplay_world(seed: int, size: int = 20):
    bus = EventBus()
    world = create_world(bus, size=size, autoplay=True, agent_seed=seed, rng=random.Random(seed))
    NumberGameSystem(world, bus)
    RandomAISystem(world, bus)
    return bus, world


def test_agent_clicks_a_valid_slot():
    bus = EventBus()
    world = create_world(bus, size=5, autoplay=True)
    fill_grid(grid_of(world), {0: 100, 4: 900})
    clicks = capture(bus, EVENT_SLOT_CLICK)
    RandomAISystem(world, bus, rng=random.Random(0))

    bus.emit(EVENT_NUMBER_GENERATED, value=500)

    assert len(clicks) == 1
    assert clicks[0]["index"] in (1, 2, 3)


def test_agent_stays_silent_without_options():
    bus = EventBus()
    world = create_world(bus, size=2, autoplay=True)
    fill_grid(grid_of(world), {0: 900})
    clicks = capture(bus, EVENT_SLOT_CLICK)
    RandomAISystem(world, bus, rng=random.Random(0))

    bus.emit(EVENT_NUMBER_GENERATED, value=5)

    assert clicks == []


def test_agent_ignores_worlds_without_random_agent():
    bus = EventBus()
    world = create_world(bus, size=5)
    clicks = capture(bus, EVENT_SLOT_CLICK)
    RandomAISystem(world, bus, rng=random.Random(0))

    bus.emit(EVENT_NUMBER_GENERATED, value=500)

    assert clicks == []


def test_autoplayed_session_runs_to_an_outcome():
    bus, world = _autoplay_world(seed=7)
    rejected = capture(bus, EVENT_PLACEMENT_REJECTED)

    bus.emit(EVENT_MENU_NEW_GAME_SELECTED)

    session = session_of(world)
    grid = grid_of(world)
    assert session.finished
    assert mode_of(world) == GameMode.GAME_OVER
    assert rejected == []
    assert session.placements == grid.occupied_count
    placed = [v for v in grid.values() if v is not None]
    assert placed == sorted(placed)
    stats = stats_of(world)
    assert stats.games_played == 1
    assert stats.total_placements == session.placements


def test_autoplay_is_deterministic_for_a_seed():
    results = []
    for _ in range(2):
        bus, world = _autoplay_world(seed=21)
        bus.emit(EVENT_MENU_NEW_GAME_SELECTED)
        for _ in range(4):
            bus.emit(EVENT_NEW_GAME_REQUEST)
        stats = stats_of(world)
        results.append((grid_of(world).values(), stats.games_played, stats.total_placements))
    assert results[0] == results[1]
    assert results[0][1] == 5


def test_tiny_grid_can_be_won():
    bus, world = _autoplay_world(seed=1, size=1)

    bus.emit(EVENT_MENU_NEW_GAME_SELECTED)

    stats = stats_of(world)
    assert (stats.games_played, stats.games_won, stats.total_placements) == (1, 1, 1)
