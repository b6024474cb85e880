from __future__ import annotations

from typing import Iterable, Mapping

from esper import World

from ecs.components.game_state import GameMode, GameState
from ecs.components.game_stats import GameStats
from ecs.components.number_session import NumberSession
from ecs.components.placement_grid import PlacementGrid
from ecs.events.bus import EventBus


class ScriptedRandom:
    """Stand-in for random.Random whose randint returns a fixed script of numbers."""

    def __init__(self, numbers: Iterable[int]):
        self._numbers = list(numbers)
        self.calls = 0

    def randint(self, low: int, high: int) -> int:
        if self.calls >= len(self._numbers):
            raise AssertionError(
                f"scripted numbers exhausted after {len(self._numbers)} draws; extend the script"
            )
        value = self._numbers[self.calls]
        self.calls += 1
        assert low <= value <= high, f"scripted value {value} outside [{low}, {high}]"
        return value


def fill_grid(grid: PlacementGrid, placements: Mapping[int, int]) -> None:
    """Place each value at its index, bypassing the ordering check like a raw fixture would."""
    for index, value in placements.items():
        grid.place(index, value)


def capture(event_bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    event_bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def grid_of(world: World) -> PlacementGrid:
    return next(comp for _, comp in world.get_component(PlacementGrid))


def session_of(world: World) -> NumberSession:
    return next(comp for _, comp in world.get_component(NumberSession))


def stats_of(world: World) -> GameStats:
    return next(comp for _, comp in world.get_component(GameStats))


def mode_of(world: World) -> GameMode:
    return next(comp for _, comp in world.get_component(GameState)).mode
