from __future__ import annotations

import random
from typing import Optional

import structlog
from esper import World

from ecs.components.game_state import GameMode
from ecs.components.game_stats import GameStats
from ecs.components.number_session import OUTCOME_LOST, OUTCOME_WON, NumberSession
from ecs.components.placement_grid import PlacementGrid
from ecs.constants import MAX_NUMBER, MIN_NUMBER
from ecs.events.bus import (
    EventBus,
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_NUMBER_GENERATED,
    EVENT_NUMBER_PLACED,
    EVENT_PLACEMENT_REJECTED,
    EVENT_QUIT_REQUEST,
    EVENT_SESSION_LOST,
    EVENT_SESSION_STARTED,
    EVENT_SESSION_WON,
    EVENT_SLOT_CLICK,
    EVENT_STATS_CHANGED,
    EVENT_STATS_SUMMARY,
)
from ecs.utils.game_state import get_game_mode, set_game_mode
from ecs.utils.singletons import get_singleton

log = structlog.get_logger()

REJECT_OUT_OF_RANGE = "out_of_range"
REJECT_OCCUPIED = "occupied"
REJECT_ORDER = "order"


class NumberGameSystem:
    """Runs placement sessions: draws numbers, applies slot clicks, decides win and loss."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.random = rng or getattr(world, "random", None) or random.Random()
        event_bus.subscribe(EVENT_MENU_NEW_GAME_SELECTED, self.on_new_game)
        event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game)
        event_bus.subscribe(EVENT_SLOT_CLICK, self.on_slot_click)
        event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit)

    @property
    def grid(self) -> PlacementGrid:
        return get_singleton(self.world, PlacementGrid)

    @property
    def session(self) -> NumberSession:
        return get_singleton(self.world, NumberSession)

    @property
    def stats(self) -> GameStats:
        return get_singleton(self.world, GameStats)

    def on_new_game(self, sender, **payload) -> None:
        self.start_session()

    def start_session(self) -> None:
        grid = self.grid
        grid.reset()
        self.session.clear()
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        log.info("session.started", size=grid.size)
        self.event_bus.emit(EVENT_SESSION_STARTED, size=grid.size)
        self._draw_next_number()

    def on_slot_click(self, sender, **payload) -> None:
        if get_game_mode(self.world) != GameMode.PLAYING:
            return
        index = payload.get("index")
        if index is None:
            return
        grid = self.grid
        session = self.session
        value = session.current_number
        if value is None:
            return
        if not 0 <= index < grid.size:
            self._reject(index, value, REJECT_OUT_OF_RANGE)
            return
        if not grid.is_empty(index):
            self._reject(index, value, REJECT_OCCUPIED)
            return
        if not grid.is_valid_placement(index, value):
            self._reject(index, value, REJECT_ORDER)
            return

        grid.place(index, value)
        session.placements += 1
        session.current_number = None
        log.debug("placement.accepted", index=index, value=value, placements=session.placements)
        self.event_bus.emit(
            EVENT_NUMBER_PLACED,
            index=index,
            value=value,
            placements=session.placements,
        )
        if grid.is_full():
            self._finish_won()
        else:
            self._draw_next_number()

    def on_quit(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.MENU)
        summary = self.stats.summary()
        log.info("stats.summary", summary=summary)
        self.event_bus.emit(EVENT_STATS_SUMMARY, summary=summary)

    def _draw_next_number(self) -> None:
        value = self.random.randint(MIN_NUMBER, MAX_NUMBER)
        self.session.current_number = value
        if not self.grid.has_valid_move(value):
            self._finish_lost(value)
            return
        self.event_bus.emit(EVENT_NUMBER_GENERATED, value=value)

    def _reject(self, index: int, value: int, reason: str) -> None:
        log.debug("placement.rejected", index=index, value=value, reason=reason)
        self.event_bus.emit(EVENT_PLACEMENT_REJECTED, index=index, value=value, reason=reason)

    def _finish_won(self) -> None:
        session = self.session
        session.outcome = OUTCOME_WON
        self.stats.record_win(session.placements)
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        log.info("session.won", placements=session.placements)
        self.event_bus.emit(EVENT_SESSION_WON, placements=session.placements)
        self._emit_stats()

    def _finish_lost(self, value: int) -> None:
        session = self.session
        session.outcome = OUTCOME_LOST
        self.stats.record_loss(session.placements)
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        log.info("session.lost", value=value, placements=session.placements)
        self.event_bus.emit(EVENT_SESSION_LOST, value=value, placements=session.placements)
        self._emit_stats()

    def _emit_stats(self) -> None:
        stats = self.stats
        self.event_bus.emit(
            EVENT_STATS_CHANGED,
            games_played=stats.games_played,
            games_won=stats.games_won,
            total_placements=stats.total_placements,
        )
