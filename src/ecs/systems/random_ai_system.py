from __future__ import annotations

import random
from typing import Optional

import structlog
from esper import World

from ecs.components.placement_grid import PlacementGrid
from ecs.components.random_agent import RandomAgent
from ecs.events.bus import EventBus, EVENT_NUMBER_GENERATED, EVENT_SLOT_CLICK

log = structlog.get_logger()


class RandomAISystem:
    """Answers every generated number with a click on a random valid slot.

    Only acts when the world carries a RandomAgent component.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.random = rng or random.Random(self._agent_seed())
        event_bus.subscribe(EVENT_NUMBER_GENERATED, self.on_number_generated)

    def on_number_generated(self, sender, **payload) -> None:
        value = payload.get("value")
        if value is None or not self._has_agent():
            return
        index = self._choose_slot(value)
        if index is None:
            return
        log.debug("agent.slot_chosen", index=index, value=value)
        self.event_bus.emit(EVENT_SLOT_CLICK, index=index)

    def _choose_slot(self, value: int) -> Optional[int]:
        for _, grid in self.world.get_component(PlacementGrid):
            candidates = grid.valid_indices(value)
            if not candidates:
                return None
            return self.random.choice(candidates)
        return None

    def _has_agent(self) -> bool:
        return bool(list(self.world.get_component(RandomAgent)))

    def _agent_seed(self) -> Optional[int]:
        for _, agent in self.world.get_component(RandomAgent):
            return agent.seed
        return None
