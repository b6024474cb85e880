import random

from esper import World
from .events.bus import EventBus
from ecs.components.game_state import GameMode
from ecs.components.game_stats import GameStats
from ecs.components.number_session import NumberSession
from ecs.components.placement_grid import PlacementGrid
from ecs.components.random_agent import RandomAgent
from ecs.constants import GRID_SIZE
from ecs.utils.game_state import set_game_mode


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.MENU,
    *,
    size: int = GRID_SIZE,
    autoplay: bool = False,
    agent_seed: int | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    set_game_mode(world, event_bus, initial_mode)

    # Board and per-session state share one entity; stats outlive sessions.
    world.create_entity(PlacementGrid(size=size), NumberSession())
    world.create_entity(GameStats())

    if autoplay:
        world.create_entity(RandomAgent(seed=agent_seed))
    return world
