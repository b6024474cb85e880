"""Entry point for the number placement puzzle.

Builds the ECS world and systems, lets the random agent play a batch of
sessions, and prints the accumulated statistics.
"""
from __future__ import annotations

import argparse
import random
import sys

import structlog

from ecs.constants import DEFAULT_AUTOPLAY_GAMES
from ecs.events.bus import (
    EventBus,
    EVENT_MENU_NEW_GAME_SELECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_QUIT_REQUEST,
    EVENT_STATS_SUMMARY,
)
from ecs.logging_setup import bind_context, clear_context, configure_logging
from ecs.systems.number_game_system import NumberGameSystem
from ecs.systems.random_ai_system import RandomAISystem
from ecs.world import create_world

log = structlog.get_logger()


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="number-game",
        description="Auto-play the number placement puzzle and report statistics.",
    )
    parser.add_argument(
        "--games",
        type=_positive_int,
        default=DEFAULT_AUTOPLAY_GAMES,
        help=f"Number of sessions to play (default: {DEFAULT_AUTOPLAY_GAMES}).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the number draw; the agent uses seed + 1 (default: nondeterministic).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING).")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines.")
    return parser


class NumberGameRunner:
    """Headless host wiring the world, the session controller and the agent.

    Does not touch logging; callers run ``configure_logging`` first, as ``main`` does.
    The agent gets its own seed derived from ``seed`` so slot choices do not
    replay the number draw.
    """

    def __init__(self, *, seed: int | None = None) -> None:
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            autoplay=True,
            agent_seed=None if seed is None else seed + 1,
            rng=random.Random(seed),
        )
        self.number_game_system = NumberGameSystem(self.world, self.event_bus)
        self.random_ai_system = RandomAISystem(self.world, self.event_bus)
        self.summary: str | None = None
        self.event_bus.subscribe(EVENT_STATS_SUMMARY, self._on_summary)

    def _on_summary(self, sender, **payload) -> None:
        self.summary = payload.get("summary")

    def play(self, games: int) -> str:
        for game_number in range(1, games + 1):
            bind_context(game=game_number)
            if game_number == 1:
                self.event_bus.emit(EVENT_MENU_NEW_GAME_SELECTED)
            else:
                self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        clear_context()
        self.event_bus.emit(EVENT_QUIT_REQUEST)
        return self.summary or ""


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json=args.json_logs)
    log.info("autoplay.start", games=args.games, seed=args.seed)
    runner = NumberGameRunner(seed=args.seed)
    summary = runner.play(args.games)
    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
