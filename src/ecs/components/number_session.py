from dataclasses import dataclass
from typing import Optional

OUTCOME_WON = "won"
OUTCOME_LOST = "lost"


@dataclass(slots=True)
class NumberSession:
    """Per-session state: the number waiting to be placed and how far the player got."""

    current_number: Optional[int] = None
    placements: int = 0
    outcome: Optional[str] = None

    def clear(self) -> None:
        self.current_number = None
        self.placements = 0
        self.outcome = None

    @property
    def finished(self) -> bool:
        return self.outcome is not None
