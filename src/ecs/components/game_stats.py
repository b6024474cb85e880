from dataclasses import dataclass


@dataclass(slots=True)
class GameStats:
    """Running totals across every finished session.

    Updated by the session controller once per terminal outcome (win or loss).
    """

    games_played: int = 0
    games_won: int = 0
    total_placements: int = 0

    @property
    def games_lost(self) -> int:
        return self.games_played - self.games_won

    @property
    def average_placements(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.total_placements / self.games_played

    def record_win(self, placements: int) -> None:
        self._record(placements)
        self.games_won += 1

    def record_loss(self, placements: int) -> None:
        self._record(placements)

    def _record(self, placements: int) -> None:
        if placements < 0:
            raise ValueError(f"Placement count cannot be negative: {placements}")
        self.games_played += 1
        self.total_placements += placements

    def reset(self) -> None:
        self.games_played = 0
        self.games_won = 0
        self.total_placements = 0

    def summary(self) -> str:
        if self.games_won == 0:
            outcome, count = "lost", self.games_lost
        else:
            outcome, count = "won", self.games_won
        plural = "" if self.games_played == 1 else "s"
        return (
            f"You {outcome} {count} out of {self.games_played} game{plural}, "
            f"with {self.total_placements} successful placements, "
            f"an average of {self.average_placements:.2f} per game."
        )
