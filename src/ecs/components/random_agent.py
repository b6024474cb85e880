from dataclasses import dataclass


@dataclass(slots=True)
class RandomAgent:
    """Marker component for a simple random-slot AI controller."""

    seed: int | None = None
