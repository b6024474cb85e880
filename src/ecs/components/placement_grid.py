from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(slots=True)
class PlacementGrid:
    """Ordered, fixed-size run of slots that numbers are placed into.

    Slots are compared by index only; the 4x5 layout of the board is a
    presentation detail. Placed values read left to right must never
    decrease, so a value may only go where nothing larger sits before it and
    nothing smaller sits after it. Comparisons are strict, which lets equal
    values share the run.

    ``place`` does not re-check ordering. Callers ask ``is_valid_placement``
    first; ``place`` only refuses to overwrite an occupied slot.
    """

    size: int
    _slots: List[Optional[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        self._slots = [None] * self.size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"Slot index {index} outside grid of size {self.size}")

    def is_valid_placement(self, index: int, value: int) -> bool:
        self._check_index(index)
        if self._slots[index] is not None:
            return False
        for left in self._slots[:index]:
            if left is not None and left > value:
                return False
        for right in self._slots[index + 1:]:
            if right is not None and right < value:
                return False
        return True

    def has_valid_move(self, value: int) -> bool:
        return any(self.is_valid_placement(i, value) for i in range(self.size))

    def valid_indices(self, value: int) -> List[int]:
        return [i for i in range(self.size) if self.is_valid_placement(i, value)]

    def place(self, index: int, value: int) -> None:
        self._check_index(index)
        if self._slots[index] is not None:
            raise ValueError(f"Slot {index} already holds {self._slots[index]}")
        self._slots[index] = value

    def reset(self) -> None:
        for i in range(self.size):
            self._slots[i] = None

    def is_full(self) -> bool:
        return self.occupied_count == self.size

    def is_empty(self, index: int) -> bool:
        self._check_index(index)
        return self._slots[index] is None

    def value_at(self, index: int) -> Optional[int]:
        self._check_index(index)
        return self._slots[index]

    def values(self) -> Tuple[Optional[int], ...]:
        return tuple(self._slots)

    @property
    def occupied_count(self) -> int:
        return sum(1 for v in self._slots if v is not None)
