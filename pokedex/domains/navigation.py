"""
Navigation over the closed identifier range [1, total].
"""

from __future__ import annotations

import random

MIN_ID = 1


class NavigationState:
    """
    Current creature identifier plus the bounds it may move within.

    Step operations are no-ops at the boundary: they return None and leave
    current_id unchanged, so the caller knows not to fetch anything.
    """

    def __init__(
        self,
        total: int,
        current_id: int = MIN_ID,
        rng: random.Random | None = None,
    ) -> None:
        if total < MIN_ID:
            raise ValueError(f"total must be at least {MIN_ID}, got {total}")
        if not MIN_ID <= current_id <= total:
            raise ValueError(f"current_id {current_id} outside [{MIN_ID}, {total}]")
        self.min_id = MIN_ID
        self.max_id = total
        self.current_id = current_id
        self._rng = rng or random.Random()

    def __repr__(self) -> str:
        return f"NavigationState(current_id={self.current_id}, range=[{self.min_id}, {self.max_id}])"

    def step_backward(self) -> int | None:
        """Move to the previous id. Returns the new id, or None at min_id."""
        if self.current_id <= self.min_id:
            return None
        self.current_id -= 1
        return self.current_id

    def step_forward(self) -> int | None:
        """Move to the next id. Returns the new id, or None at max_id."""
        if self.current_id >= self.max_id:
            return None
        self.current_id += 1
        return self.current_id

    def jump_random(self) -> int:
        """Jump to a uniformly chosen id in [min_id, max_id]; may repeat the current one."""
        self.current_id = self._rng.randint(self.min_id, self.max_id)
        return self.current_id
