"""Simulation clock."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GlobalTimeStep:
    """A time-step counter that starts at 1."""

    value: int = 1

    def increment(self) -> int:
        """Advance the clock by one step and return the new value."""
        self.value += 1
        return self.value