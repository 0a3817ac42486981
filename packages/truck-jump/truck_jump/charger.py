"""Power meter that fills while the launch control is held."""
from __future__ import annotations

from dataclasses import dataclass

from truck_jump.constants import MAX_POWER, POWER_STEP


@dataclass
class PowerCharger:
    power: int = 0

    @property
    def full(self) -> bool:
        return self.power >= MAX_POWER

    def tick(self) -> int:
        """Add one step, capped at MAX_POWER. Returns the new power."""
        self.power = min(self.power + POWER_STEP, MAX_POWER)
        return self.power

    def reset(self) -> None:
        self.power = 0
