"""Per-level goal placement and landing evaluation."""
from __future__ import annotations

from dataclasses import dataclass

from truck_jump.constants import BASE_GOAL_X, GOAL_STEP, GOAL_TOLERANCE, GOAL_Y
from truck_jump.types import GameState


@dataclass(frozen=True)
class Goal:
    x: float
    y: float
    tolerance: float = GOAL_TOLERANCE

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Landing:
    """Result of one flight, handed to listeners after touchdown."""

    x: float
    distance: float
    outcome: GameState
    frames: int


def goal_for_level(level: int) -> Goal:
    """Goal moves GOAL_STEP farther every level."""
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    return Goal(x=BASE_GOAL_X + level * GOAL_STEP, y=GOAL_Y)


def evaluate_landing(x: float, goal: Goal) -> tuple[GameState, float]:
    """Return (outcome, distance). A landing exactly on the tolerance misses."""
    distance = abs(x - goal.x)
    if distance < goal.tolerance:
        return GameState.SUCCESS, distance
    return GameState.TRY_AGAIN, distance
