"""Event-driven state machine over GameState."""
from __future__ import annotations

import logging
from typing import Callable

from truck_jump.types import GameState

logger = logging.getLogger(__name__)

TransitionHook = Callable[[GameState, GameState], None]

# state -> [[event, target], ...]
TRANSITIONS: dict[GameState, list[list]] = {
    GameState.READY: [["charge", GameState.CHARGING]],
    GameState.CHARGING: [["release", GameState.JUMPING]],
    GameState.JUMPING: [["hit", GameState.SUCCESS], ["miss", GameState.TRY_AGAIN]],
    GameState.SUCCESS: [["timeout", GameState.READY]],
    GameState.TRY_AGAIN: [["timeout", GameState.READY]],
}


class StateMachine:
    """Holds the current state and applies events from a transition table.

    Events with no edge out of the current state are ignored.
    """

    def __init__(
        self,
        initial: GameState = GameState.READY,
        transitions: dict[GameState, list[list]] | None = None,
    ) -> None:
        self._state = initial
        self._transitions = TRANSITIONS if transitions is None else transitions
        self._hooks: list[TransitionHook] = []

    @property
    def state(self) -> GameState:
        return self._state

    def on_transition(self, hook: TransitionHook) -> None:
        self._hooks.append(hook)

    def can_fire(self, event: str) -> bool:
        return self._target(event) is not None

    def _target(self, event: str) -> GameState | None:
        for name, target in self._transitions.get(self._state, ()):
            if name == event:
                return target
        return None

    def fire(self, event: str) -> GameState | None:
        """Apply ``event``. Returns the new state, or None if ignored."""
        target = self._target(event)
        if target is None:
            logger.debug("ignored %r in state %s", event, self._state.value)
            return None
        self._set(target)
        return target

    def _set(self, new: GameState) -> None:
        old = self._state
        self._state = new
        logger.debug("state %s -> %s", old.value, new.value)
        for hook in list(self._hooks):
            hook(old, new)
