"""LaunchSimulator - one game session: charge, fly, land, score, repeat."""
from __future__ import annotations

import logging
from typing import Any

from truck_jump.charger import PowerCharger
from truck_jump.clock import Cadence, Clock
from truck_jump.constants import (
    CHARGE_INTERVAL_MS,
    DEFAULT_FPS,
    RETRY_DELAY_MS,
    SUCCESS_DELAY_MS,
)
from truck_jump.fsm import StateMachine, TransitionHook
from truck_jump.level import Goal, Landing, evaluate_landing, goal_for_level
from truck_jump.physics import (
    KinematicBody,
    Vec,
    has_landed,
    integrate,
    land,
    launch_velocity,
)
from truck_jump.schedule import Scheduler
from truck_jump.types import GameState, SessionClosedError

logger = logging.getLogger(__name__)

CHARGE_TASK = "charge"
FRAME_TASK = "frame"
OUTCOME_TASK = "outcome"


class LaunchSimulator:
    """Session controller owning every piece of mutable game state.

    Driven one tick at a time by ``step()``. Three kinds of scheduled task
    live on the session's scheduler: the charge tick while charging, the
    frame tick while jumping, and the one-shot outcome timer after a
    landing. Each reset cancels all of them before touching state, and
    resets are only taken from a finished jump.
    """

    def __init__(self, fps: int = DEFAULT_FPS) -> None:
        self._clock = Clock(fps)
        self._scheduler = Scheduler()
        self._fsm = StateMachine()
        self._charger = PowerCharger()
        self._charge_cadence = Cadence(CHARGE_INTERVAL_MS, fps)
        self._body = KinematicBody()
        self._level = 1
        self._attempts = 0
        self._goal = goal_for_level(self._level)
        self._flight_frames = 0
        self._last_landing: Landing | None = None
        self._closed = False

    # -- Read accessors --

    @property
    def state(self) -> GameState:
        return self._fsm.state

    @property
    def power(self) -> int:
        return self._charger.power

    @property
    def level(self) -> int:
        return self._level

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def truck_position(self) -> Vec:
        return self._body.position

    @property
    def truck_velocity(self) -> Vec:
        return self._body.velocity

    @property
    def goal(self) -> Goal:
        return self._goal

    @property
    def goal_position(self) -> Vec:
        return self._goal.position

    @property
    def last_landing(self) -> Landing | None:
        return self._last_landing

    @property
    def fps(self) -> int:
        return self._clock.tps

    @property
    def tick_number(self) -> int:
        return self._clock.tick_number

    @property
    def scheduled(self) -> list[str]:
        """Kinds of task currently pending."""
        return self._scheduler.kinds()

    @property
    def closed(self) -> bool:
        return self._closed

    def on_transition(self, hook: TransitionHook) -> None:
        self._fsm.on_transition(hook)

    # -- Input --

    def start_charge(self) -> None:
        if self._closed or self._fsm.state is not GameState.READY:
            return
        self._charger.reset()
        self._charge_cadence = Cadence(CHARGE_INTERVAL_MS, self._clock.tps)
        self._fsm.fire("charge")
        self._scheduler.every(CHARGE_TASK, 1, self._charge_tick)

    def stop_charge(self) -> None:
        if self._closed or self._fsm.state is not GameState.CHARGING:
            return
        self._scheduler.cancel(CHARGE_TASK)
        self._launch(self._charger.power)

    def _charge_tick(self) -> None:
        for _ in range(self._charge_cadence.tick()):
            self._charger.tick()
        if self._charger.full:
            self._scheduler.cancel(CHARGE_TASK)

    # -- Flight --

    def _launch(self, power: int) -> None:
        self._attempts += 1
        self._body.velocity = launch_velocity(power)
        self._flight_frames = 0
        logger.info(
            "launch: level=%d attempt=%d power=%d velocity=(%.3f, %.3f)",
            self._level, self._attempts, power, *self._body.velocity,
        )
        self._fsm.fire("release")
        self._scheduler.every(FRAME_TASK, 1, self.tick_frame)

    def tick_frame(self) -> None:
        """Advance the flight by one frame. No-op unless jumping."""
        if self._closed or self._fsm.state is not GameState.JUMPING:
            return
        integrate(self._body)
        self._flight_frames += 1
        if has_landed(self._body):
            land(self._body)
            self._on_landed()

    def _on_landed(self) -> None:
        self._scheduler.cancel(FRAME_TASK)
        x = self._body.position[0]
        outcome, distance = evaluate_landing(x, self._goal)
        self._last_landing = Landing(
            x=x, distance=distance, outcome=outcome, frames=self._flight_frames
        )
        logger.info(
            "landed: x=%.2f goal=%.0f distance=%.2f frames=%d -> %s",
            x, self._goal.x, distance, self._flight_frames, outcome.value,
        )
        if outcome is GameState.SUCCESS:
            self._fsm.fire("hit")
            self._scheduler.once(
                OUTCOME_TASK, self._clock.ticks_for(SUCCESS_DELAY_MS), self.advance_level
            )
        else:
            self._fsm.fire("miss")
            self._scheduler.once(
                OUTCOME_TASK, self._clock.ticks_for(RETRY_DELAY_MS), self.retry_same_level
            )

    # -- Level progression --

    def retry_same_level(self) -> None:
        """Back to the start of the current level. Level and attempts stay.

        Only acts on a finished jump (success or try-again); ignored otherwise.
        """
        if self._closed or not self._fsm.can_fire("timeout"):
            return
        self._reset()

    def advance_level(self) -> None:
        if self._closed or not self._fsm.can_fire("timeout"):
            return
        self._level += 1
        self._attempts = 0
        self._goal = goal_for_level(self._level)
        logger.info("advanced to level %d, goal x=%.0f", self._level, self._goal.x)
        self._reset()

    def _reset(self) -> None:
        self._scheduler.cancel_all()
        self._charger.reset()
        self._body = KinematicBody()
        self._flight_frames = 0
        self._fsm.fire("timeout")

    # -- Driving --

    def step(self) -> None:
        """Advance one tick and run whatever scheduled tasks fall due."""
        if self._closed:
            raise SessionClosedError("Cannot step a closed session")
        self._clock.advance()
        self._scheduler.advance()

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def close(self) -> None:
        """Cancel all pending tasks. Further input is ignored."""
        if self._closed:
            return
        self._scheduler.cancel_all()
        self._closed = True
        logger.debug("session closed at tick %d", self._clock.tick_number)

    def __enter__(self) -> LaunchSimulator:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
