"""truck-jump - A hold-to-charge projectile jump game on a fixed-timestep core."""

import logging

from truck_jump.charger import PowerCharger
from truck_jump.clock import Clock
from truck_jump.fsm import StateMachine
from truck_jump.level import Goal, Landing, evaluate_landing, goal_for_level
from truck_jump.physics import (
    FlightFrame,
    FlightTrace,
    KinematicBody,
    launch_speed,
    launch_velocity,
    simulate_flight,
)
from truck_jump.schedule import Scheduler
from truck_jump.session import LaunchSimulator
from truck_jump.types import GameState, SessionClosedError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LaunchSimulator",
    "GameState",
    "SessionClosedError",
    "Clock",
    "Scheduler",
    "StateMachine",
    "PowerCharger",
    "KinematicBody",
    "FlightFrame",
    "FlightTrace",
    "launch_speed",
    "launch_velocity",
    "simulate_flight",
    "Goal",
    "Landing",
    "goal_for_level",
    "evaluate_landing",
]
