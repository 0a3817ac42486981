"""Projectile launch and explicit Euler flight integration.

All motion is per frame: one call to ``integrate`` is one frame regardless of
wall-clock time. Screen convention, so y grows downward and an upward launch
has negative vy.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from truck_jump.constants import (
    GRAVITY,
    GROUND_Y,
    LAUNCH_ANGLE_DEG,
    MAX_POWER,
    MIN_SPEED,
    SPEED_RANGE,
    START_X,
)

Vec = tuple[float, float]


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def from_angle(speed: float, degrees: float) -> Vec:
    """Velocity of ``speed`` at ``degrees`` above the horizontal, screen axes."""
    radians = math.radians(degrees)
    return (speed * math.cos(radians), -speed * math.sin(radians))


@dataclass
class KinematicBody:
    """Truck position and velocity."""

    position: Vec = (START_X, GROUND_Y)
    velocity: Vec = (0.0, 0.0)


def clamp_power(power: float) -> float:
    return max(0.0, min(float(power), float(MAX_POWER)))


def launch_speed(power: float) -> float:
    """Map power in [0, MAX_POWER] linearly onto [MIN_SPEED, MIN_SPEED + SPEED_RANGE]."""
    return clamp_power(power) / MAX_POWER * SPEED_RANGE + MIN_SPEED


def launch_velocity(power: float) -> Vec:
    return from_angle(launch_speed(power), LAUNCH_ANGLE_DEG)


def integrate(body: KinematicBody, gravity: float = GRAVITY) -> None:
    """Advance one frame: position by velocity, then vy by gravity."""
    body.position = add(body.position, body.velocity)
    body.velocity = (body.velocity[0], body.velocity[1] + gravity)


def has_landed(body: KinematicBody, ground_y: float = GROUND_Y) -> bool:
    return body.position[1] >= ground_y


def land(body: KinematicBody, ground_y: float = GROUND_Y) -> None:
    """Snap to the ground line and stop. x is kept as last integrated."""
    body.position = (body.position[0], ground_y)
    body.velocity = (0.0, 0.0)


@dataclass(frozen=True)
class FlightFrame:
    x: float
    y: float
    vy: float


@dataclass
class FlightTrace:
    """Every frame of one flight, ending with the clamped landing frame."""

    frames: list[FlightFrame] = field(default_factory=list)

    @property
    def landing_x(self) -> float:
        return self.frames[-1].x

    def __len__(self) -> int:
        return len(self.frames)


def simulate_flight(
    power: float,
    start: Vec = (START_X, GROUND_Y),
    max_frames: int = 10_000,
) -> FlightTrace:
    """Fly a launch of ``power`` from ``start`` to the ground.

    Each recorded frame is the state after that frame's update; the last one
    is clamped to the ground with vy zeroed.
    """
    body = KinematicBody(position=start, velocity=launch_velocity(power))
    trace = FlightTrace()
    for _ in range(max_frames):
        integrate(body)
        if has_landed(body):
            land(body)
            trace.frames.append(FlightFrame(body.position[0], body.position[1], 0.0))
            return trace
        trace.frames.append(FlightFrame(body.position[0], body.position[1], body.velocity[1]))
    raise RuntimeError(f"flight did not land within {max_frames} frames")
