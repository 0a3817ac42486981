"""Shared enums and exceptions for the launch simulator."""

from __future__ import annotations

from enum import StrEnum


class GameState(StrEnum):
    READY = "ready"
    CHARGING = "charging"
    JUMPING = "jumping"
    SUCCESS = "success"
    TRY_AGAIN = "try_again"


class SessionClosedError(RuntimeError):
    """Raised when driving a session after close()."""
