"""Tick-counted one-shot and periodic tasks, one pending task per kind."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class Task:
    """Countdown task. ``interval`` is None for one-shots."""

    kind: str
    remaining: int
    callback: Callable[[], None]
    interval: int | None = None


class Scheduler:
    """Owns at most one pending task per kind.

    Scheduling a kind replaces whatever was pending under that kind. Tasks
    fire in the order they were scheduled. A task cancelled or replaced
    while ``advance()`` is running does not fire in that pass.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def once(self, kind: str, ticks: int, callback: Callable[[], None]) -> Task:
        """Fire ``callback`` once after ``ticks`` ticks."""
        if ticks <= 0:
            raise ValueError("ticks must be positive")
        return self._add(Task(kind=kind, remaining=ticks, callback=callback))

    def every(self, kind: str, interval: int, callback: Callable[[], None]) -> Task:
        """Fire ``callback`` every ``interval`` ticks until cancelled."""
        if interval <= 0:
            raise ValueError("interval must be positive")
        return self._add(
            Task(kind=kind, remaining=interval, callback=callback, interval=interval)
        )

    def _add(self, task: Task) -> Task:
        self.cancel(task.kind)
        self._tasks[task.kind] = task
        return task

    def cancel(self, kind: str) -> bool:
        task = self._tasks.pop(kind, None)
        if task is None:
            return False
        logger.debug("cancelled %s task with %d ticks left", kind, task.remaining)
        return True

    def cancel_all(self) -> None:
        for kind in list(self._tasks):
            self.cancel(kind)

    def pending(self, kind: str) -> bool:
        return kind in self._tasks

    def kinds(self) -> list[str]:
        return list(self._tasks)

    def advance(self) -> None:
        """Count every pending task down one tick and fire the due ones."""
        for kind, task in list(self._tasks.items()):
            if self._tasks.get(kind) is not task:
                continue
            task.remaining -= 1
            if task.remaining > 0:
                continue
            if task.interval is None:
                del self._tasks[kind]
            else:
                task.remaining = task.interval
            task.callback()
