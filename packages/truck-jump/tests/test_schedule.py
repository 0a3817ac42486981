"""Tests for Scheduler one-shot and periodic tasks."""

import pytest
from truck_jump.schedule import Scheduler


class TestOnce:
    def test_fires_after_exact_ticks(self):
        """once(3) fires on the third advance, not before."""
        sched = Scheduler()
        fired = []
        sched.once("outcome", 3, lambda: fired.append("x"))

        sched.advance()
        sched.advance()
        assert fired == []

        sched.advance()
        assert fired == ["x"]

    def test_fires_exactly_once(self):
        """A one-shot is removed after it fires."""
        sched = Scheduler()
        fired = []
        sched.once("outcome", 2, lambda: fired.append(1))
        for _ in range(10):
            sched.advance()
        assert fired == [1]
        assert not sched.pending("outcome")

    def test_non_positive_ticks_rejected(self):
        """once(0) raises ValueError."""
        sched = Scheduler()
        with pytest.raises(ValueError):
            sched.once("outcome", 0, lambda: None)


class TestEvery:
    def test_fires_on_interval(self):
        """every(3) fires on ticks 3, 6 and 9 and stays pending."""
        sched = Scheduler()
        fired = []
        tick = [0]

        def on_fire():
            fired.append(tick[0])

        sched.every("charge", 3, on_fire)
        for t in range(1, 10):
            tick[0] = t
            sched.advance()
        assert fired == [3, 6, 9]
        assert sched.pending("charge")

    def test_interval_one_fires_every_tick(self):
        """every(1) fires on each advance."""
        sched = Scheduler()
        fired = []
        sched.every("frame", 1, lambda: fired.append(1))
        for _ in range(5):
            sched.advance()
        assert len(fired) == 5

    def test_can_cancel_itself(self):
        """A periodic callback may cancel its own kind."""
        sched = Scheduler()
        fired = []

        def on_fire():
            fired.append(1)
            if len(fired) == 2:
                sched.cancel("charge")

        sched.every("charge", 1, on_fire)
        for _ in range(5):
            sched.advance()
        assert len(fired) == 2
        assert not sched.pending("charge")

    def test_non_positive_interval_rejected(self):
        """every() with a negative interval raises ValueError."""
        with pytest.raises(ValueError):
            Scheduler().every("frame", -1, lambda: None)


class TestCancellation:
    def test_rescheduling_kind_replaces_pending(self):
        """Scheduling a kind again drops the earlier task."""
        sched = Scheduler()
        fired = []
        sched.once("outcome", 2, lambda: fired.append("old"))
        sched.once("outcome", 4, lambda: fired.append("new"))
        for _ in range(6):
            sched.advance()
        assert fired == ["new"]

    def test_cancel_returns_whether_pending(self):
        """cancel() reports whether anything was removed."""
        sched = Scheduler()
        sched.once("outcome", 2, lambda: None)
        assert sched.cancel("outcome") is True
        assert sched.cancel("outcome") is False

    def test_cancelled_in_same_pass_does_not_fire(self):
        """A task cancelled by an earlier callback in the pass stays silent."""
        sched = Scheduler()
        fired = []
        sched.once("a", 1, lambda: sched.cancel("b"))
        sched.once("b", 1, lambda: fired.append("b"))
        sched.advance()
        assert fired == []
        assert sched.kinds() == []

    def test_replacement_in_same_pass_is_not_counted_down(self):
        """A task replaced mid-pass starts counting on the next advance."""
        sched = Scheduler()
        fired = []
        sched.once("a", 1, lambda: sched.once("b", 2, lambda: fired.append("new")))
        sched.once("b", 1, lambda: fired.append("old"))

        sched.advance()
        assert fired == []
        sched.advance()
        assert fired == []
        sched.advance()
        assert fired == ["new"]

    def test_cancel_all(self):
        """cancel_all() silences every kind."""
        sched = Scheduler()
        fired = []
        sched.every("charge", 1, lambda: fired.append(1))
        sched.every("frame", 1, lambda: fired.append(2))
        sched.once("outcome", 1, lambda: fired.append(3))
        sched.cancel_all()
        sched.advance()
        assert fired == []
        assert sched.kinds() == []

    def test_tasks_fire_in_schedule_order(self):
        """Due tasks fire in the order they were scheduled."""
        sched = Scheduler()
        fired = []
        sched.once("second", 1, lambda: fired.append("second"))
        sched.once("first", 1, lambda: fired.append("first"))
        sched.advance()
        assert fired == ["second", "first"]
