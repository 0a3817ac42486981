"""Tests for the fixed-timestep clock, ms conversion and cadence counting."""

import pytest
from truck_jump.clock import Cadence, Clock


def test_clock_initialization():
    """Clock starts at tick 0 with the requested rate."""
    clock = Clock(tps=60)
    assert clock.tps == 60
    assert clock.tick_number == 0


def test_advance_returns_new_tick_number():
    """advance() increments and returns the tick number."""
    clock = Clock(tps=20)
    assert clock.advance() == 1
    assert clock.advance() == 2
    assert clock.tick_number == 2


@pytest.mark.parametrize("tps", [0, -1])
def test_non_positive_tps_rejected(tps):
    """A zero or negative rate raises ValueError."""
    with pytest.raises(ValueError):
        Clock(tps=tps)


class TestTicksFor:
    """ms -> tick conversion used for the outcome delays."""

    def test_outcome_delays_at_60_fps(self):
        """1500 ms and 2000 ms are 90 and 120 ticks at 60 fps."""
        clock = Clock(tps=60)
        assert clock.ticks_for(1500) == 90
        assert clock.ticks_for(2000) == 120

    def test_outcome_delays_at_20_fps(self):
        """1500 ms and 2000 ms are 30 and 40 ticks at 20 fps."""
        clock = Clock(tps=20)
        assert clock.ticks_for(1500) == 30
        assert clock.ticks_for(2000) == 40

    def test_partial_tick_rounds_up(self):
        """A delay that falls between ticks is never shortened."""
        assert Clock(tps=30).ticks_for(50) == 2
        assert Clock(tps=25).ticks_for(1500) == 38

    def test_never_below_one_tick(self):
        """Zero or tiny delays still wait one tick."""
        clock = Clock(tps=10)
        assert clock.ticks_for(0) == 1
        assert clock.ticks_for(1) == 1

    def test_negative_ms_rejected(self):
        """Negative delays raise ValueError."""
        with pytest.raises(ValueError):
            Clock(tps=60).ticks_for(-5)


class TestCadence:
    """Counting 50 ms intervals across ticks of any rate."""

    @pytest.mark.parametrize("tps", [10, 20, 25, 30, 50, 60, 120, 144, 240])
    def test_twenty_intervals_per_second(self, tps):
        """One second of ticks always completes exactly 20 intervals."""
        cadence = Cadence(50, tps)
        assert sum(cadence.tick() for _ in range(tps)) == 20

    def test_slow_rate_completes_several_per_tick(self):
        """At 10 tps each 100 ms tick completes two 50 ms intervals."""
        cadence = Cadence(50, 10)
        assert cadence.tick() == 2

    def test_fast_rate_waits_for_whole_interval(self):
        """At 60 tps an interval completes on every third tick."""
        cadence = Cadence(50, 60)
        assert [cadence.tick() for _ in range(6)] == [0, 0, 1, 0, 0, 1]

    def test_uneven_rate_spreads_intervals(self):
        """At 50 tps intervals land on ticks 3 and 5 of every five."""
        cadence = Cadence(50, 50)
        assert [cadence.tick() for _ in range(5)] == [0, 0, 1, 0, 1]

    def test_non_positive_interval_rejected(self):
        """A zero interval raises ValueError."""
        with pytest.raises(ValueError):
            Cadence(0, 60)
