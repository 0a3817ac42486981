"""Tests for the PowerCharger meter."""

from truck_jump.charger import PowerCharger


def test_starts_empty():
    """A new meter reads zero and is not full."""
    charger = PowerCharger()
    assert charger.power == 0
    assert not charger.full


def test_tick_adds_step():
    """Each tick adds two units."""
    charger = PowerCharger()
    assert charger.tick() == 2
    assert charger.tick() == 4


def test_caps_at_max():
    """Power stops at 100 however many ticks run."""
    charger = PowerCharger()
    for _ in range(200):
        charger.tick()
    assert charger.power == 100
    assert charger.full


def test_odd_start_caps_exactly():
    """A step that would overshoot lands exactly on 100."""
    charger = PowerCharger(power=99)
    assert charger.tick() == 100


def test_never_decreases():
    """Power is non-decreasing across ticks."""
    charger = PowerCharger()
    last = 0
    for _ in range(60):
        power = charger.tick()
        assert power >= last
        last = power


def test_reset():
    """reset() empties the meter."""
    charger = PowerCharger(power=42)
    charger.reset()
    assert charger.power == 0
