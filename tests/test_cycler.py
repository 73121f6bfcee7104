import pytest

from media_control.core.cycler import cycle


def test_cycle_forward_and_wraparound():
    assert cycle(3, 0, 1) == 1
    assert cycle(3, 2, 1) == 0


def test_cycle_backward_wraps_to_last_player():
    assert cycle(3, 0, -1) == 2
    assert cycle(1, 0, -1) == 0


@pytest.mark.parametrize("count", [1, 2, 3, 7])
def test_cycle_stays_in_range_and_round_trips(count):
    for current in range(count):
        for step in (1, -1):
            assert 0 <= cycle(count, current, step) < count
        assert cycle(count, cycle(count, current, 1), -1) == current


def test_cycle_rejects_empty_roster():
    with pytest.raises(ValueError):
        cycle(0, 0, 1)
