import time

from appassets.clock import FixedClock, SystemClock


def test_fixed_clock():
    assert FixedClock(1337).now() == 1337


def test_system_clock_tracks_time(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: 1700000000.9)
    assert SystemClock().now() == 1700000000
