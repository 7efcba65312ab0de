import time

import pytest

from abyss.timing import Time, Timer


def test_default_time_is_zero():
    assert Time().sec() == 0.0
    assert float(Time()) == 0.0


def test_seconds_round_trip():
    assert Time(2.5).sec() == 2.5
    assert float(Time(2.5)) == 2.5


def test_one_second_in_milliseconds():
    assert Time(1).milli() == pytest.approx(1000)


def test_unit_chain():
    t = Time(0.375)
    assert t.micro() == pytest.approx(t.milli() * 1000)
    assert t.nano() == pytest.approx(t.micro() * 1000)


def test_time_ordering():
    assert Time(0.1) < Time(0.2)
    assert Time(0.5) == Time(0.5)


def test_timer_elapsed_grows():
    timer = Timer()
    first = timer.elapsed()
    time.sleep(0.02)
    second = timer.elapsed()
    assert first.sec() >= 0.0
    assert second.sec() >= 0.02
    assert second > first


def test_timer_reset():
    timer = Timer()
    time.sleep(0.02)
    before = timer.elapsed()
    timer.reset()
    after = timer.elapsed()
    assert after < before