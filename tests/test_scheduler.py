import pytest

from flappy_bird.scheduler import FixedTickScheduler


def test_runs_whole_ticks_and_carries_remainder() -> None:
    calls: list[int] = []
    sched = FixedTickScheduler(lambda: calls.append(1), tick_ms=20)
    assert sched.advance(45) == 2
    assert sched.accumulator == pytest.approx(5)
    assert sched.advance(15) == 1
    assert sched.accumulator == pytest.approx(0)
    assert len(calls) == 3


def test_short_frames_accumulate() -> None:
    calls: list[int] = []
    sched = FixedTickScheduler(lambda: calls.append(1), tick_ms=20)
    for _ in range(3):
        sched.advance(8)
    assert len(calls) == 1


def test_backlog_is_capped() -> None:
    calls: list[int] = []
    sched = FixedTickScheduler(lambda: calls.append(1), tick_ms=20, max_steps=5)
    assert sched.advance(1000) == 5
    assert sched.accumulator < 20


def test_negative_elapsed_ignored() -> None:
    sched = FixedTickScheduler(lambda: None, tick_ms=20)
    assert sched.advance(-50) == 0
    assert sched.accumulator == 0.0


def test_rejects_bad_tick() -> None:
    with pytest.raises(ValueError):
        FixedTickScheduler(lambda: None, tick_ms=0)
