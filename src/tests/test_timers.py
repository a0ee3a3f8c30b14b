import pytest

from game_system.timers import TimerPair, TimerScheduler


def test_call_later_fires_once_after_delay(scheduler, clock):
    fired = []
    scheduler.call_later(100, lambda: fired.append("a"))

    clock.advance(99)
    assert scheduler.update() == 0
    clock.advance(1)
    assert scheduler.update() == 1
    clock.advance(1000)
    assert scheduler.update() == 0
    assert fired == ["a"]
    assert scheduler.pending_count() == 0


def test_due_tasks_fire_in_deadline_order(scheduler, clock):
    fired = []
    scheduler.call_later(300, lambda: fired.append("late"))
    scheduler.call_later(100, lambda: fired.append("early"))
    scheduler.call_later(200, lambda: fired.append("middle"))
    scheduler.call_later(100, lambda: fired.append("early-second"))

    clock.advance(500)
    scheduler.update()

    assert fired == ["early", "early-second", "middle", "late"]


def test_cancelled_task_never_fires(scheduler, clock):
    fired = []
    task = scheduler.call_later(100, lambda: fired.append("a"))
    task.cancel()
    task.cancel()

    clock.advance(200)
    scheduler.update()

    assert fired == []
    assert task.fired_count == 0


def test_callback_can_cancel_a_task_due_in_the_same_update(scheduler, clock):
    fired = []
    second = scheduler.call_later(200, lambda: fired.append("second"))
    scheduler.call_later(100, lambda: (fired.append("first"), second.cancel()))

    clock.advance(300)
    scheduler.update()

    assert fired == ["first"]


def test_task_armed_inside_callback_waits_for_its_own_deadline(scheduler, clock):
    fired = []
    scheduler.call_later(100, lambda: scheduler.call_later(100, lambda: fired.append("nested")))

    clock.advance(100)
    scheduler.update()
    assert fired == []

    clock.advance(100)
    scheduler.update()
    assert fired == ["nested"]


def test_repeating_task_fires_once_per_elapsed_interval(scheduler, clock):
    fired = []
    task = scheduler.call_every(250, lambda: fired.append(1))

    clock.advance(249)
    scheduler.update()
    assert fired == []

    clock.advance(1)
    scheduler.update()
    assert len(fired) == 1

    clock.advance(750)
    scheduler.update()
    assert len(fired) == 4
    assert task.fired_count == 4

    task.cancel()
    clock.advance(1000)
    scheduler.update()
    assert len(fired) == 4


def test_invalid_delays_are_rejected(scheduler):
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.call_every(0, lambda: None)


def test_cancel_all_clears_everything(scheduler, clock):
    fired = []
    scheduler.call_later(10, lambda: fired.append(1))
    scheduler.call_every(10, lambda: fired.append(2))
    assert scheduler.pending_count() == 2

    scheduler.cancel_all()
    clock.advance(100)
    scheduler.update()

    assert fired == []
    assert scheduler.pending_count() == 0


def test_timer_pair_cancel_stops_all_three(clock):
    scheduler = TimerScheduler(clock=clock)
    warning = scheduler.call_later(100, lambda: None)
    expiry = scheduler.call_later(200, lambda: None)
    pair = TimerPair(0, warning, expiry)
    pair.blink = scheduler.call_every(50, lambda: None)
    blink = pair.blink
    assert pair.active

    pair.cancel()
    pair.cancel()

    assert warning.cancelled and expiry.cancelled and blink.cancelled
    assert pair.blink is None
    assert not pair.active
    assert scheduler.pending_count() == 0
