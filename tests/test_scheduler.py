import pytest

from snakegame.scheduler import TickScheduler


def test_nothing_pending_initially(clock):
    scheduler = TickScheduler(clock)
    assert not scheduler.pending
    assert not scheduler.poll()


def test_tick_fires_once_when_due(clock):
    scheduler = TickScheduler(clock)
    scheduler.schedule(150)
    clock.advance(149)
    assert not scheduler.poll()
    clock.advance(1)
    assert scheduler.poll()
    assert not scheduler.pending
    clock.advance(1000)
    assert not scheduler.poll()


def test_rescheduling_replaces_pending_tick(clock):
    scheduler = TickScheduler(clock)
    scheduler.schedule(150)
    clock.advance(100)
    scheduler.schedule(150)
    assert scheduler.due_at == 250
    clock.advance(60)
    assert not scheduler.poll()
    clock.advance(90)
    assert scheduler.poll()
    assert not scheduler.poll()


def test_cancel_drops_pending_tick(clock):
    scheduler = TickScheduler(clock)
    scheduler.schedule(50)
    scheduler.cancel()
    scheduler.cancel()
    clock.advance(100)
    assert not scheduler.pending
    assert not scheduler.poll()


def test_non_positive_interval_is_rejected(clock):
    scheduler = TickScheduler(clock)
    with pytest.raises(ValueError):
        scheduler.schedule(0)


def test_reschedule_measures_from_previous_due_time(clock):
    scheduler = TickScheduler(clock)
    scheduler.schedule(150)
    clock.advance(163)
    assert scheduler.poll()
    scheduler.reschedule(150)
    assert scheduler.due_at == 300


def test_reschedule_after_stall_fires_once(clock):
    scheduler = TickScheduler(clock)
    scheduler.schedule(150)
    clock.advance(1000)
    assert scheduler.poll()
    scheduler.reschedule(150)
    assert scheduler.due_at == 1000
    assert scheduler.poll()
    scheduler.reschedule(150)
    assert scheduler.due_at == 1150
    assert not scheduler.poll()


def test_reschedule_without_previous_tick_uses_clock(clock):
    scheduler = TickScheduler(clock)
    clock.advance(40)
    scheduler.reschedule(150)
    assert scheduler.due_at == 190
