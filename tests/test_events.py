import random

import pytest

from armazemsim.events import Event, EventType, MinHeap, Scheduler


def test_event_defaults():
    event = Event()
    assert event.time == 0.0
    assert event.type is EventType.PACKAGE_ARRIVAL
    assert (event.package_id, event.origin_id, event.destination_id) == (-1, -1, -1)


def test_transport_event_fields():
    event = Event(5.0, EventType.SCHEDULED_TRANSPORT, origin_id=2, destination_id=3)
    assert event.package_id == -1
    assert (event.origin_id, event.destination_id) == (2, 3)


def test_heap_pops_in_time_order():
    heap = MinHeap()
    for time in (30.0, 10.0, 20.0):
        heap.push(Event(time, EventType.PACKAGE_ARRIVAL, package_id=int(time)))
    assert [heap.pop().time for _ in range(3)] == [10.0, 20.0, 30.0]
    assert len(heap) == 0


def test_heap_sorted_invariant_on_many_events():
    rng = random.Random(1234)
    times = [rng.uniform(0, 1000) for _ in range(200)]
    heap = MinHeap()
    for t in times:
        heap.push(Event(t))
    assert len(heap) == len(times)
    popped = [heap.pop().time for _ in range(len(times))]
    assert popped == sorted(times)


def test_heap_interleaved_push_pop():
    heap = MinHeap()
    heap.push(Event(5.0))
    heap.push(Event(1.0))
    assert heap.pop().time == 1.0
    heap.push(Event(3.0))
    heap.push(Event(7.0))
    assert [heap.pop().time for _ in range(3)] == [3.0, 5.0, 7.0]


def test_heap_single_equal_time_returns_that_event():
    heap = MinHeap()
    only = Event(4.0, EventType.ARRIVAL_AFTER_TRANSPORT, package_id=9)
    heap.push(only)
    assert heap.pop() is only


def test_pop_empty_heap_raises():
    with pytest.raises(IndexError):
        MinHeap().pop()


def test_scheduler_starts_at_zero_and_advances():
    scheduler = Scheduler()
    assert scheduler.current_time == 0.0
    scheduler.advance_time(42.5)
    assert scheduler.current_time == 42.5


def test_scheduler_returns_earliest_event():
    scheduler = Scheduler()
    assert scheduler.has_events() is False
    scheduler.schedule(Event(8.0, package_id=1))
    scheduler.schedule(Event(2.0, package_id=2))
    assert scheduler.has_events() is True
    assert scheduler.next_event().package_id == 2
    assert scheduler.next_event().package_id == 1
    assert scheduler.has_events() is False


def test_scheduler_next_event_on_empty_raises():
    with pytest.raises(IndexError):
        Scheduler().next_event()