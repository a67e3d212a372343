"""Simulation events, a time-ordered heap and the event scheduler."""

from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    """Kinds of events handled by the simulation."""

    PACKAGE_ARRIVAL = auto()
    SCHEDULED_TRANSPORT = auto()
    ARRIVAL_AFTER_TRANSPORT = auto()


@dataclass
class Event:
    """An event at a point in simulated time.

    Package events use ``package_id``; transport events use the
    origin and destination warehouse identifiers.
    """

    time: float = 0.0
    type: EventType = EventType.PACKAGE_ARRIVAL
    package_id: int = -1
    origin_id: int = -1
    destination_id: int = -1


class MinHeap:
    """Binary min-heap of events keyed on their time."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def push(self, event: Event) -> None:
        """Insert an event."""
        self._events.append(event)
        self._sift_up(len(self._events) - 1)

    def pop(self) -> Event:
        """Remove and return the event with the smallest time.

        Raises ``IndexError`` if the heap is empty.
        """
        if not self._events:
            raise IndexError("pop from an empty heap")
        smallest = self._events[0]
        last = self._events.pop()
        if self._events:
            self._events[0] = last
            self._sift_down(0)
        return smallest

    def _sift_up(self, index: int) -> None:
        events = self._events
        while index > 0:
            parent = (index - 1) // 2
            if events[index].time >= events[parent].time:
                break
            events[index], events[parent] = events[parent], events[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        events = self._events
        size = len(events)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and events[child].time < events[smallest].time:
                    smallest = child
            if smallest == index:
                return
            events[index], events[smallest] = events[smallest], events[index]
            index = smallest


class Scheduler:
    """Holds pending events and the current simulation time."""

    def __init__(self) -> None:
        self._heap = MinHeap()
        self.current_time: float = 0.0

    def schedule(self, event: Event) -> None:
        """Add an event to the pending set."""
        self._heap.push(event)

    def next_event(self) -> Event:
        """Remove and return the earliest pending event."""
        return self._heap.pop()

    def has_events(self) -> bool:
        """Return whether any event is still pending."""
        return bool(self._heap)

    def advance_time(self, time: float) -> None:
        """Set the current simulation time."""
        self.current_time = time