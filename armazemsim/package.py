"""Packages moving through the warehouse network."""

from dataclasses import dataclass, field
from enum import Enum, auto


class State(Enum):
    """Life-cycle stages of a package."""

    NOT_POSTED = auto()
    ARRIVAL_SCHEDULED = auto()
    ARRIVED_NOT_STORED = auto()
    STORED = auto()
    ALLOCATED_TO_TRANSPORT = auto()
    DELIVERED = auto()


@dataclass
class Package:
    """A package with its endpoints, current state and remaining route.

    ``id`` is the sequential index used internally and in the event log;
    ``original_label_id`` is the label read from the input. ``route`` holds
    the warehouse names still to be visited, starting with the current one.
    """

    id: int = 0
    original_label_id: int = 0
    sender: str = ""
    recipient: str = ""
    origin: str = ""
    destination: str = ""
    kind: str = ""
    state: State = State.STORED
    route: list[str] = field(default_factory=list)