"""Last-in first-out storage for one warehouse section."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class StackedPackage:
    """A package held in a section and the time it was placed there."""

    package_id: int
    arrival_time: float


class SectionStack:
    """A stack of packages; iteration runs from bottom to top."""

    def __init__(self) -> None:
        self._items: list[StackedPackage] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[StackedPackage]:
        return iter(list(self._items))

    def push(self, package_id: int, arrival_time: float) -> None:
        """Place a package on top of the stack."""
        self._items.append(StackedPackage(package_id, arrival_time))

    def pop(self) -> StackedPackage:
        """Remove and return the top package; ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("pop from an empty section")
        return self._items.pop()

    def peek(self) -> StackedPackage:
        """Return the top package without removing it; ``IndexError`` if empty."""
        if not self._items:
            raise IndexError("peek at an empty section")
        return self._items[-1]

    def remove_by_id(self, package_id: int) -> list[StackedPackage]:
        """Take out the topmost package with the given id.

        The packages above it are lifted off and put back in their original
        order; they are returned from bottom to top. Raises ``KeyError`` if
        no such package is held, leaving the stack unchanged.
        """
        for index in range(len(self._items) - 1, -1, -1):
            if self._items[index].package_id == package_id:
                restacked = self._items[index + 1:]
                del self._items[index]
                return restacked
        raise KeyError(package_id)