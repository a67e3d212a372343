"""Warehouses made of per-destination sections."""

from typing import Iterator, Optional

from .stack import SectionStack, StackedPackage


class Warehouse:
    """A named warehouse holding one stacked section per next destination."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._sections: dict[str, SectionStack] = {}

    def __repr__(self) -> str:
        return f"Warehouse({self.name!r}, sections={list(self._sections)!r})"

    @property
    def section_names(self) -> list[str]:
        """Names of the sections in the order they were added."""
        return list(self._sections)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sections))

    def add_section(self, destination: str) -> None:
        """Add a section for a destination; existing sections are left alone."""
        self._sections.setdefault(destination, SectionStack())

    def store(self, package_id: int, destination: str, time: float) -> None:
        """Stack a package in the section for ``destination``.

        Raises ``KeyError`` if the warehouse has no such section.
        """
        try:
            section = self._sections[destination]
        except KeyError:
            raise KeyError(
                f"section {destination!r} not found in warehouse {self.name!r}"
            ) from None
        section.push(package_id, time)

    def oldest_in_section(self, destination: str) -> Optional[int]:
        """Return the id of the earliest-stored package in a section.

        Ties go to the package lower in the stack. Returns ``None`` if the
        section is empty or does not exist. Nothing is removed.
        """
        section = self._sections.get(destination)
        if not section:
            return None
        oldest = min(section, key=lambda item: item.arrival_time)
        return oldest.package_id

    def retrieve_oldest(
        self, destination: str
    ) -> Optional[tuple[int, list[StackedPackage]]]:
        """Take the earliest-stored package out of a section.

        Returns the package id together with the packages that had to be
        lifted off and restacked (bottom to top), or ``None`` if the section
        is empty or does not exist.
        """
        package_id = self.oldest_in_section(destination)
        if package_id is None:
            return None
        restacked = self._sections[destination].remove_by_id(package_id)
        return package_id, restacked

    def section_index(self, destination: str) -> Optional[int]:
        """Return the position of a section, or ``None`` if it does not exist."""
        for index, name in enumerate(self._sections):
            if name == destination:
                return index
        return None

    def section_empty(self, destination: str) -> bool:
        """Return whether a section holds no packages; missing sections count as empty."""
        section = self._sections.get(destination)
        return not section