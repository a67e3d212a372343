"""Reading the simulation input and building the initial simulation state."""

import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union

from .events import Event, EventType, Scheduler
from .package import Package
from .util import format_warehouse_name, parse_warehouse_name
from .warehouse import Warehouse

logger = logging.getLogger(__name__)


class InputError(Exception):
    """Raised when the simulation input cannot be read or is malformed."""


@dataclass
class Config:
    """Simulation parameters and the warehouse connection graph."""

    transport_time: int = 0
    handling_time: int = 0
    simulation_time: int = 0
    num_package_types: int = 0
    num_warehouses: int = 0
    graph: list[list[int]] = field(default_factory=list)
    total_initial_packages: int = 0
    delivered_count: int = 0


@dataclass
class LoadedInput:
    """Everything needed to start a simulation run."""

    config: Config
    scheduler: Scheduler
    packages: list[Package]
    warehouses: list[Warehouse]


def compute_route(package: Package, graph: list[list[int]]) -> list[str]:
    """Set the package's route to a shortest path found by breadth-first search.

    The route lists warehouse names from origin to destination inclusive.
    It is left empty when an endpoint is out of range or no path exists.
    The route is also returned.
    """
    total = len(graph)
    origin = parse_warehouse_name(package.origin)
    destination = parse_warehouse_name(package.destination)
    package.route = []

    if not (0 <= origin < total and 0 <= destination < total):
        logger.error("invalid origin or destination for package %d", package.id)
        return package.route

    previous: dict[int, int] = {}
    visited = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        if current == destination:
            break
        for neighbour, linked in enumerate(graph[current]):
            if linked == 1 and neighbour not in visited:
                previous[neighbour] = current
                visited.add(neighbour)
                queue.append(neighbour)

    if destination not in visited:
        logger.error(
            "no path from %s to %s for package %d",
            package.origin,
            package.destination,
            package.id,
        )
        return package.route

    path = [destination]
    while path[-1] != origin:
        path.append(previous[path[-1]])
    package.route = [format_warehouse_name(node) for node in reversed(path)]
    return package.route


def _tokens(lines: list[str]) -> Iterator[tuple[int, str]]:
    for line_number, line in enumerate(lines):
        for token in line.split():
            yield line_number, token


def _read_int(tokens: Iterator[tuple[int, str]], what: str) -> tuple[int, int]:
    try:
        line_number, token = next(tokens)
    except StopIteration:
        raise InputError(f"unexpected end of input while reading {what}") from None
    try:
        return line_number, int(token)
    except ValueError:
        raise InputError(f"invalid integer {token!r} while reading {what}") from None


def _parse_package_line(line: str) -> tuple[float, int, int, int]:
    fields = line.split()
    if len(fields) < 7:
        raise InputError(f"malformed package line: {line!r}")
    try:
        time = float(fields[0])
        label = int(fields[2])
        origin = int(fields[4])
        destination = int(fields[6])
    except ValueError:
        raise InputError(f"malformed package line: {line!r}") from None
    return time, label, origin, destination


def parse_input(text: str) -> LoadedInput:
    """Build the initial simulation state from the text of an input file.

    The text holds five configuration integers, the adjacency matrix, the
    package count and then one line per package of the form
    ``<time> pac <label> org <origin> dst <destination>``.
    """
    if not text:
        raise InputError("input is empty")

    lines = text.splitlines()
    tokens = _tokens(lines)
    config = Config()
    _, config.transport_time = _read_int(tokens, "configuration")
    _, config.handling_time = _read_int(tokens, "configuration")
    _, config.simulation_time = _read_int(tokens, "configuration")
    _, config.num_package_types = _read_int(tokens, "configuration")
    _, config.num_warehouses = _read_int(tokens, "configuration")

    size = config.num_warehouses
    if size < 0:
        raise InputError(f"invalid number of warehouses: {size}")

    config.graph = [
        [_read_int(tokens, f"graph entry [{row}][{column}]")[1] for column in range(size)]
        for row in range(size)
    ]

    warehouses = [Warehouse(format_warehouse_name(index)) for index in range(size)]
    for warehouse, row in zip(warehouses, config.graph):
        for column, linked in enumerate(row):
            if linked == 1:
                warehouse.add_section(format_warehouse_name(column))

    count_line, count = _read_int(tokens, "number of packages")
    config.total_initial_packages = count

    scheduler = Scheduler()
    packages: list[Package] = []
    package_lines = lines[count_line + 1:]
    for index in range(max(count, 0)):
        if index >= len(package_lines):
            raise InputError(f"input ended before package {index}")
        time, label, origin_id, destination_id = _parse_package_line(
            package_lines[index]
        )
        package = Package(
            id=index,
            original_label_id=label,
            sender=f"Rem{label}",
            recipient=f"Dest{label}",
            origin=format_warehouse_name(origin_id),
            destination=format_warehouse_name(destination_id),
            kind="Normal",
        )
        compute_route(package, config.graph)
        packages.append(package)
        scheduler.schedule(Event(time, EventType.PACKAGE_ARRIVAL, package_id=index))

    for origin_id, row in enumerate(config.graph):
        for destination_id, linked in enumerate(row):
            if linked == 1:
                scheduler.schedule(
                    Event(
                        config.simulation_time,
                        EventType.SCHEDULED_TRANSPORT,
                        origin_id=origin_id,
                        destination_id=destination_id,
                    )
                )

    return LoadedInput(config, scheduler, packages, warehouses)


def load_input(path: Union[str, Path]) -> LoadedInput:
    """Read an input file and build the initial simulation state."""
    try:
        text = Path(path).read_text()
    except OSError as error:
        raise InputError(f"cannot open input file {str(path)!r}: {error}") from error
    return parse_input(text)


def _first_event(loaded: LoadedInput) -> Optional[Event]:
    return loaded.scheduler.next_event() if loaded.scheduler.has_events() else None