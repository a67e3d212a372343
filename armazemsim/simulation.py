"""Running the discrete-event simulation and the command-line entry point."""

import logging
import sys
from typing import Iterator, Optional, Sequence

from .events import Event, EventType
from .loader import InputError, LoadedInput, load_input
from .package import Package, State
from .util import format_warehouse_name
from .warehouse import Warehouse

logger = logging.getLogger(__name__)

# Handling cost charged when the package to dispatch is already on top.
_TOP_OF_STACK_COST = 11.0


def format_event(time: int, package_id: int, action: str, origin: str, target: str) -> str:
    """Return one line of the event log."""
    line = f"{time:07d} pacote {package_id:03d} {action}"
    if action in ("armazenado", "rearmazenado"):
        line += f" em {origin} na secao {target}"
    elif action == "removido":
        line += f" de {origin} na secao {target}"
    elif action == "em transito":
        line += f" de {origin} para {target}"
    elif action == "entregue":
        line += f" em {origin}"
    return line


def find_warehouse(name: str, warehouses: Sequence[Warehouse]) -> Optional[Warehouse]:
    """Return the warehouse with the given name, or ``None``."""
    return next((warehouse for warehouse in warehouses if warehouse.name == name), None)


def _deliver(loaded: LoadedInput, package: Package, time: int, where: str) -> str:
    package.state = State.DELIVERED
    loaded.config.delivered_count += 1
    return format_event(time, package.id, "entregue", where, "")


def _store(warehouse: Warehouse, package: Package, section: str, time: int) -> str:
    try:
        warehouse.store(package.id, section, time)
    except KeyError as error:
        logger.error("%s", error)
    package.state = State.STORED
    return format_event(time, package.id, "armazenado", warehouse.name, section)


def _handle_arrival(loaded: LoadedInput, event: Event, time: int) -> Iterator[str]:
    package = loaded.packages[event.package_id]
    if not package.route:
        logger.warning("package %d arrived with an empty route", package.id)
        yield _deliver(loaded, package, time, package.destination)
        return
    current = package.route[0]
    warehouse = find_warehouse(current, loaded.warehouses)
    if warehouse is None:
        logger.error("warehouse %s not found for package %d", current, package.id)
        return
    if len(package.route) == 1:
        yield _deliver(loaded, package, time, current)
    else:
        yield _store(warehouse, package, package.route[1], time)


def _handle_transport(loaded: LoadedInput, event: Event, time: int) -> Iterator[str]:
    config = loaded.config
    origin = loaded.warehouses[event.origin_id]
    section = format_warehouse_name(event.destination_id)
    loaded.scheduler.schedule(
        Event(
            time + config.simulation_time,
            EventType.SCHEDULED_TRANSPORT,
            origin_id=event.origin_id,
            destination_id=event.destination_id,
        )
    )

    moved = 0
    while moved < config.transport_time and not origin.section_empty(section):
        package_id = origin.oldest_in_section(section)
        if package_id is None:
            break
        package = loaded.packages[package_id]
        if package.state is not State.STORED:
            logger.warning(
                "package %d is the oldest in %s section %s but is %s",
                package_id, origin.name, section, package.state.name,
            )
            break
        result = origin.retrieve_oldest(section)
        if result is None:
            logger.error(
                "failed to retrieve package %d from section %s in warehouse %s",
                package_id, section, origin.name,
            )
            break
        _, restacked = result

        cost = len(restacked) * config.handling_time if restacked else _TOP_OF_STACK_COST
        departure = time + cost

        for item in restacked:
            yield format_event(time, item.package_id, "rearmazenado", origin.name, section)
        yield format_event(int(departure), package_id, "removido", origin.name, section)
        yield format_event(int(departure), package_id, "em transito", origin.name, section)
        package.state = State.ALLOCATED_TO_TRANSPORT

        loaded.scheduler.schedule(
            Event(
                departure + config.handling_time,
                EventType.ARRIVAL_AFTER_TRANSPORT,
                package_id=package_id,
            )
        )
        moved += 1


def _handle_arrival_after_transport(
    loaded: LoadedInput, event: Event, time: int
) -> Iterator[str]:
    package = loaded.packages[event.package_id]
    if not package.route:
        logger.warning("package %d arrived with an empty route", package.id)
        yield _deliver(loaded, package, time, package.destination)
        return
    package.route.pop(0)
    if not package.route:
        yield _deliver(loaded, package, time, package.destination)
        return
    current = package.route[0]
    warehouse = find_warehouse(current, loaded.warehouses)
    if warehouse is None:
        logger.error("warehouse %s not found for package %d after transport", current, package.id)
        return
    if len(package.route) == 1:
        yield _deliver(loaded, package, time, current)
    else:
        yield _store(warehouse, package, package.route[1], time)


_HANDLERS = {
    EventType.PACKAGE_ARRIVAL: _handle_arrival,
    EventType.SCHEDULED_TRANSPORT: _handle_transport,
    EventType.ARRIVAL_AFTER_TRANSPORT: _handle_arrival_after_transport,
}


def run_simulation(loaded: LoadedInput) -> Iterator[str]:
    """Process events in time order, yielding event-log lines as they occur.

    The run stops when no events remain or every initial package is delivered.
    """
    scheduler = loaded.scheduler
    config = loaded.config
    while scheduler.has_events() and config.delivered_count < config.total_initial_packages:
        event = scheduler.next_event()
        scheduler.advance_time(event.time)
        yield from _HANDLERS[event.type](loaded, event, int(event.time))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation on the input file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Uso correto: armazemsim <arquivo de entrada>", file=sys.stderr)
        return 1
    try:
        loaded = load_input(args[0])
    except InputError as error:
        print(error, file=sys.stderr)
        print("Falha ao carregar dados de entrada. Encerrando.", file=sys.stderr)
        return 1
    if not loaded.packages or not loaded.warehouses:
        print("Falha ao carregar dados de entrada. Encerrando.", file=sys.stderr)
        return 1
    loaded.config.total_initial_packages = len(loaded.packages)
    for line in run_simulation(loaded):
        print(line)
    return 0