# armazemsim

A discrete-event simulator that moves packages through a network of
warehouses. Each warehouse keeps one section per neighbouring warehouse, and
every section is a stack: getting the oldest package out means lifting off the
packages on top of it and putting them back, which costs handling time.

Packages follow a shortest route (breadth-first search over the warehouse
graph). Transports between connected warehouses run on a fixed interval, and
each transport carries a limited number of packages.

## Installation

```
pip install .
```

## Running a simulation

```
armazemsim input.txt
```

The event log goes to standard output, one line per event. Each line starts
with the time (seven digits) and the package's sequential number (three
digits), for example:

```
0000110 pacote 000 armazenado em 000 na secao 001
0000121 pacote 000 removido de 000 na secao 001
0000121 pacote 000 em transito de 000 para 001
0000141 pacote 000 entregue em 001
```

Packages lifted off to reach the one being dispatched are logged as
`rearmazenado`. Error messages go to standard error. The command exits with
status 1 if it is not given exactly one input file, if the input cannot be
read or parsed, or if it holds no packages or no warehouses; otherwise it
exits with status 0.

## Input format

All values are separated by whitespace:

1. Five integers: transport capacity (packages per transport), handling time,
   transport interval, number of package types and number of warehouses.
2. The adjacency matrix of the warehouse graph (`1` means connected).
3. The number of packages.
4. One line per package: `<time> pac <label> org <origin> dst <destination>`.

Warehouses are named by their index padded to three digits (`000`, `001`, ...).
The first transport on every connection happens at the transport interval and
then repeats every interval.

## Timing rules

When a transport runs, it takes the earliest-stored packages from the section
for its destination, up to the transport capacity. For each one:

- every package that had to be lifted off costs the handling time; if the
  package was already on top, the cost is a fixed 11 time units;
- the package leaves at the transport time plus that cost;
- it arrives at the next warehouse one handling time after leaving.

The run ends when every package is delivered or no events remain.

## Using it from Python

```python
from armazemsim.loader import load_input
from armazemsim.simulation import run_simulation

loaded = load_input("input.txt")
for line in run_simulation(loaded):
    print(line)
```

`run_simulation` is a generator of log lines. `parse_input` takes the same
format as a string. Both `load_input` and `parse_input` raise
`armazemsim.loader.InputError` when the input cannot be read or is malformed.

Other building blocks:

- `armazemsim.events`: `Event`, `EventType`, `MinHeap` and `Scheduler`.
- `armazemsim.stack`: `SectionStack` and `StackedPackage`.
- `armazemsim.warehouse`: `Warehouse`.
- `armazemsim.package`: `Package` and `State`.
- `armazemsim.loader`: `Config`, `LoadedInput`, `compute_route`.
- `armazemsim.simulation`: `format_event`, `find_warehouse`, `main`.
- `armazemsim.util`: `format_warehouse_name`, `parse_warehouse_name`.

## Limitations

The number of package types is read from the input but does not affect the
simulation. Packages whose origin or destination cannot be reached get an empty
route and are logged as delivered at their destination on arrival.