"""Helpers for converting warehouse identifiers to and from their names."""

import re

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def format_warehouse_name(warehouse_id: int) -> str:
    """Return the identifier left-padded with zeros to three characters."""
    return str(warehouse_id).rjust(3, "0")


def parse_warehouse_name(name: str) -> int:
    """Return the integer at the start of a warehouse name such as ``"007"``.

    Leading whitespace is skipped and trailing characters are ignored.
    Raises ``ValueError`` if the name does not start with a number.
    """
    match = _LEADING_INTEGER.match(name)
    if match is None:
        raise ValueError(f"invalid warehouse name: {name!r}")
    return int(match.group(1))