"""Discrete-event simulation of package routing through LIFO warehouses."""

__version__ = "0.1.0"
__all__ = ["events", "loader", "package", "simulation", "stack", "util", "warehouse"]