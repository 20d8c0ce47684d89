"""Ports layer - Protocols the core and adapters are written against."""

from .graph import GraphPort, Heuristic, RouteSolverPort

__all__ = [
    "GraphPort",
    "Heuristic",
    "RouteSolverPort",
]
