"""Typed errors for graph construction and path search.

Structural errors (unknown or duplicate vertices) abort the single
offending operation and are surfaced to the caller as-is. A search that
exhausts its frontier is not an error: it returns a ``NotFound`` value
(see ``models.py``). Only ``AStarRouteSolver.solve`` turns that outcome
into ``NoRouteFoundError`` for callers who prefer exceptions.

All errors inherit from PathGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PathGraphError(Exception):
    """Base error for the pathgraph package.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateVertexError(PathGraphError):
    """Vertex is already present in the graph.

    Attributes:
        vertex: The vertex that was added twice
    """

    vertex: Any = None


@dataclass
class UnknownVertexError(PathGraphError):
    """Vertex is not present in the graph.

    Attributes:
        vertex: The vertex that was not found
    """

    vertex: Any = None


@dataclass
class MissingEdgeError(PathGraphError):
    """Two consecutive vertices of a path are not adjacent.

    Attributes:
        source: First vertex of the pair
        target: Second vertex of the pair
    """

    source: Any = None
    target: Any = None


@dataclass
class NoRouteFoundError(PathGraphError):
    """No path exists between the requested vertices.

    Attributes:
        start: Start vertex of the search
        goal: Goal vertex of the search
    """

    start: Any = None
    goal: Any = None


@dataclass
class ConfigurationError(PathGraphError):
    """Invalid configuration value.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
