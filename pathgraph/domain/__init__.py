"""Domain layer - Errors and result models.

No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateVertexError,
    MissingEdgeError,
    NoRouteFoundError,
    PathGraphError,
    UnknownVertexError,
)
from .models import FrontierEntry, GeoLocation, NotFound, PathResult, SearchResult

__all__ = [
    # Models
    "FrontierEntry",
    "GeoLocation",
    "NotFound",
    "PathResult",
    "SearchResult",
    # Errors
    "PathGraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "MissingEdgeError",
    "NoRouteFoundError",
    "ConfigurationError",
]
