"""Custom exceptions for graph construction and queries."""


class GraphError(Exception):
    """Base exception for graph operations."""


class CapacityExceededError(GraphError):
    """Raised when a fixed-size graph cannot take another vertex."""


class VertexNotFoundError(GraphError, ValueError):
    """Raised when an operation names a vertex that is not in the graph."""
