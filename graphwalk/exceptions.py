"""Exception hierarchy for GraphWalk.

Every failure in GraphWalk is a programmer or input error surfaced at the
point of construction: graphs are validated when they are built, traversals
validate their start position when they are created. Nothing here is
retried or swallowed mid-traversal.
"""

from typing import Any


class GraphWalkError(Exception):
    """Base class for all GraphWalk errors."""
    pass


class GraphConstructionError(GraphWalkError, ValueError):
    """Raised when a graph cannot be built from the supplied pairs."""
    pass


class InvalidNeighborError(GraphConstructionError):
    """Raised when a node references a neighbor outside the graph.

    Attributes:
        node: Position of the node holding the bad reference
        neighbor: The offending neighbor reference
        size: Number of nodes in the graph being built
    """

    def __init__(self, node: int, neighbor: Any, size: int):
        self.node = node
        self.neighbor = neighbor
        self.size = size
        super().__init__(
            f"Node {node} references neighbor {neighbor!r}, "
            f"but valid positions are 0..{size - 1}"
            if size else
            f"Node {node} references neighbor {neighbor!r} in an empty graph"
        )


class InvalidPositionError(GraphWalkError, IndexError):
    """Raised when a node is looked up at a position outside the graph.

    Attributes:
        position: The requested position
        size: Number of nodes in the graph
    """

    def __init__(self, position: Any, size: int, message: str = None):
        self.position = position
        self.size = size
        if message is None:
            message = (
                f"Position {position!r} is out of range for a graph of {size} node(s)"
            )
        super().__init__(message)


class InvalidStartError(InvalidPositionError):
    """Raised when a traversal is anchored at a position outside the graph."""

    def __init__(self, position: Any, size: int):
        super().__init__(
            position,
            size,
            f"Cannot start traversal at {position!r}: "
            f"graph has {size} node(s)"
        )


class ConfigurationError(GraphWalkError, ValueError):
    """Raised when a TraversalConfig fails validation."""
    pass
