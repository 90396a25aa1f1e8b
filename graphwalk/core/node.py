"""GraphNode for GraphWalk.

A GraphNode is a plain, immutable data container. It knows its own position
in the graph, its value, and the positions of its neighbors. Navigation is
the job of the Graph and the traversers.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple


@dataclass(frozen=True, order=True)
class GraphNode:
    """Immutable node in a Graph.

    Nodes order by value first and identifier second, so two nodes holding
    equal values still compare deterministically. Neighbors take no part in
    ordering, equality or hashing.

    Attributes:
        value: Totally-ordered payload (usually an int)
        identifier: Stable position of this node in its graph
        neighbors: Ordered positions of the nodes this one points to
    """

    value: Any
    identifier: int
    neighbors: Tuple[int, ...] = field(default=(), compare=False)

    def sort_key(self) -> Tuple[Any, int]:
        """Return the (value, identifier) key used by priority traversal."""
        return (self.value, self.identifier)

    def is_leaf(self) -> bool:
        """Check if this node has no outgoing edges."""
        return not self.neighbors

    def __str__(self) -> str:
        return f"{self.identifier}:{self.value}"
