"""Immutable graph store for GraphWalk.

The Graph owns its nodes; traversers only ever hold a reference to it.
Neighbor references are validated once, when the graph is built, so the
traversal code never has to deal with dangling edges.
"""

from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from ..exceptions import (
    GraphConstructionError,
    InvalidNeighborError,
    InvalidPositionError,
)
from ..log import get_logger
from .node import GraphNode

logger = get_logger(__name__)


def _is_position(value: Any) -> bool:
    # bool is an int subclass but never a meaningful position
    return isinstance(value, int) and not isinstance(value, bool)


class Graph:
    """Read-only, ordered collection of GraphNode objects.

    Nodes are addressed by position 0..N-1. Positions are stable for the
    lifetime of the graph and there is no API to add, remove or rewire
    nodes.

    Example:
        >>> graph = Graph.from_pairs([(0, [1]), (1, [0])])
        >>> graph[1].neighbors
        (0,)
    """

    __slots__ = ("_nodes",)

    def __init__(self, pairs: Iterable[Tuple[Any, Sequence[int]]] = ()):
        """Build a graph from (value, neighbors) pairs.

        Args:
            pairs: Iterable of (value, neighbor-positions) pairs; the pair's
                index becomes the node's identifier

        Raises:
            GraphConstructionError: If a pair is malformed
            InvalidNeighborError: If a neighbor position is outside the graph
        """
        self._nodes: Tuple[GraphNode, ...] = self._build(pairs)
        logger.debug(
            "Graph built",
            node_count=len(self._nodes),
            edge_count=self.edge_count(),
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Sequence[int]]]) -> "Graph":
        """Build a graph from a literal list of (value, neighbors) pairs."""
        return cls(pairs)

    @staticmethod
    def _build(pairs: Iterable[Tuple[Any, Sequence[int]]]) -> Tuple[GraphNode, ...]:
        raw: List[Tuple[Any, Tuple[Any, ...]]] = []
        for index, pair in enumerate(pairs):
            try:
                value, neighbors = pair
                neighbors = tuple(neighbors)
            except (TypeError, ValueError) as e:
                raise GraphConstructionError(
                    f"Node {index}: expected a (value, neighbors) pair, got {pair!r}"
                ) from e
            raw.append((value, neighbors))

        size = len(raw)
        nodes = []
        for index, (value, neighbors) in enumerate(raw):
            for neighbor in neighbors:
                if not _is_position(neighbor) or not 0 <= neighbor < size:
                    logger.warning(
                        "Rejected dangling neighbor reference",
                        node=index,
                        neighbor=neighbor,
                        size=size,
                    )
                    raise InvalidNeighborError(index, neighbor, size)
            nodes.append(GraphNode(value=value, identifier=index, neighbors=neighbors))
        return tuple(nodes)

    # Read-only access

    def is_valid_position(self, position: Any) -> bool:
        """Check if position addresses a node in this graph."""
        return _is_position(position) and 0 <= position < len(self._nodes)

    def node(self, position: int) -> GraphNode:
        """Look up a node by position.

        Negative positions are rejected rather than counted from the end.

        Raises:
            InvalidPositionError: If position is outside 0..N-1
        """
        if not self.is_valid_position(position):
            raise InvalidPositionError(position, len(self._nodes))
        return self._nodes[position]

    def neighbors_of(self, position: int) -> Tuple[int, ...]:
        """Return the ordered neighbor positions of the node at position."""
        return self.node(position).neighbors

    def values(self) -> List[Any]:
        """Return node values in position order."""
        return [node.value for node in self._nodes]

    def edge_count(self) -> int:
        """Return the total number of directed edges."""
        return sum(len(node.neighbors) for node in self._nodes)

    def __getitem__(self, position: int) -> GraphNode:
        return self.node(position)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __contains__(self, position: object) -> bool:
        return self.is_valid_position(position)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.edge_count()})"
