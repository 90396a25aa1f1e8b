"""Graph traversal strategies for GraphWalk.

All three visitation orders share one algorithm: pop a position from the
frontier, push its unvisited neighbors, yield the node. The orders differ
only in the Frontier they plug in, so each variant is a thin subclass of
GraphTraverser.
"""

from typing import FrozenSet, Set, Type, Union

from ..config import MarkingPolicy, TraversalStrategy
from ..exceptions import ConfigurationError, InvalidStartError
from ..log import get_logger
from .frontier import FifoFrontier, Frontier, LifoFrontier, MinValueFrontier
from .graph import Graph
from .node import GraphNode

logger = get_logger(__name__)


class GraphTraverser:
    """Lazy, frontier-driven traversal over a Graph.

    A traverser is a single-use iterator. It borrows the graph (no copy is
    made) and owns its own frontier and visited set, so any number of
    traversers can walk the same graph at the same time without seeing
    each other's state. The graph must outlive every traverser using it.

    Once exhausted, a traverser stays exhausted.
    """

    strategy: TraversalStrategy = None

    def __init__(self,
                 graph: Graph,
                 start: int,
                 frontier: Frontier,
                 marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE):
        """Anchor a traversal at start.

        Args:
            graph: Graph to traverse (borrowed, never modified)
            start: Position of the first node to yield
            frontier: Empty frontier that decides visitation order
            marking: When nodes enter the visited set

        Raises:
            ConfigurationError: If marking is not a MarkingPolicy
            InvalidStartError: If start is not a valid position in graph
        """
        if not isinstance(marking, MarkingPolicy):
            logger.warning(
                "Rejected marking policy",
                strategy=self._strategy_name(),
                marking=repr(marking),
            )
            raise ConfigurationError(
                f"marking must be a MarkingPolicy, got {marking!r}"
            )

        if not graph.is_valid_position(start):
            logger.warning(
                "Rejected traversal start",
                strategy=self._strategy_name(),
                start=start,
                node_count=len(graph),
            )
            raise InvalidStartError(start, len(graph))

        self.graph = graph
        self.start = start
        self.marking = marking
        self._frontier = frontier
        self._visited: Set[int] = set()
        self._nodes_yielded = 0
        self._exhausted = False

        self._discover(graph.node(start))

        logger.debug(
            "Traverser created",
            strategy=self._strategy_name(),
            start=start,
            marking=marking.value,
        )

    def __iter__(self) -> "GraphTraverser":
        return self

    def __next__(self) -> GraphNode:
        while self._frontier:
            position = self._frontier.pop()

            if self.marking is MarkingPolicy.ON_DEQUEUE:
                # Skip duplicates pushed before the node was first popped
                if position in self._visited:
                    continue
                self._visited.add(position)

            node = self.graph.node(position)
            for neighbor in self._frontier.expansion_order(node.neighbors):
                if neighbor not in self._visited:
                    self._discover(self.graph.node(neighbor))

            self._nodes_yielded += 1
            return node

        if not self._exhausted:
            self._exhausted = True
            logger.debug(
                "Traversal exhausted",
                strategy=self._strategy_name(),
                start=self.start,
                nodes_yielded=self._nodes_yielded,
            )
        raise StopIteration

    def _discover(self, node: GraphNode) -> None:
        if self.marking is MarkingPolicy.ON_ENQUEUE:
            self._visited.add(node.identifier)
        self._frontier.push(node)

    def _strategy_name(self) -> str:
        if self.strategy is not None:
            return self.strategy.value
        return self.__class__.__name__

    # Introspection

    @property
    def visited(self) -> FrozenSet[int]:
        """Snapshot of positions already yielded or committed to the frontier."""
        return frozenset(self._visited)

    @property
    def frontier_size(self) -> int:
        """Number of entries waiting in the frontier."""
        return len(self._frontier)

    @property
    def nodes_yielded(self) -> int:
        """Number of nodes returned so far."""
        return self._nodes_yielded

    @property
    def exhausted(self) -> bool:
        """True once the traversal has signalled it has no more nodes."""
        return self._exhausted

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(start={self.start}, "
            f"yielded={self._nodes_yielded}, frontier={len(self._frontier)})"
        )


class BreadthFirstTraverser(GraphTraverser):
    """Breadth-first traversal strategy.

    Visits every node at distance N from the start before any node at
    distance N+1. Within a layer, nodes come out in the order their
    parents' neighbor lists were expanded.
    """

    strategy = TraversalStrategy.BREADTH_FIRST

    def __init__(self, graph: Graph, start: int,
                 marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE):
        super().__init__(graph, start, FifoFrontier(), marking)


class DepthFirstTraverser(GraphTraverser):
    """Depth-first pre-order traversal strategy.

    Uses an explicit stack instead of recursion, so deep graphs cannot hit
    the interpreter's recursion limit. Neighbors are still explored left
    to right.
    """

    strategy = TraversalStrategy.DEPTH_FIRST

    def __init__(self, graph: Graph, start: int,
                 marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE):
        super().__init__(graph, start, LifoFrontier(), marking)


class NextSmallestTraverser(GraphTraverser):
    """Priority traversal that always visits the smallest discovered value.

    This is a greedy frontier expansion (Dijkstra's selection order with
    uniform edge cost), not a global sort: a small value that is only
    reachable late is yielded only once it has been discovered.
    """

    strategy = TraversalStrategy.NEXT_SMALLEST

    def __init__(self, graph: Graph, start: int,
                 marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE):
        super().__init__(graph, start, MinValueFrontier(), marking)


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'dfs_pre': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
    'smallest': TraversalStrategy.NEXT_SMALLEST,
    'next_smallest': TraversalStrategy.NEXT_SMALLEST,
    'priority': TraversalStrategy.NEXT_SMALLEST,
}

_TRAVERSERS = {
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.DEPTH_FIRST: DepthFirstTraverser,
    TraversalStrategy.NEXT_SMALLEST: NextSmallestTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower not in _STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
        )
    return _STRATEGY_ALIASES[strategy_lower]


def traverser_class(strategy: Union[TraversalStrategy, str]) -> Type[GraphTraverser]:
    """Return the GraphTraverser subclass implementing strategy."""
    return _TRAVERSERS[parse_strategy(strategy)]


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str],
                     graph: Graph,
                     start: int,
                     marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE) -> GraphTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or alias (bfs, dfs, smallest, ...)
        graph: Graph to traverse
        start: Start position
        marking: When nodes enter the visited set

    Returns:
        GraphTraverser instance positioned before the start node

    Raises:
        ValueError: If strategy name is not recognized
        InvalidStartError: If start is not a valid position
    """
    return traverser_class(strategy)(graph, start, marking)
