"""High-level API for GraphWalk.

This module provides simple, functional interfaces for common graph
traversal operations. These functions wrap the object-oriented API
(traversers and ExecutionPlan) for ease of use in simple cases.
"""

from typing import Any, Callable, FrozenSet, Iterator, List, Optional, Union

from .config import FilterConfig, MarkingPolicy, TraversalConfig, TraversalStrategy
from .core.graph import Graph
from .core.node import GraphNode
from .core.traverser import (
    BreadthFirstTraverser,
    DepthFirstTraverser,
    NextSmallestTraverser,
    parse_strategy,
)
from .planning import ExecutionPlan


def bfs(graph: Graph, start: int,
        marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE) -> BreadthFirstTraverser:
    """Traverse graph breadth-first from start.

    Example:
        >>> [node.value for node in bfs(sample_graph(), 0)]
        [0, 1, 2, 5, 4, 3]
    """
    return BreadthFirstTraverser(graph, start, marking)


def dfs(graph: Graph, start: int,
        marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE) -> DepthFirstTraverser:
    """Traverse graph depth-first (pre-order) from start.

    Example:
        >>> [node.value for node in dfs(sample_graph(), 0)]
        [0, 1, 5, 4, 2, 3]
    """
    return DepthFirstTraverser(graph, start, marking)


def next_smallest(graph: Graph, start: int,
                  marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE) -> NextSmallestTraverser:
    """Traverse graph visiting the smallest discovered value next.

    Example:
        >>> [node.value for node in next_smallest(sample_graph(), 0)]
        [0, 1, 2, 3, 4, 5]
    """
    return NextSmallestTraverser(graph, start, marking)


def traverse_graph(
    graph: Graph,
    start: int,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    max_nodes: Optional[int] = None,
    include_filter: Optional[Callable[[GraphNode], bool]] = None,
    exclude_filter: Optional[Callable[[GraphNode], bool]] = None,
    marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE,
) -> Iterator[GraphNode]:
    """Simple interface for graph traversal.

    This is the primary high-level function for traversing graphs. It
    handles the common case of wanting to iterate over nodes without
    dealing with configs and plans.

    Filters only decide what is reported; excluded nodes are still
    expanded, so nodes behind them remain reachable.

    Args:
        graph: Graph to traverse
        start: Position to start from
        strategy: Traversal strategy (bfs, dfs, smallest)
        max_nodes: Stop after yielding this many nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        marking: When nodes enter the visited set

    Returns:
        Lazy iterator of GraphNode instances

    Raises:
        ConfigurationError: If the options are inconsistent
        InvalidStartError: If start is not a valid position
        ValueError: If strategy name is not recognized
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        marking=marking,
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
        max_nodes=max_nodes,
    )
    plan = ExecutionPlan(config, graph)
    return plan.execute(start)


def collect_values(
    graph: Graph,
    start: int,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    **kwargs
) -> List[Any]:
    """Traverse graph and return node values in visitation order.

    Args:
        graph: Graph to traverse
        start: Position to start from
        strategy: Traversal strategy
        **kwargs: Additional traversal options (see traverse_graph)
    """
    return [node.value for node in traverse_graph(graph, start, strategy, **kwargs)]


def reachable_set(graph: Graph, start: int) -> FrozenSet[int]:
    """Return the positions of every node reachable from start.

    The start node itself is always included.
    """
    return frozenset(node.identifier for node in BreadthFirstTraverser(graph, start))


def count_reachable(graph: Graph, start: int) -> int:
    """Count nodes reachable from start, including start."""
    count = 0
    for _ in BreadthFirstTraverser(graph, start):
        count += 1
    return count


def find_nodes(
    graph: Graph,
    start: int,
    predicate: Callable[[GraphNode], bool],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    **kwargs
) -> Iterator[GraphNode]:
    """Find reachable nodes that match a predicate.

    Example:
        >>> evens = find_nodes(sample_graph(), 0, lambda n: n.value % 2 == 0)
        >>> [node.value for node in evens]
        [0, 2, 4]
    """
    kwargs['include_filter'] = predicate
    return traverse_graph(graph, start, strategy, **kwargs)
