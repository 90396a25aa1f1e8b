"""GraphWalk - Lazy traversal of immutable directed graphs.

GraphWalk enumerates the nodes reachable from a start position one at a
time, in one of three orders:

Breadth-first:
    from graphwalk import bfs
Depth-first (pre-order):
    from graphwalk import dfs
Smallest discovered value next:
    from graphwalk import next_smallest

Every traversal is an independent iterator over a shared, read-only Graph.
"""

__version__ = "0.1.0"

# Core components
from .core.node import GraphNode
from .core.graph import Graph
from .core.frontier import Frontier, FifoFrontier, LifoFrontier, MinValueFrontier
from .core.traverser import (
    GraphTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    NextSmallestTraverser,
    create_traverser,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    MarkingPolicy,
    FilterConfig,
)
from .planning import ExecutionPlan
from .exceptions import (
    GraphWalkError,
    GraphConstructionError,
    InvalidNeighborError,
    InvalidPositionError,
    InvalidStartError,
    ConfigurationError,
)

# High-level API
from .api import (
    bfs,
    dfs,
    next_smallest,
    traverse_graph,
    collect_values,
    reachable_set,
    count_reachable,
    find_nodes,
)

__all__ = [
    '__version__',
    # Core
    'GraphNode',
    'Graph',
    'Frontier',
    'FifoFrontier',
    'LifoFrontier',
    'MinValueFrontier',
    'GraphTraverser',
    'BreadthFirstTraverser',
    'DepthFirstTraverser',
    'NextSmallestTraverser',
    'create_traverser',
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'MarkingPolicy',
    'FilterConfig',
    'ExecutionPlan',
    # Errors
    'GraphWalkError',
    'GraphConstructionError',
    'InvalidNeighborError',
    'InvalidPositionError',
    'InvalidStartError',
    'ConfigurationError',
    # API
    'bfs',
    'dfs',
    'next_smallest',
    'traverse_graph',
    'collect_values',
    'reachable_set',
    'count_reachable',
    'find_nodes',
]
