"""Core abstractions for GraphWalk.

This module contains the graph store, the frontier strategies and the
frontier-driven traversal engine.
"""

from .node import GraphNode
from .graph import Graph
from .frontier import Frontier, FifoFrontier, LifoFrontier, MinValueFrontier
from .traverser import (
    GraphTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    NextSmallestTraverser,
    create_traverser,
    parse_strategy,
)

__all__ = [
    "GraphNode",
    "Graph",
    "Frontier",
    "FifoFrontier",
    "LifoFrontier",
    "MinValueFrontier",
    "GraphTraverser",
    "BreadthFirstTraverser",
    "DepthFirstTraverser",
    "NextSmallestTraverser",
    "create_traverser",
    "parse_strategy",
]
