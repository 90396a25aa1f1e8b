"""Testing utilities for GraphWalk consumers."""

from .fixtures import (
    sample_graph,
    single_node_graph,
    empty_graph,
    cyclic_graph,
    binary_tree,
    disconnected_graph,
)

__all__ = [
    'sample_graph',
    'single_node_graph',
    'empty_graph',
    'cyclic_graph',
    'binary_tree',
    'disconnected_graph',
]
