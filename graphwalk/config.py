"""Configuration system for GraphWalk.

This module defines how users specify their traversal requirements:
which visitation order to use, when nodes are marked visited, which
nodes to report, and how many.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """Order in which reachable nodes are visited."""
    BREADTH_FIRST = "bfs"        # Layer by layer
    DEPTH_FIRST = "dfs"          # First neighbor first, pre-order
    NEXT_SMALLEST = "smallest"   # Smallest discovered value next


class MarkingPolicy(Enum):
    """When a node is added to a traversal's visited set.

    ON_ENQUEUE marks a node the moment it is pushed onto the frontier, so
    the frontier never holds duplicates. ON_DEQUEUE marks it when it is
    popped; duplicates may sit in the frontier and are skipped on pop.
    """
    ON_ENQUEUE = "enqueue"
    ON_DEQUEUE = "dequeue"


@dataclass
class FilterConfig:
    """Configuration for filtering reported nodes.

    Filters only decide which nodes are yielded to the caller. Filtered-out
    nodes are still expanded, so everything behind them stays reachable.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return bool(self.include_filter(node))

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a graph traversal.

    The ExecutionPlan validates this configuration before any node is
    visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST
    marking: MarkingPolicy = MarkingPolicy.ON_ENQUEUE

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Limits
    max_nodes: Optional[int] = None  # Stop after yielding this many nodes

    # Convenience constructors for common configurations

    @classmethod
    def breadth_first(cls, **kwargs) -> 'TraversalConfig':
        """Create config for breadth-first traversal."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST, **kwargs)

    @classmethod
    def depth_first(cls, **kwargs) -> 'TraversalConfig':
        """Create config for depth-first traversal."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST, **kwargs)

    @classmethod
    def next_smallest(cls, **kwargs) -> 'TraversalConfig':
        """Create config for next-smallest (priority) traversal."""
        return cls(strategy=TraversalStrategy.NEXT_SMALLEST, **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if not isinstance(self.marking, MarkingPolicy):
            errors.append(f"marking must be a MarkingPolicy, got {self.marking!r}")

        if self.max_nodes is not None:
            if isinstance(self.max_nodes, bool) or not isinstance(self.max_nodes, int):
                errors.append("max_nodes must be an integer")
            elif self.max_nodes <= 0:
                errors.append("max_nodes must be positive")

        return errors
