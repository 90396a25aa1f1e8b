"""Execution planning for GraphWalk.

The ExecutionPlan validates a TraversalConfig before any node is visited
and coordinates the traverser, filters and limits during execution.
"""

from typing import Any, Dict, Iterator, Optional, Type

from .config import TraversalConfig
from .core.graph import Graph
from .core.node import GraphNode
from .core.traverser import GraphTraverser, traverser_class
from .exceptions import ConfigurationError
from .log import get_logger

logger = get_logger(__name__)


class ExecutionPlan:
    """Validated execution plan for graph traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Configuration problems are reported when the plan is
    built, never halfway through a traversal.

    A plan can be executed any number of times; each execution creates a
    fresh traverser with its own frontier, visited set and node budget.
    ``traverser``, ``nodes_processed`` and ``nodes_yielded`` report on the
    most recent execution only.
    """

    def __init__(self, config: TraversalConfig, graph: Graph):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            graph: Graph the plan will traverse

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.graph = graph

        config_errors = config.validate()
        if config_errors:
            logger.warning("Rejected traversal config", errors=config_errors)
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser_class: Type[GraphTraverser] = traverser_class(config.strategy)

        # Track execution state
        self.traverser: Optional[GraphTraverser] = None
        self.nodes_processed = 0
        self.nodes_yielded = 0

        logger.debug("Execution plan created", **self.get_summary())

    def _within_limit(self, yielded: int) -> bool:
        """Check if a run that has yielded this many nodes may continue.

        Returns:
            True if we should continue, False if limits exceeded
        """
        if self.config.max_nodes is None:
            return True
        return yielded < self.config.max_nodes

    def execute(self, start: int) -> Iterator[GraphNode]:
        """Execute the traversal plan from start.

        The traverser is created eagerly, so an invalid start raises
        InvalidStartError at call time rather than on the first pull.

        Args:
            start: Position to start traversal from

        Returns:
            Lazy iterator over the nodes that pass the configured filters

        Raises:
            InvalidStartError: If start is not a valid position
        """
        traverser = self.traverser_class(self.graph, start, self.config.marking)
        self.traverser = traverser
        self.nodes_processed = 0
        self.nodes_yielded = 0
        return self._run(traverser)

    def _run(self, traverser: GraphTraverser) -> Iterator[GraphNode]:
        # Counts are per run; the plan attributes only mirror the latest run
        processed = 0
        yielded = 0
        try:
            for node in traverser:
                processed += 1
                self._report(traverser, processed, yielded)

                if not self.config.filter.should_include(node):
                    continue

                yielded += 1
                self._report(traverser, processed, yielded)
                yield node

                if not self._within_limit(yielded):
                    break
        finally:
            logger.debug(
                "Execution plan finished",
                strategy=self.config.strategy.value,
                start=traverser.start,
                nodes_processed=processed,
                nodes_yielded=yielded,
                exhausted=traverser.exhausted,
            )

    def _report(self, traverser: GraphTraverser, processed: int, yielded: int) -> None:
        if self.traverser is traverser:
            self.nodes_processed = processed
            self.nodes_yielded = yielded

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'marking': self.config.marking.value,
            'max_nodes': self.config.max_nodes,
            'has_include_filter': self.config.filter.include_filter is not None,
            'has_exclude_filter': self.config.filter.exclude_filter is not None,
            'node_count': len(self.graph),
            'traverser': self.traverser_class.__name__,
        }
