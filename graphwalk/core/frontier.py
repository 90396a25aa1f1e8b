"""Frontier strategies for GraphWalk.

A frontier holds the discovered-but-not-yet-yielded node positions of a
single traversal. The traversal algorithm is the same for every order;
only the frontier changes:

- FifoFrontier: queue, gives breadth-first order
- LifoFrontier: stack, gives depth-first pre-order
- MinValueFrontier: min-heap on (value, identifier), gives next-smallest order
"""

import heapq
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterable, List, Sequence, Tuple

from .node import GraphNode


class Frontier(ABC):
    """Abstract pending-node container used by GraphTraverser."""

    @abstractmethod
    def push(self, node: GraphNode) -> None:
        """Add a node to the frontier.

        Args:
            node: Node whose position should be popped later
        """
        pass

    @abstractmethod
    def pop(self) -> int:
        """Remove and return the next position.

        Raises:
            IndexError: If the frontier is empty
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __bool__(self) -> bool:
        return len(self) > 0

    def expansion_order(self, neighbors: Sequence[int]) -> Iterable[int]:
        """Return neighbors in the order they should be pushed.

        The default keeps the neighbor list's own order.
        """
        return neighbors


class FifoFrontier(Frontier):
    """First-in first-out frontier (breadth-first)."""

    def __init__(self):
        self._queue: Deque[int] = deque()

    def push(self, node: GraphNode) -> None:
        self._queue.append(node.identifier)

    def pop(self) -> int:
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    """Last-in first-out frontier (depth-first).

    Neighbors are pushed in reverse so the first neighbor ends up on top
    of the stack and is explored first.
    """

    def __init__(self):
        self._stack: List[int] = []

    def push(self, node: GraphNode) -> None:
        self._stack.append(node.identifier)

    def pop(self) -> int:
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)

    def expansion_order(self, neighbors: Sequence[int]) -> Iterable[int]:
        return reversed(neighbors)


class MinValueFrontier(Frontier):
    """Min-priority frontier keyed by (value, identifier).

    The identifier only breaks ties between equal values, which keeps the
    pop order deterministic.
    """

    def __init__(self):
        self._heap: List[Tuple[Any, int]] = []

    def push(self, node: GraphNode) -> None:
        heapq.heappush(self._heap, node.sort_key())

    def pop(self) -> int:
        _, identifier = heapq.heappop(self._heap)
        return identifier

    def __len__(self) -> int:
        return len(self._heap)
