"""Tests for edge cases, invariants and invalid input.

Covers exhaustion, invalid start positions, single-node graphs,
independence of concurrent traversals, and the reachability invariant
on generated graphs.
"""

import random
import sys
from collections import deque
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphwalk import (
    Graph,
    MarkingPolicy,
    TraversalStrategy,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    NextSmallestTraverser,
    InvalidStartError,
    InvalidPositionError,
    GraphWalkError,
    ConfigurationError,
    create_traverser,
)
from graphwalk.testing import (
    sample_graph,
    single_node_graph,
    empty_graph,
    disconnected_graph,
    cyclic_graph,
)

ALL_TRAVERSERS = [BreadthFirstTraverser, DepthFirstTraverser, NextSmallestTraverser]
ALL_MARKINGS = list(MarkingPolicy)


def random_graph(seed: int, size: int = 25, max_degree: int = 4) -> Graph:
    rng = random.Random(seed)
    pairs = []
    for _ in range(size):
        degree = rng.randint(0, max_degree)
        pairs.append((rng.randint(0, 50), [rng.randrange(size) for _ in range(degree)]))
    return Graph.from_pairs(pairs)


def reachable(graph: Graph, start: int) -> set:
    seen = {start}
    queue = deque([start])
    while queue:
        for neighbor in graph[queue.popleft()].neighbors:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


def bfs_distances(graph: Graph, start: int) -> dict:
    distance = {start: 0}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        for neighbor in graph[position].neighbors:
            if neighbor not in distance:
                distance[neighbor] = distance[position] + 1
                queue.append(neighbor)
    return distance


class TestInvalidStart:
    """All variants fail fast on an invalid start position."""

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    def test_one_past_end(self, traverser_class):
        with pytest.raises(InvalidStartError, match="Cannot start traversal at 6: graph has 6 node"):
            traverser_class(sample_graph(), 6)

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    def test_empty_graph(self, traverser_class):
        with pytest.raises(InvalidStartError) as exc_info:
            traverser_class(empty_graph(), 0)

        assert exc_info.value.position == 0
        assert exc_info.value.size == 0

    @pytest.mark.parametrize("start", [-1, 1.0, "0", None, True])
    def test_non_position_start(self, start):
        with pytest.raises(InvalidStartError):
            BreadthFirstTraverser(sample_graph(), start)

    def test_error_hierarchy(self):
        with pytest.raises(InvalidPositionError):
            NextSmallestTraverser(sample_graph(), 99)
        with pytest.raises(IndexError):
            NextSmallestTraverser(sample_graph(), 99)
        with pytest.raises(GraphWalkError):
            NextSmallestTraverser(sample_graph(), 99)


class TestInvalidMarking:
    """Marking must be a MarkingPolicy member."""

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    @pytest.mark.parametrize("marking", ["dequeue", "enqueue", None, 1])
    def test_rejected_at_construction(self, traverser_class, marking):
        with pytest.raises(ConfigurationError, match="marking must be a MarkingPolicy"):
            traverser_class(sample_graph(), 0, marking)

    def test_factory_rejects_string_marking(self):
        with pytest.raises(ConfigurationError):
            create_traverser("bfs", cyclic_graph(3), 0, "dequeue")


class TestExhaustion:
    """Once a traversal signals exhaustion it stays exhausted."""

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    def test_exhaustion_is_permanent(self, traverser_class):
        traverser = traverser_class(sample_graph(), 0)
        assert not traverser.exhausted

        assert len(list(traverser)) == 6
        assert traverser.exhausted

        for _ in range(3):
            with pytest.raises(StopIteration):
                next(traverser)
        assert list(traverser) == []
        assert traverser.nodes_yielded == 6

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    def test_single_node_graph(self, traverser_class):
        traverser = traverser_class(single_node_graph(42), 0)

        node = next(traverser)
        assert node.value == 42
        assert node.identifier == 0
        with pytest.raises(StopIteration):
            next(traverser)

    def test_iter_returns_self(self):
        traverser = DepthFirstTraverser(sample_graph(), 0)
        assert iter(traverser) is traverser

    def test_caller_may_stop_early(self):
        traverser = BreadthFirstTraverser(sample_graph(), 0)
        first_two = [next(traverser).value, next(traverser).value]

        assert first_two == [0, 1]
        assert traverser.nodes_yielded == 2
        assert not traverser.exhausted


class TestIndependentTraversals:
    """Traversals over the same graph never share state."""

    @pytest.mark.parametrize("traverser_class", ALL_TRAVERSERS)
    def test_interleaved_traversals(self, traverser_class):
        graph = sample_graph()
        expected = [node.value for node in traverser_class(graph, 0)]

        first = traverser_class(graph, 0)
        second = traverser_class(graph, 0)
        seen_first, seen_second = [], []
        for a, b in zip(first, second):
            seen_first.append(a.value)
            seen_second.append(b.value)

        assert seen_first == expected
        assert seen_second == expected

    def test_different_strategies_same_graph(self):
        graph = sample_graph()
        bfs_iter = BreadthFirstTraverser(graph, 0)
        dfs_iter = DepthFirstTraverser(graph, 0)

        interleaved = []
        for a, b in zip(bfs_iter, dfs_iter):
            interleaved.append((a.value, b.value))

        assert interleaved == [(0, 0), (1, 1), (2, 5), (5, 4), (4, 2), (3, 3)]

    def test_graph_untouched_by_traversal(self):
        graph = sample_graph()
        before = [(node.value, node.neighbors) for node in graph]
        for traverser_class in ALL_TRAVERSERS:
            list(traverser_class(graph, 0))
        assert [(node.value, node.neighbors) for node in graph] == before


class TestReachabilityInvariant:
    """Each reachable node is yielded exactly once, nothing else is."""

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("marking", ALL_MARKINGS)
    @pytest.mark.parametrize("strategy", list(TraversalStrategy))
    def test_yields_reachable_set_exactly_once(self, seed, marking, strategy):
        graph = random_graph(seed)
        for start in (0, len(graph) // 2, len(graph) - 1):
            ids = [node.identifier for node in create_traverser(strategy, graph, start, marking)]
            assert len(ids) == len(set(ids))
            assert set(ids) == reachable(graph, start)
            assert ids[0] == start

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("marking", ALL_MARKINGS)
    def test_bfs_layers_non_decreasing(self, seed, marking):
        graph = random_graph(seed)
        distance = bfs_distances(graph, 0)
        layers = [distance[node.identifier] for node in BreadthFirstTraverser(graph, 0, marking)]
        assert layers == sorted(layers)

    @pytest.mark.parametrize("seed", range(8))
    def test_next_smallest_pops_frontier_minimum(self, seed):
        graph = random_graph(seed)
        traverser = NextSmallestTraverser(graph, 0)
        yielded = set()
        while True:
            # With enqueue marking the frontier is exactly visited minus yielded
            pending = traverser.visited - yielded
            try:
                node = next(traverser)
            except StopIteration:
                break
            assert node.sort_key() == min(graph[p].sort_key() for p in pending)
            yielded.add(node.identifier)
        assert not traverser.visited - yielded

    def test_disconnected_component_unreachable(self):
        graph = disconnected_graph()
        for traverser_class in ALL_TRAVERSERS:
            ids = {node.identifier for node in traverser_class(graph, 3)}
            assert ids == {3, 4}


class TestLargeGraphs:
    """Iterative traversal does not depend on recursion depth."""

    def test_long_chain(self):
        size = 5000
        graph = Graph.from_pairs([(i, [i + 1] if i + 1 < size else []) for i in range(size)])
        for traverser_class in ALL_TRAVERSERS:
            assert sum(1 for _ in traverser_class(graph, 0)) == size
