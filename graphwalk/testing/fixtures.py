"""Sample graphs for GraphWalk consumers.

These builders give test suites small, well-understood graphs without
each project re-typing the same literals.
"""

from ..core.graph import Graph


def sample_graph() -> Graph:
    """Six-node reference graph with values equal to positions.

    Edges::

        0 -> 1, 2
        1 -> 0, 5, 4
        2 -> 0, 3
        3 -> 1
        4 -> 1, 2
        5 -> 1, 2

    From 0: BFS gives 0,1,2,5,4,3; DFS gives 0,1,5,4,2,3;
    next-smallest gives 0,1,2,3,4,5.
    """
    return Graph.from_pairs([
        (0, [1, 2]),
        (1, [0, 5, 4]),
        (2, [0, 3]),
        (3, [1]),
        (4, [1, 2]),
        (5, [1, 2]),
    ])


def single_node_graph(value: int = 0) -> Graph:
    """One node, no edges."""
    return Graph.from_pairs([(value, [])])


def empty_graph() -> Graph:
    """Graph with no nodes; every start position is invalid."""
    return Graph.from_pairs([])


def cyclic_graph(n: int) -> Graph:
    """Directed ring 0 -> 1 -> ... -> n-1 -> 0."""
    return Graph.from_pairs([(i, [(i + 1) % n]) for i in range(n)])


def binary_tree(depth: int) -> Graph:
    """Complete binary tree in heap layout.

    Node i has children 2i+1 and 2i+2; values equal positions. A tree of
    depth d has 2**(d+1) - 1 nodes.
    """
    size = 2 ** (depth + 1) - 1
    pairs = []
    for i in range(size):
        children = [c for c in (2 * i + 1, 2 * i + 2) if c < size]
        pairs.append((i, children))
    return Graph.from_pairs(pairs)


def disconnected_graph() -> Graph:
    """Two components: {0, 1, 2} and {3, 4}.

    Values are chosen so the unreachable component holds the smallest
    values, which makes it easy to check priority traversal never jumps
    components.
    """
    return Graph.from_pairs([
        (10, [1]),
        (30, [2]),
        (20, [0]),
        (1, [4]),
        (2, [3]),
    ])
