import pytest

from pathfinder.graph import PathGraph


def _graph(nodes, edges):
    g = PathGraph()
    for node in nodes:
        g.add_node(node)
    for src, dst, cost in edges:
        g.connect(src, dst, cost)
    return g


@pytest.fixture
def line1():
    # Cost:
    #      [1]      [1,1,2]
    #  A◄───────►B◄───────►C
    return _graph(
        "ABC",
        [
            ("A", "B", 1),
            ("B", "A", 1),
            ("B", "C", 1),
            ("C", "B", 1),
            ("B", "C", 1),
            ("C", "B", 1),
            ("B", "C", 2),
            ("C", "B", 2),
        ],
    )


@pytest.fixture
def square1():
    # Cost:
    #      [1]        [1]
    #   A───────►B────────►C
    #   │                  ▲
    #   │  [2]        [2]  │
    #   └───────►D─────────┘
    return _graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("A", "D", 2),
            ("D", "C", 2),
        ],
    )


@pytest.fixture
def square2():
    # Same as square1 with equal-cost branches:
    #   A->B->C and A->D->C both cost 2
    return _graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("A", "D", 1),
            ("D", "C", 1),
        ],
    )


@pytest.fixture
def graph1():
    # Diamond with a detour; cheapest A->D is A-E-C-F-D (cost 4)
    return _graph(
        "ABCDEF",
        [
            ("A", "B", 1),
            ("A", "B", 1),
            ("B", "C", 2),
            ("C", "D", 3),
            ("A", "E", 1),
            ("E", "C", 1),
            ("A", "D", 6),
            ("C", "F", 1),
            ("F", "D", 1),
        ],
    )


@pytest.fixture
def disconnected1():
    # Two islands: A<->B and C->D
    return _graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("B", "A", 1),
            ("C", "D", 1),
        ],
    )
