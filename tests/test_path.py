import pytest

from pathfinder.path import Path


def test_path_basics():
    p = Path(nodes=("A", "B", "C"), cost=2.0)
    assert len(p) == 3
    assert list(p) == ["A", "B", "C"]
    assert p[1] == "B"
    assert p.src == "A"
    assert p.dst == "C"
    assert p


def test_empty_path_is_falsy():
    p = Path(nodes=(), cost=float("inf"))
    assert not p
    assert len(p) == 0
    with pytest.raises(IndexError):
        _ = p.src


def test_path_ordering_by_cost():
    cheap = Path(nodes=("A", "C"), cost=2.0)
    dear = Path(nodes=("A", "B", "C"), cost=10.0)
    assert cheap < dear
    assert not dear < cheap
    assert sorted([dear, cheap]) == [cheap, dear]


def test_path_equality_and_immutability():
    p1 = Path(nodes=("A", "B"), cost=1.0)
    p2 = Path(nodes=("A", "B"), cost=1.0)
    assert p1 == p2
    assert hash(p1) == hash(p2)
    with pytest.raises(AttributeError):
        p1.cost = 5.0  # type: ignore[misc]
