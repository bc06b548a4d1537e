from __future__ import annotations

from dataclasses import dataclass

import pytest

from geopointindex.core.box import CartesianBox
from geopointindex.core.geo import CartesianPoint
from geopointindex.core.kdtree import KDTree


@dataclass(frozen=True)
class Item:
    ident: str
    point: CartesianPoint


ITEMS = [
    Item("a", CartesianPoint(2, 3, 4)),
    Item("b", CartesianPoint(1, 2, 3)),
    Item("c", CartesianPoint(4, 5, 6)),
    Item("d", CartesianPoint(7, 8, 9)),
    Item("e", CartesianPoint(10, 11, 12)),
    Item("f", CartesianPoint(6, 5, 4)),
    Item("g", CartesianPoint(3, 2, 1)),
    Item("h", CartesianPoint(3, 2, 1)),
]


@pytest.fixture
def tree() -> KDTree[Item]:
    return KDTree.create(ITEMS, lambda it: it.point)


def _search(tree: KDTree[Item], lower: tuple, upper: tuple) -> list[str]:
    found: list[str] = []
    tree.range_search(
        CartesianBox(CartesianPoint(*lower), CartesianPoint(*upper)),
        lambda item, point: found.append(item.ident),
    )
    return found


def test_basic_range_search(tree):
    # b falls below the box on x and g on z; d and e lie beyond it.
    assert sorted(_search(tree, (2, 2, 3), (6, 8, 6))) == ["a", "c", "f"]


def test_no_points_in_range(tree):
    assert _search(tree, (11, 11, 11), (15, 15, 15)) == []


def test_all_points_in_range(tree):
    assert sorted(_search(tree, (1, 1, 1), (10, 12, 13))) == list("abcdefgh")


def test_partial_range_match(tree):
    assert sorted(_search(tree, (3, 4, 5), (8, 9, 10))) == ["c", "d"]


def test_exact_range_returns_every_duplicate_once(tree):
    # A zero-size box matches co-located items; ties must not hide either of them.
    assert sorted(_search(tree, (3, 2, 1), (3, 2, 1))) == ["g", "h"]


def test_boundary_range_match(tree):
    # The box corners are exactly c and d; edges are inclusive.
    assert sorted(_search(tree, (4, 5, 6), (7, 8, 9))) == ["c", "d"]


def test_visit_receives_the_stored_point(tree):
    seen: dict[str, CartesianPoint] = {}
    tree.range_search(
        CartesianBox(CartesianPoint(0, 0, 0), CartesianPoint(20, 20, 20)),
        lambda item, point: seen.__setitem__(item.ident, point),
    )
    assert seen == {it.ident: it.point for it in ITEMS}


def test_size_and_height_are_balanced(tree):
    # 8 entries split 4 / 3 at the root, so the tree is ceil(log2(8 + 1)) = 4 levels deep.
    assert len(tree) == 8
    assert tree.height == 4


def test_empty_tree_never_visits():
    empty: KDTree[Item] = KDTree.create([], lambda it: it.point)
    calls: list[object] = []
    empty.range_search(
        CartesianBox(CartesianPoint(-1e9, -1e9, -1e9), CartesianPoint(1e9, 1e9, 1e9)),
        lambda item, point: calls.append(item),
    )
    assert calls == []
    assert len(empty) == 0
    assert empty.height == 0


def test_many_collinear_points_are_all_found():
    # Heavy ties on the split axis: equal ordinates end up on both sides of the median.
    items = [Item(str(i), CartesianPoint(float(i % 5), 1.0, 1.0)) for i in range(100)]
    tree = KDTree.create(items, lambda it: it.point)
    assert len(_search(tree, (2, 1, 1), (2, 1, 1))) == 20
