"""
Immutable 3-d tree (k-d tree, k=3) over cartesian points with opaque payloads.

Built once by median splits that cycle through x, y, z; never mutated afterwards,
so a tree can be shared between threads without locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from geopointindex.core.box import CartesianBox
from geopointindex.core.geo import DIMENSIONS, CartesianPoint

T = TypeVar("T")


@dataclass(frozen=True)
class _Entry(Generic[T]):
    item: T
    point: CartesianPoint


@dataclass(frozen=True)
class _Node(Generic[T]):
    entry: _Entry[T]
    left: _Node[T] | None = None
    right: _Node[T] | None = None

    def range_search(
        self,
        box: CartesianBox,
        visit: Callable[[T, CartesianPoint], None],
        depth: int,
    ) -> None:
        point = self.entry.point
        if box.contains(point):
            visit(self.entry.item, point)

        dim = depth % DIMENSIONS
        split = point.ordinate(dim)

        # Non-strict on both sides: equal ordinates may sit in either subtree.
        if self.left is not None and box.lower.ordinate(dim) <= split:
            self.left.range_search(box, visit, depth + 1)
        if self.right is not None and box.upper.ordinate(dim) >= split:
            self.right.range_search(box, visit, depth + 1)


def _build_node(entries: list[_Entry[T]], depth: int) -> _Node[T] | None:
    if not entries:
        return None

    dim = depth % DIMENSIONS
    ordered = sorted(entries, key=lambda e: e.point.ordinate(dim))

    # For even counts this picks the upper-middle entry.
    median = len(ordered) // 2
    return _Node(
        entry=ordered[median],
        left=_build_node(ordered[:median], depth + 1),
        right=_build_node(ordered[median + 1 :], depth + 1),
    )


def _height(node: _Node[T] | None) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


class KDTree(Generic[T]):
    """Balanced tree of `(item, point)` entries; build with `KDTree.create`."""

    def __init__(self, root: _Node[T] | None, size: int):
        self._root = root
        self._size = size

    @classmethod
    def create(cls, items: Iterable[T], to_point: Callable[[T], CartesianPoint]) -> "KDTree[T]":
        """Build a balanced tree holding every item at the point `to_point` gives it."""
        entries = [_Entry(item=it, point=to_point(it)) for it in items]
        return cls(_build_node(entries, 0), len(entries))

    def __len__(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return _height(self._root)

    def range_search(self, box: CartesianBox, visit: Callable[[T, CartesianPoint], None]) -> None:
        """Call `visit(item, point)` for every entry whose point lies inside `box`.

        Traversal order is unspecified.
        """
        if self._root is not None:
            self._root.range_search(box, visit, 0)
