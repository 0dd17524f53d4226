"""fencing.union_find
======================

Disjoint-set forest used to merge collinear boundary cells into sides. A new
instance is built per orientation per region and thrown away afterwards.
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """Union-find with path halving and union by size.

    Parameters
    ----------
    elements:
        Initial members; each starts in its own singleton set.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._parent: Dict[T, T] = {}
        self._size: Dict[T, int] = {}
        self._components = 0
        for element in elements:
            self.add(element)

    def add(self, element: T) -> None:
        if element in self._parent:
            return
        self._parent[element] = element
        self._size[element] = 1
        self._components += 1

    def find(self, element: T) -> T:
        """Return the representative of ``element``'s set.

        Raises ``KeyError`` for elements that were never added.
        """

        parent = self._parent
        if element not in parent:
            raise KeyError(element)
        while parent[element] != element:
            parent[element] = parent[parent[element]]
            element = parent[element]
        return element

    def union(self, left: T, right: T) -> bool:
        """Merge the sets holding ``left`` and ``right``; ``False`` if already joined."""

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self._size[root_left] < self._size[root_right]:
            root_left, root_right = root_right, root_left
        self._parent[root_right] = root_left
        self._size[root_left] += self._size[root_right]
        self._components -= 1
        return True

    @property
    def component_count(self) -> int:
        return self._components

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)


__all__ = ["DisjointSet"]
