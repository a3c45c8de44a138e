"""A self-balancing AVL binary search tree over arbitrary data.

Ordering comes from a three-way compare function ``compare(a, b)``. It
returns a negative number, zero or a positive number as ``a`` sorts before,
equal to or after ``b``. The default compares with ``<`` and ``>``. An
optional ``free_data_func`` is called on data that leaves the tree through
:meth:`AVLTree.replace`, :meth:`AVLTree.delete` or :meth:`AVLTree.clear`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

__all__ = ["AVLTree"]

CompareFunc = Callable[[Any, Any], int]
FreeDataFunc = Callable[[Any], Any]


def _default_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    balance: int = 0  # -1: left is taller, 0: even, 1: right is taller


def _rotate_left(node: _Node) -> _Node:
    raised = node.right
    assert raised is not None
    node.right = raised.left
    raised.left = node
    return raised


def _rotate_right(node: _Node) -> _Node:
    raised = node.left
    assert raised is not None
    node.left = raised.right
    raised.right = node
    return raised


def _double_rotate_right(node: _Node, left: _Node) -> _Node:
    """Left-right rotation, with the balance updates it needs."""
    grand = left.right
    assert grand is not None
    if grand.balance == -1:
        node.balance = 1
        left.balance = 0
    elif grand.balance == 0:
        node.balance = left.balance = 0
    else:
        node.balance = 0
        left.balance = -1
    grand.balance = 0
    node.left = _rotate_left(left)
    return _rotate_right(node)


def _double_rotate_left(node: _Node, right: _Node) -> _Node:
    """Right-left rotation, with the balance updates it needs."""
    grand = right.left
    assert grand is not None
    if grand.balance == 1:
        node.balance = -1
        right.balance = 0
    elif grand.balance == 0:
        node.balance = right.balance = 0
    else:
        node.balance = 0
        right.balance = 1
    grand.balance = 0
    node.right = _rotate_right(right)
    return _rotate_left(node)


def _left_balance_insert(node: _Node) -> tuple[_Node, bool]:
    left = node.left
    assert left is not None
    if left.balance == -1:
        node.balance = left.balance = 0
        return _rotate_right(node), False
    if left.balance == 1:
        return _double_rotate_right(node, left), False
    return node, True


def _right_balance_insert(node: _Node) -> tuple[_Node, bool]:
    right = node.right
    assert right is not None
    if right.balance == 1:
        node.balance = right.balance = 0
        return _rotate_left(node), False
    if right.balance == -1:
        return _double_rotate_left(node, right), False
    return node, True


def _left_balance_delete(node: _Node) -> tuple[_Node, bool]:
    left = node.left
    assert left is not None
    if left.balance == -1:
        node.balance = left.balance = 0
        return _rotate_right(node), True
    if left.balance == 0:
        left.balance = 1
        return _rotate_right(node), False
    return _double_rotate_right(node, left), True


def _right_balance_delete(node: _Node) -> tuple[_Node, bool]:
    right = node.right
    assert right is not None
    if right.balance == 1:
        node.balance = right.balance = 0
        return _rotate_left(node), True
    if right.balance == 0:
        right.balance = -1
        return _rotate_left(node), False
    return _double_rotate_left(node, right), True


def _left_shrunk(node: _Node) -> tuple[_Node, bool]:
    if node.balance == -1:
        node.balance = 0
        return node, True
    if node.balance == 0:
        node.balance = 1
        return node, False
    return _right_balance_delete(node)


def _right_shrunk(node: _Node) -> tuple[_Node, bool]:
    if node.balance == -1:
        return _left_balance_delete(node)
    if node.balance == 0:
        node.balance = -1
        return node, False
    node.balance = 0
    return node, True


def _delete_max(node: _Node) -> tuple[Optional[_Node], bool, Any]:
    """Unlink the rightmost node; return (new subtree, shorter, its data)."""
    if node.right is None:
        return node.left, True, node.data
    node.right, shorter, data = _delete_max(node.right)
    if shorter:
        node, shorter = _right_shrunk(node)
    return node, shorter, data


class AVLTree:
    """Height-balanced binary search tree of unique items."""

    def __init__(
        self,
        compare: Optional[CompareFunc] = None,
        free_data_func: Optional[FreeDataFunc] = None,
    ) -> None:
        self._compare = compare or _default_compare
        self._free = free_data_func
        self._root: Optional[_Node] = None
        self._count = 0

    # -- insertion ----------------------------------------------------------

    def _insert(
        self, node: Optional[_Node], data: Any, replace: bool
    ) -> tuple[_Node, bool, bool]:
        if node is None:
            return _Node(data), True, True

        cmp = self._compare(node.data, data)
        if cmp > 0:
            node.left, taller, inserted = self._insert(node.left, data, replace)
            if taller:
                if node.balance == -1:
                    node, taller = _left_balance_insert(node)
                elif node.balance == 0:
                    node.balance = -1
                else:
                    node.balance = 0
                    taller = False
        elif cmp < 0:
            node.right, taller, inserted = self._insert(node.right, data, replace)
            if taller:
                if node.balance == -1:
                    node.balance = 0
                    taller = False
                elif node.balance == 0:
                    node.balance = 1
                else:
                    node, taller = _right_balance_insert(node)
        else:
            if replace:
                if self._free is not None:
                    self._free(node.data)
                node.data = data
            return node, False, False
        return node, taller, inserted

    def insert(self, data: Any) -> bool:
        """Add ``data``; False (tree unchanged) when an equal item exists."""
        self._root, _, inserted = self._insert(self._root, data, replace=False)
        if inserted:
            self._count += 1
        return inserted

    def replace(self, data: Any) -> bool:
        """Add ``data`` or swap it in for an equal item; True when added."""
        self._root, _, inserted = self._insert(self._root, data, replace=True)
        if inserted:
            self._count += 1
        return inserted

    # -- deletion -----------------------------------------------------------

    def _delete(
        self, node: Optional[_Node], data: Any
    ) -> tuple[Optional[_Node], bool, bool]:
        if node is None:
            return None, False, False

        cmp = self._compare(node.data, data)
        if cmp > 0:
            node.left, shorter, found = self._delete(node.left, data)
            if shorter:
                node, shorter = _left_shrunk(node)
            return node, shorter, found
        if cmp < 0:
            node.right, shorter, found = self._delete(node.right, data)
            if shorter:
                node, shorter = _right_shrunk(node)
            return node, shorter, found

        if self._free is not None:
            self._free(node.data)
        if node.left is None:
            return node.right, True, True
        if node.right is None:
            return node.left, True, True

        node.left, shorter, node.data = _delete_max(node.left)
        if shorter:
            node, shorter = _left_shrunk(node)
        return node, shorter, True

    def delete(self, data: Any) -> bool:
        """Remove the item equal to ``data``; False when there is none."""
        self._root, _, found = self._delete(self._root, data)
        if found:
            self._count -= 1
        return found

    # -- lookup -------------------------------------------------------------

    def find(self, target: Any) -> Any:
        """Return the stored item equal to ``target``, or None."""
        node = self._root
        while node is not None:
            cmp = self._compare(node.data, target)
            if cmp > 0:
                node = node.left
            elif cmp < 0:
                node = node.right
            else:
                return node.data
        return None

    def find_ge(self, target: Any) -> Any:
        """Return the smallest stored item not less than ``target``, or None."""
        best = None
        node = self._root
        while node is not None:
            cmp = self._compare(node.data, target)
            if cmp > 0:
                best = node.data
                node = node.left
            elif cmp < 0:
                node = node.right
            else:
                return node.data
        return best

    # -- traversal ----------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def walk(self, func: Callable[[Any], Any]) -> Any:
        """Call ``func`` on each item in order; stop at the first truthy result and return it.

        Returns 0 when every call returned a falsy value.
        """
        for data in self:
            result = func(data)
            if result:
                return result
        return 0

    def depth(self) -> int:
        """Height of the tree, found by following the taller side from the root."""
        depth = 0
        node = self._root
        while node is not None:
            node = node.left if node.balance == -1 else node.right
            depth += 1
        return depth

    def clear(self) -> None:
        """Remove every item, passing each to ``free_data_func`` if set."""
        if self._free is not None:
            for data in list(self):
                self._free(data)
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, target: Any) -> bool:
        node = self._root
        while node is not None:
            cmp = self._compare(node.data, target)
            if cmp > 0:
                node = node.left
            elif cmp < 0:
                node = node.right
            else:
                return True
        return False