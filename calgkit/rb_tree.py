"""Red-black tree: a balanced binary search tree mapping keys to values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum, IntEnum
from typing import Any

CompareFunc = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class NodeColor(Enum):
    """Each node in a red-black tree is either red or black."""

    RED = 0
    BLACK = 1


class NodeSide(IntEnum):
    """The side of a node on which a child hangs."""

    LEFT = 0
    RIGHT = 1


class RBTreeNode:
    """A node in a red-black tree, holding a key and a value."""

    __slots__ = ("key", "value", "color", "parent", "children")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.color = NodeColor.RED
        self.parent: RBTreeNode | None = None
        self.children: list[RBTreeNode | None] = [None, None]

    def child(self, side: int) -> RBTreeNode | None:
        """Return the child on ``side``, or None if there is none or the side is invalid."""
        if side == NodeSide.LEFT or side == NodeSide.RIGHT:
            return self.children[side]
        return None

    def uncle(self) -> RBTreeNode | None:
        """Return the sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        return parent.parent.children[1 - _side(parent)]

    def __repr__(self) -> str:
        return f"RBTreeNode(key={self.key!r}, value={self.value!r}, color={self.color.name})"


def _side(node: RBTreeNode) -> NodeSide:
    parent = node.parent
    assert parent is not None
    if parent.children[NodeSide.LEFT] is node:
        return NodeSide.LEFT
    return NodeSide.RIGHT


def _color(node: RBTreeNode | None) -> NodeColor:
    return NodeColor.BLACK if node is None else node.color


def subtree_height(node: RBTreeNode | None) -> int:
    """Return the height of the subtree rooted at ``node`` (0 for an empty one)."""
    if node is None:
        return 0
    return 1 + max(
        subtree_height(node.children[NodeSide.LEFT]),
        subtree_height(node.children[NodeSide.RIGHT]),
    )


class RBTree:
    """A red-black tree ordered by ``compare``.

    ``compare(a, b)`` returns a negative number if ``a`` sorts before ``b``,
    a positive number if after, and zero if equal.  Without one, keys are
    compared with ``<`` and ``>``.
    """

    __slots__ = ("_root", "_compare", "_count")

    def __init__(self, compare: CompareFunc | None = None) -> None:
        self._root: RBTreeNode | None = None
        self._compare = compare if compare is not None else _natural_compare
        self._count = 0

    # -- structural helpers -------------------------------------------------

    def _replace(self, old: RBTreeNode, new: RBTreeNode | None) -> None:
        """Put ``new`` in the place of ``old`` at its parent."""
        if new is not None:
            new.parent = old.parent
        if old.parent is None:
            self._root = new
        else:
            old.parent.children[_side(old)] = new

    def _rotate(self, node: RBTreeNode, direction: int) -> RBTreeNode:
        """Rotate the section topped by ``node`` left or right."""
        new_root = node.children[1 - direction]
        assert new_root is not None
        self._replace(node, new_root)
        node.children[1 - direction] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[1 - direction]
        if moved is not None:
            moved.parent = node
        return new_root

    def _insert_fixup(self, node: RBTreeNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = NodeColor.BLACK
                return
            if parent.color is NodeColor.BLACK:
                return
            grandparent = parent.parent
            assert grandparent is not None
            uncle = node.uncle()
            if uncle is not None and uncle.color is NodeColor.RED:
                parent.color = NodeColor.BLACK
                uncle.color = NodeColor.BLACK
                grandparent.color = NodeColor.RED
                node = grandparent
                continue
            side = _side(node)
            if side != _side(parent):
                self._rotate(parent, 1 - side)
                node = parent
            parent = node.parent
            assert parent is not None
            grandparent = parent.parent
            assert grandparent is not None
            self._rotate(grandparent, 1 - _side(node))
            parent.color = NodeColor.BLACK
            grandparent.color = NodeColor.RED
            return

    def _remove_fixup(
        self, node: RBTreeNode | None, parent: RBTreeNode | None, side: int
    ) -> None:
        while parent is not None and _color(node) is NodeColor.BLACK:
            other = 1 - side
            sibling = parent.children[other]
            assert sibling is not None
            if sibling.color is NodeColor.RED:
                sibling.color = NodeColor.BLACK
                parent.color = NodeColor.RED
                self._rotate(parent, side)
                sibling = parent.children[other]
                assert sibling is not None
            if (
                _color(sibling.children[side]) is NodeColor.BLACK
                and _color(sibling.children[other]) is NodeColor.BLACK
            ):
                sibling.color = NodeColor.RED
                node = parent
                parent = node.parent
                if parent is not None:
                    side = _side(node)
                continue
            if _color(sibling.children[other]) is NodeColor.BLACK:
                near = sibling.children[side]
                assert near is not None
                near.color = NodeColor.BLACK
                sibling.color = NodeColor.RED
                self._rotate(sibling, other)
                sibling = parent.children[other]
                assert sibling is not None
            sibling.color = parent.color
            parent.color = NodeColor.BLACK
            far = sibling.children[other]
            assert far is not None
            far.color = NodeColor.BLACK
            self._rotate(parent, side)
            node = self._root
            break
        if node is not None:
            node.color = NodeColor.BLACK

    # -- public interface ---------------------------------------------------

    def insert(self, key: Any, value: Any = None) -> RBTreeNode:
        """Insert a key-value pair and return the new node."""
        node = RBTreeNode(key, value)
        parent: RBTreeNode | None = None
        rover = self._root
        side = NodeSide.LEFT
        while rover is not None:
            parent = rover
            side = NodeSide.LEFT if self._compare(key, rover.key) < 0 else NodeSide.RIGHT
            rover = rover.children[side]
        node.parent = parent
        if parent is None:
            self._root = node
        else:
            parent.children[side] = node
        self._insert_fixup(node)
        self._count += 1
        return node

    def lookup_node(self, key: Any) -> RBTreeNode | None:
        """Return the node holding ``key``, or None."""
        node = self._root
        while node is not None:
            diff = self._compare(key, node.key)
            if diff == 0:
                return node
            node = node.children[NodeSide.LEFT if diff < 0 else NodeSide.RIGHT]
        return None

    def lookup(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self.lookup_node(key)
        return default if node is None else node.value

    def remove_node(self, node: RBTreeNode) -> None:
        """Remove ``node`` from the tree."""
        left = node.children[NodeSide.LEFT]
        right = node.children[NodeSide.RIGHT]
        removed_color = node.color

        if left is None or right is None:
            child = left if left is not None else right
            fix_parent = node.parent
            fix_side = _side(node) if fix_parent is not None else NodeSide.LEFT
            self._replace(node, child)
        else:
            successor = right
            while successor.children[NodeSide.LEFT] is not None:
                successor = successor.children[NodeSide.LEFT]
            removed_color = successor.color
            child = successor.children[NodeSide.RIGHT]
            if successor.parent is node:
                fix_parent = successor
                fix_side = NodeSide.RIGHT
            else:
                fix_parent = successor.parent
                fix_side = NodeSide.LEFT
                self._replace(successor, child)
                successor.children[NodeSide.RIGHT] = right
                right.parent = successor
            self._replace(node, successor)
            successor.children[NodeSide.LEFT] = left
            left.parent = successor
            successor.color = node.color

        node.parent = None
        node.children = [None, None]
        self._count -= 1

        if removed_color is NodeColor.BLACK:
            self._remove_fixup(child, fix_parent, fix_side)

    def remove(self, key: Any) -> bool:
        """Remove the entry with ``key``; return False if there was none."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def root_node(self) -> RBTreeNode | None:
        """Return the root node, or None if the tree is empty."""
        return self._root

    def _nodes(self) -> Iterator[RBTreeNode]:
        stack: list[RBTreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[NodeSide.LEFT]
            node = stack.pop()
            yield node
            node = node.children[NodeSide.RIGHT]

    def to_array(self) -> list[Any]:
        """Return all keys in order."""
        return [node.key for node in self._nodes()]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the keys in order."""
        return (node.key for node in self._nodes())

    def __contains__(self, key: Any) -> bool:
        return self.lookup_node(key) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[(n.key, n.value) for n in self._nodes()]!r})"