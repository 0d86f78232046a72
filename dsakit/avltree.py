"""Self-balancing AVL search tree of integer keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_INDENT = "    "


class DuplicateKeyError(ValueError):
    """Raised when a key already present in the tree is inserted again."""


@dataclass
class AVLNode:
    """A tree node; ``balance`` is +1 when left heavy and -1 when right heavy."""

    key: int
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    balance: int = 0


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _insert_left_balance(node: AVLNode) -> AVLNode:
    child = node.left
    if child.balance == 1:
        node.balance = child.balance = 0
        return _rotate_right(node)
    grand = child.right
    if grand.balance == -1:
        node.balance, child.balance = 0, 1
    elif grand.balance == 1:
        node.balance, child.balance = -1, 0
    else:
        node.balance = child.balance = 0
    grand.balance = 0
    node.left = _rotate_left(child)
    return _rotate_right(node)


def _insert_right_balance(node: AVLNode) -> AVLNode:
    child = node.right
    if child.balance == -1:
        node.balance = child.balance = 0
        return _rotate_left(node)
    grand = child.left
    if grand.balance == -1:
        node.balance, child.balance = 1, 0
    elif grand.balance == 1:
        node.balance, child.balance = 0, -1
    else:
        node.balance = child.balance = 0
    grand.balance = 0
    node.right = _rotate_right(child)
    return _rotate_left(node)


def _insert(node: Optional[AVLNode], key: int) -> tuple[AVLNode, bool]:
    """Insert ``key`` below ``node``; return the new subtree root and whether it grew."""
    if node is None:
        return AVLNode(key), True
    if key < node.key:
        node.left, taller = _insert(node.left, key)
        if not taller:
            return node, False
        if node.balance == 0:
            node.balance = 1
            return node, True
        if node.balance == -1:
            node.balance = 0
            return node, False
        return _insert_left_balance(node), False
    if key > node.key:
        node.right, taller = _insert(node.right, key)
        if not taller:
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        if node.balance == 1:
            node.balance = 0
            return node, False
        return _insert_right_balance(node), False
    raise DuplicateKeyError(key)


def _delete_left_balance(node: AVLNode) -> tuple[AVLNode, bool]:
    child = node.left
    if child.balance == 0:
        node.balance, child.balance = 1, -1
        return _rotate_right(node), False
    if child.balance == 1:
        node.balance = child.balance = 0
        return _rotate_right(node), True
    grand = child.right
    if grand.balance == 0:
        node.balance = child.balance = 0
    elif grand.balance == 1:
        node.balance, child.balance = -1, 0
    else:
        node.balance, child.balance = 0, 1
    grand.balance = 0
    node.left = _rotate_left(child)
    return _rotate_right(node), True


def _delete_right_balance(node: AVLNode) -> tuple[AVLNode, bool]:
    child = node.right
    if child.balance == 0:
        node.balance, child.balance = -1, 1
        return _rotate_left(node), False
    if child.balance == -1:
        node.balance = child.balance = 0
        return _rotate_left(node), True
    grand = child.left
    if grand.balance == 0:
        node.balance = child.balance = 0
    elif grand.balance == 1:
        node.balance, child.balance = 0, -1
    else:
        node.balance, child.balance = 1, 0
    grand.balance = 0
    node.right = _rotate_right(child)
    return _rotate_left(node), True


def _after_left_shrank(node: AVLNode) -> tuple[AVLNode, bool]:
    if node.balance == 0:
        node.balance = -1
        return node, False
    if node.balance == 1:
        node.balance = 0
        return node, True
    return _delete_right_balance(node)


def _after_right_shrank(node: AVLNode) -> tuple[AVLNode, bool]:
    if node.balance == 0:
        node.balance = 1
        return node, False
    if node.balance == -1:
        node.balance = 0
        return node, True
    return _delete_left_balance(node)


def _delete(node: Optional[AVLNode], key: int) -> tuple[Optional[AVLNode], bool]:
    """Remove ``key`` below ``node``; return the new subtree root and whether it shrank."""
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left, shorter = _delete(node.left, key)
        return _after_left_shrank(node) if shorter else (node, False)
    if key > node.key:
        node.right, shorter = _delete(node.right, key)
        return _after_right_shrank(node) if shorter else (node, False)
    if node.left is not None and node.right is not None:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right, shorter = _delete(node.right, successor.key)
        return _after_right_shrank(node) if shorter else (node, False)
    return (node.left if node.left is not None else node.right), True


class AVLTree:
    """An AVL tree holding distinct integer keys."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: Optional[AVLNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Insert ``key``; raise DuplicateKeyError if it is already present."""
        self.root, _ = _insert(self.root, key)
        self._size += 1

    def delete(self, key: int) -> None:
        """Remove ``key``; raise KeyError if it is not present."""
        self.root, _ = _delete(self.root, key)
        self._size -= 1

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        return list(self)

    def display(self) -> str:
        """Render the tree sideways: right subtree on top, four spaces per level."""
        return "\n".join(self._display_lines(self.root, 0))

    def _display_lines(self, node: Optional[AVLNode], level: int) -> Iterator[str]:
        if node is None:
            return
        yield from self._display_lines(node.right, level + 1)
        yield f"{_INDENT * level}{node.key}"
        yield from self._display_lines(node.left, level + 1)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right