#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_node.py
----------

The tree cell used by :mod:`red_black_bst`.

A node carries a key, a value, two child links and the size of the subtree it
roots.  There is deliberately **no colour field**: colour is read from the
order in which the children are stored (see :mod:`rb_color`).
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("key", "value", "left", "right", "size")

    def __init__(self, key: K, value: V, size: int = 1) -> None:
        self.key = key
        self.value = value
        self.left: Optional["Node[K, V]"] = None
        self.right: Optional["Node[K, V]"] = None
        self.size = size

    def __repr__(self) -> str:
        return f"<Node {self.key!r}:{self.value!r} n={self.size}>"


def size_of(node: Optional[Node]) -> int:
    """Number of nodes in the subtree rooted at *node*; 0 for ``None``."""
    return 0 if node is None else node.size


def resize(node: Node) -> None:
    """Recompute ``node.size`` from its children."""
    node.size = size_of(node.left) + size_of(node.right) + 1


def is_leaf(node: Node) -> bool:
    return node.left is None and node.right is None
