#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_queries.py
-------------

Read-only walks over a colour-less red-black subtree.

These are the ordinary binary-search-tree algorithms.  The only twist is that
a red node keeps its larger child on the left, so every step asks
:func:`rb_color.lesser` / :func:`rb_color.greater` for the right pointer
instead of reading ``left`` / ``right`` directly.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from rb_color import greater, lesser
from rb_node import Node


def find(node: Optional[Node], key) -> Optional[Node]:
    """Return the node holding *key*, or ``None``."""
    while node is not None:
        if key < node.key:
            node = lesser(node)
        elif key > node.key:
            node = greater(node)
        else:
            return node
    return None


def minimum(node: Node) -> Node:
    """The node with the smallest key in the non-empty subtree at *node*."""
    while (lo := lesser(node)) is not None:
        node = lo
    return node


def maximum(node: Node) -> Node:
    """The node with the largest key in the non-empty subtree at *node*."""
    while (hi := greater(node)) is not None:
        node = hi
    return node


def floor(node: Optional[Node], key) -> Optional[Node]:
    """The node with the largest key ``<= key``, or ``None``."""
    best = None
    while node is not None:
        if key < node.key:
            node = lesser(node)
        elif key > node.key:
            best = node
            node = greater(node)
        else:
            return node
    return best


def ceiling(node: Optional[Node], key) -> Optional[Node]:
    """The node with the smallest key ``>= key``, or ``None``."""
    best = None
    while node is not None:
        if key > node.key:
            node = greater(node)
        elif key < node.key:
            best = node
            node = lesser(node)
        else:
            return node
    return best


def collect_keys(node: Optional[Node], lo, hi, out: List) -> None:
    """Append the keys in ``[lo, hi]`` below *node* to *out*, ascending."""
    if node is None:
        return
    if lo < node.key:
        collect_keys(lesser(node), lo, hi, out)
    if lo <= node.key <= hi:
        out.append(node.key)
    if hi > node.key:
        collect_keys(greater(node), lo, hi, out)


def in_order(node: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes below *node* in ascending key order."""
    stack: List[Node] = []
    cur = node
    while stack or cur is not None:
        while cur is not None:
            stack.append(cur)
            cur = lesser(cur)
        cur = stack.pop()
        yield cur
        cur = greater(cur)


def height(node: Optional[Node]) -> int:
    """Number of nodes on the longest downward path from *node*."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))
