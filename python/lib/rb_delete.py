#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_delete.py
------------

Deletion family of the colour-less left-leaning red-black tree.

The descent keeps one invariant: the node being visited is red, or the child
the walk is heading into is red.  When that child and its lesser grandchild
are both black, :func:`move_red_left` / :func:`move_red_right` borrow a red
from the sibling side.  On the way back up :func:`rb_primitives.balance`
undoes any temporary right-leaning or doubled red link.

Every recursive function expects its subtree root to be in the ledger and
returns the new subtree root, which is in the ledger too.
"""

from __future__ import annotations

from typing import Optional

from rb_color import ColorLedger, greater, lesser
from rb_node import Node
from rb_primitives import balance, flip_colors, rotate_left, rotate_right, seat
from rb_queries import minimum


def move_red_left(ledger: ColorLedger, h: Node) -> Node:
    """
    Make the lesser child of *h*, or one of its children, red.

    Assumes *h* is red and both its lesser child and that child's lesser
    child are black.
    """
    flip_colors(ledger, h)
    hi = greater(h)
    if ledger.child_red(hi, lesser(hi)):
        seat(ledger, h, lesser(h), rotate_right(ledger, hi))
        h = rotate_left(ledger, h)
        flip_colors(ledger, h)
    return h


def move_red_right(ledger: ColorLedger, h: Node) -> Node:
    """
    Make the greater child of *h*, or one of its children, red.

    Assumes *h* is red and both its greater child and that child's lesser
    child are black.
    """
    flip_colors(ledger, h)
    lo = lesser(h)
    if ledger.child_red(lo, lesser(lo)):
        h = rotate_right(ledger, h)
        flip_colors(ledger, h)
    return h


def delete_min(ledger: ColorLedger, h: Node) -> Optional[Node]:
    """Unlink the smallest node below *h*; return the new subtree root."""
    lo, hi = lesser(h), greater(h)
    if lo is None:
        return None
    ledger.child_red(h, hi)
    if not ledger.child_red(h, lo) and not ledger.child_red(lo, lesser(lo)):
        h = move_red_left(ledger, h)

    seat(ledger, h, delete_min(ledger, lesser(h)), greater(h))
    return balance(ledger, h)


def delete_max(ledger: ColorLedger, h: Node) -> Optional[Node]:
    """Unlink the largest node below *h*; return the new subtree root."""
    lo, hi = lesser(h), greater(h)
    ledger.child_red(h, hi)
    if ledger.child_red(h, lo):
        h = rotate_right(ledger, h)

    hi = greater(h)
    if hi is None:
        return None
    if not ledger.child_red(h, hi) and not ledger.child_red(hi, lesser(hi)):
        h = move_red_right(ledger, h)

    seat(ledger, h, lesser(h), delete_max(ledger, greater(h)))
    return balance(ledger, h)


def delete(ledger: ColorLedger, h: Node, key) -> Optional[Node]:
    """
    Unlink the node holding *key* below *h*; return the new subtree root.

    *key* must be present.  An interior node is spliced: its in-order
    successor is unlinked from the greater subtree and the successor's key
    and value are copied into it.
    """
    lo, hi = lesser(h), greater(h)
    ledger.child_red(h, lo)
    ledger.child_red(h, hi)

    if key < h.key:
        if not ledger.child_red(h, lo) and not ledger.child_red(lo, lesser(lo)):
            h = move_red_left(ledger, h)
        seat(ledger, h, delete(ledger, lesser(h), key), greater(h))
        return balance(ledger, h)

    if ledger.child_red(h, lo):
        h = rotate_right(ledger, h)
    hi = greater(h)
    if key == h.key and hi is None:
        return None
    if not ledger.child_red(h, hi) and not ledger.child_red(hi, lesser(hi)):
        h = move_red_right(ledger, h)

    if key == h.key:
        successor = minimum(greater(h))
        seat(ledger, h, lesser(h), delete_min(ledger, greater(h)))
        h.key, h.value = successor.key, successor.value
    else:
        seat(ledger, h, lesser(h), delete(ledger, greater(h), key))
    return balance(ledger, h)
