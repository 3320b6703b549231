#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_primitives.py
----------------

Structural primitives of the colour-less left-leaning red-black tree.

All of them work on the *logical* children of a node (:func:`rb_color.lesser`
and :func:`rb_color.greater`) and finish by storing every touched node's
children in the slot order its colour calls for.  Swapping the two slots of a
node (:func:`flip_children`) is the only way a colour is ever toggled.

Each function takes the :class:`rb_color.ColorLedger` of the current
insertion or deletion as its first argument.
"""

from __future__ import annotations

from typing import Optional

from rb_color import ColorLedger, greater, lesser
from rb_node import Node, resize


def flip_children(node: Optional[Node]) -> None:
    """Swap the child slots of *node*, toggling the colour its shape encodes."""
    if node is None:
        return
    node.left, node.right = node.right, node.left


def seat(ledger: ColorLedger, h: Node, lo: Optional[Node], hi: Optional[Node]) -> Node:
    """Hang *lo* and *hi* under *h* in the slots h's colour calls for."""
    if ledger.red(h):
        h.left, h.right = hi, lo
    else:
        h.left, h.right = lo, hi
    resize(h)
    return h


def paint(ledger: ColorLedger, node: Optional[Node], red: bool) -> None:
    """Give an already-seen *node* the colour *red*."""
    if node is None or ledger.red(node) == red:
        return
    ledger.record(node, red)
    flip_children(node)


# ----------------------------------------------------------------------
#  Rotations
# ----------------------------------------------------------------------
def rotate_left(ledger: ColorLedger, h: Node) -> Node:
    """
    Promote the greater child of *h* and return it as the new subtree root.

    The promoted node inherits h's colour and *h* becomes red.  Every node
    whose parent or sibling changes is entered in the ledger before the
    pointers move.  Returns *h* unchanged when it has no greater child.
    """
    x = greater(h)
    if x is None:
        return h
    a, b, c = lesser(h), lesser(x), greater(x)
    ledger.child_red(h, a)
    ledger.child_red(h, x)
    ledger.child_red(x, b)
    ledger.child_red(x, c)

    ledger.record(x, ledger.red(h))
    ledger.record(h, True)
    seat(ledger, h, a, b)
    return seat(ledger, x, h, c)


def rotate_right(ledger: ColorLedger, h: Node) -> Node:
    """Mirror of :func:`rotate_left`: promote the lesser child of *h*."""
    x = lesser(h)
    if x is None:
        return h
    a, b, c = lesser(x), greater(x), greater(h)
    ledger.child_red(h, x)
    ledger.child_red(h, c)
    ledger.child_red(x, a)
    ledger.child_red(x, b)

    ledger.record(x, ledger.red(h))
    ledger.record(h, True)
    seat(ledger, h, b, c)
    return seat(ledger, x, a, h)


# ----------------------------------------------------------------------
#  Colour flip and fix-up
# ----------------------------------------------------------------------
def flip_colors(ledger: ColorLedger, h: Node) -> None:
    """
    Toggle *h* and both of its children.

    Only the two legal patterns are flipped: a red parent over two black
    children, or a black parent over two red children.  Anything else –
    including a node with fewer than two children – is left alone.
    """
    lo, hi = lesser(h), greater(h)
    if lo is None or hi is None:
        return
    red = ledger.red(h)
    if ledger.child_red(h, lo) == red or ledger.child_red(h, hi) == red:
        return
    paint(ledger, h, not red)
    paint(ledger, lo, red)
    paint(ledger, hi, red)


def balance(ledger: ColorLedger, h: Node) -> Node:
    """Restore the left-leaning invariants at *h* and refresh its size."""
    if ledger.child_red(h, greater(h)) and not ledger.child_red(h, lesser(h)):
        h = rotate_left(ledger, h)
    lo = lesser(h)
    if ledger.child_red(h, lo) and ledger.child_red(lo, lesser(lo)):
        h = rotate_right(ledger, h)
    if ledger.child_red(h, lesser(h)) and ledger.child_red(h, greater(h)):
        flip_colors(ledger, h)
    resize(h)
    return h
