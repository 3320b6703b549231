#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_color.py
-----------

Colour inference for a red-black tree that stores no colour bit.

Encoding
~~~~~~~~
* A node that has at least one child is **red** when its children sit in
  swapped slots: the larger child on the left, the smaller one on the right.
  With two children that is simply ``left.key > right.key``; a single child
  tells the same story by the slot it occupies.
* A childless node is **red** exactly when it has no sibling.  In a settled
  left-leaning tree a red leaf can only hang alone under a black node, and a
  black leaf always has a sibling of equal black height.
* The root is always black.

Reading the colour of an arbitrary node therefore needs its parent, which
:func:`is_red` finds by walking down from the root.  That walk costs
O(height) per call instead of the O(1) of a stored flag; the trade is one
bit per node against a logarithmic lookup, and it is taken on purpose.

During a single insertion or deletion the tree briefly passes through shapes
the encoding cannot express (two red leaves under one parent, a red node
with one red child).  :class:`ColorLedger` carries the colours of the nodes a
rebalancing pass touches, so the pass can write the final shape back into
slot order.  A ledger lives for one call only.
"""

from __future__ import annotations

from typing import Dict, Optional

from rb_node import Node, is_leaf


# ----------------------------------------------------------------------
#  Shape-level reading
# ----------------------------------------------------------------------
def is_inverted(node: Node) -> bool:
    """True when *node* stores its children in swapped (descending) slots."""
    if node.left is not None and node.left.key > node.key:
        return True
    if node.right is not None and node.right.key < node.key:
        return True
    return False


def lesser(node: Node) -> Optional[Node]:
    """The child holding smaller keys, whichever slot it occupies."""
    return node.right if is_inverted(node) else node.left


def greater(node: Node) -> Optional[Node]:
    """The child holding larger keys, whichever slot it occupies."""
    return node.left if is_inverted(node) else node.right


def child_is_red(parent: Optional[Node], node: Optional[Node]) -> bool:
    """Colour of *node* given the *parent* it hangs from (``None`` for the root)."""
    if node is None or parent is None:
        return False
    if not is_leaf(node):
        return is_inverted(node)
    # a leaf without a sibling is red
    return parent.left is None or parent.right is None


def is_red(root: Optional[Node], node: Optional[Node]) -> bool:
    """
    Return whether *node* is red in the tree rooted at *root*.

    The walk starts at the root and, at every level, lets the current
    pointer's own slot order decide which way is "smaller" before stepping
    towards *node*.  It stops at the first pointer that holds *node* in one
    of its slots and reads the colour from that context.  A node that cannot
    be reached is reported black.
    """
    if node is None or node is root:
        return False
    parent = root
    while parent is not None:
        if parent.left is node or parent.right is node:
            return child_is_red(parent, node)
        if node.key < parent.key:
            parent = lesser(parent)
        elif node.key > parent.key:
            parent = greater(parent)
        else:
            break
    return False


# ----------------------------------------------------------------------
#  Per-call colour bookkeeping
# ----------------------------------------------------------------------
class ColorLedger:
    """
    Colours of the nodes touched by one insertion or deletion.

    A node's colour is read from the tree shape the first time the pass looks
    at it – always before the pass changes that node's parent or sibling – and
    remembered from then on.  Colours the pass assigns are recorded here and
    written into slot order by the structural primitives.
    """

    __slots__ = ("_colors",)

    def __init__(self) -> None:
        self._colors: Dict[Node, bool] = {}

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, node: object) -> bool:
        return node in self._colors

    def record(self, node: Node, red: bool) -> None:
        self._colors[node] = red

    def red(self, node: Optional[Node]) -> bool:
        """Colour of a node the pass has already seen; ``None`` is black."""
        if node is None:
            return False
        return self._colors[node]

    def child_red(self, parent: Node, node: Optional[Node]) -> bool:
        """Colour of *node*, a current child of *parent*."""
        if node is None:
            return False
        try:
            return self._colors[node]
        except KeyError:
            red = self._colors[node] = child_is_red(parent, node)
            return red
