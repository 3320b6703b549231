#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_insert.py
------------

Recursive insertion into the colour-less left-leaning red-black tree.
"""

from __future__ import annotations

from typing import Optional

from rb_color import ColorLedger, greater, lesser
from rb_node import Node
from rb_primitives import balance, seat


def put(ledger: ColorLedger, h: Optional[Node], key, value) -> Node:
    """
    Insert *key* → *value* below *h* and return the new subtree root.

    The caller must have entered *h* in the ledger.  A new node starts red;
    an equal key only overwrites the stored value and leaves the shape alone.
    """
    if h is None:
        node = Node(key, value)
        ledger.record(node, True)
        return node

    # h's slot order tells which child is smaller; both children are entered
    # in the ledger before either of them gains a new sibling
    lo, hi = lesser(h), greater(h)
    ledger.child_red(h, lo)
    ledger.child_red(h, hi)

    if key < h.key:
        lo = put(ledger, lo, key, value)
    elif key > h.key:
        hi = put(ledger, hi, key, value)
    else:
        h.value = value
        return h

    seat(ledger, h, lo, hi)
    return balance(ledger, h)
