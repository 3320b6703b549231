#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_rb_color.py
----------------

Colour inference on hand-built trees:

* slot-order reading (`is_inverted`, `lesser`, `greater`)
* local colour rules (`child_is_red`)
* the walk from the root (`is_red`)
* per-call memoisation in `ColorLedger`
"""

import unittest

from rb_color import (
    ColorLedger,
    child_is_red,
    greater,
    is_inverted,
    is_red,
    lesser,
)
from rb_node import Node


def _node(key, left=None, right=None):
    """Build a node with explicit slots and a correct size."""
    node = Node(key, str(key))
    node.left, node.right = left, right
    node.size = 1 + sum(c.size for c in (left, right) if c is not None)
    return node


class TestSlotOrder(unittest.TestCase):
    def test_two_children_ascending_is_black(self):
        n = _node(2, _node(1), _node(3))
        self.assertFalse(is_inverted(n))
        self.assertEqual(lesser(n).key, 1)
        self.assertEqual(greater(n).key, 3)

    def test_two_children_swapped_is_red(self):
        n = _node(2, _node(3), _node(1))
        self.assertTrue(is_inverted(n))
        self.assertEqual(lesser(n).key, 1)
        self.assertEqual(greater(n).key, 3)

    def test_single_child_slot(self):
        self.assertFalse(is_inverted(_node(5, left=_node(3))))
        self.assertFalse(is_inverted(_node(5, right=_node(7))))
        self.assertTrue(is_inverted(_node(5, left=_node(7))))
        self.assertTrue(is_inverted(_node(5, right=_node(3))))

        n = _node(5, right=_node(3))
        self.assertEqual(lesser(n).key, 3)
        self.assertIsNone(greater(n))

    def test_leaf(self):
        leaf = _node(4)
        self.assertFalse(is_inverted(leaf))
        self.assertIsNone(lesser(leaf))
        self.assertIsNone(greater(leaf))


class TestChildIsRed(unittest.TestCase):
    def test_none_and_root(self):
        root = _node(1)
        self.assertFalse(child_is_red(root, None))
        self.assertFalse(child_is_red(None, root))

    def test_lone_leaf_is_red(self):
        one = _node(1)
        parent = _node(2, left=one)
        self.assertTrue(child_is_red(parent, one))

    def test_leaf_with_sibling_is_black(self):
        one, three = _node(1), _node(3)
        parent = _node(2, one, three)
        self.assertFalse(child_is_red(parent, one))
        self.assertFalse(child_is_red(parent, three))

    def test_inner_node_reads_its_own_slots(self):
        red = _node(2, _node(3), _node(1))
        black = _node(10, left=_node(9))
        parent = _node(7, red, black)
        self.assertTrue(child_is_red(parent, red))
        self.assertFalse(child_is_red(parent, black))


class TestWalkFromRoot(unittest.TestCase):
    def setUp(self):
        # 7 with a red 2 (children swapped) on its smaller side and 10 on
        # the larger side – the settled shape after inserting 1, 2, 3, 10, 7
        self.one, self.three, self.ten = _node(1), _node(3), _node(10)
        self.two = _node(2, self.three, self.one)
        self.root = _node(7, self.two, self.ten)

    def test_root_and_none_are_black(self):
        self.assertFalse(is_red(self.root, self.root))
        self.assertFalse(is_red(self.root, None))

    def test_colours(self):
        self.assertTrue(is_red(self.root, self.two))
        self.assertFalse(is_red(self.root, self.one))
        self.assertFalse(is_red(self.root, self.three))
        self.assertFalse(is_red(self.root, self.ten))

    def test_lone_child_found_through_red_parent(self):
        # give the red node's smaller child a lone red child of its own
        zero = _node(0)
        self.one.left = zero
        self.assertTrue(is_red(self.root, zero))

    def test_unreachable_node_is_black(self):
        self.assertFalse(is_red(self.root, _node(4)))


class TestColorLedger(unittest.TestCase):
    def test_first_reading_is_kept(self):
        ledger = ColorLedger()
        one = _node(1)
        parent = _node(2, left=one)
        self.assertTrue(ledger.child_red(parent, one))
        self.assertIn(one, ledger)

        # a new sibling would make the shape say "black"; the ledger does not care
        parent.right = _node(3)
        self.assertTrue(ledger.child_red(parent, one))
        self.assertTrue(ledger.red(one))

    def test_record_and_none(self):
        ledger = ColorLedger()
        node = _node(1)
        ledger.record(node, False)
        self.assertFalse(ledger.red(node))
        self.assertFalse(ledger.red(None))
        self.assertFalse(ledger.child_red(node, None))
        self.assertEqual(len(ledger), 1)

    def test_unseen_node_raises(self):
        with self.assertRaises(KeyError):
            ColorLedger().red(_node(1))


if __name__ == "__main__":
    unittest.main(verbosity=2)
