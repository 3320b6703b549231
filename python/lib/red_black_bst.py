#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_bst.py
----------------

An ordered symbol table (key → value) backed by a **left-leaning red-black
tree that stores no colour bit**.  A node is red when its two children are
kept in swapped order – the larger child on the left – and black otherwise;
see :mod:`rb_color` for the full encoding.  Insertion and the deletion family
run in O(log n) rotations and flips; reading a colour costs a walk from the
root, which is the price of dropping the bit.

Features
~~~~~~~~
* `st.put(key, value)` / `st[key] = value` – insert / replace
  (``put(key, None)`` deletes *key*)
* `st.get(key)` – value or ``None``;  `st[key]` – value or ``NotFound``
* `st.delete(key)` – no-op for a missing key;  `del st[key]` – ``NotFound``
* `st.delete_min()`, `st.delete_max()`
* `st.min()`, `st.max()`, `st.floor(key)`, `st.ceiling(key)`
* `st.keys()`, `st.keys(lo, hi)` – ascending lists
* `len(st)`, `key in st`, iteration, `st.items()`, `st.values()`
* `st.is_red(key)` – colour of a stored key, inferred from the tree shape
* `st.validate()` – check every red-black invariant (useful for debugging)
* `st.render()` – small text diagram of the tree

The table is not thread-safe: concurrent readers during a write are
unsupported and callers needing concurrency must serialise access
themselves.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_bst import RedBlackBST
>>> st = RedBlackBST()
>>> for k in (1, 2, 3, 10, 7, 20, 5, 50):
...     st.put(k, str(k))
>>> st.size(), st.min(), st.max()
(8, 1, 50)
>>> st.floor(6), st.ceiling(6)
(5, 7)
>>> st.keys(3, 10)
[3, 5, 7, 10]
>>> st.delete_min()
>>> 1 in st
False
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

import rb_delete
import rb_insert
from rb_color import ColorLedger, child_is_red, greater, is_inverted, is_red, lesser
from rb_errors import EmptyCollection, InvalidArgument, NotFound
from rb_node import Node, size_of
from rb_primitives import paint
from rb_queries import (
    ceiling,
    collect_keys,
    find,
    floor,
    height,
    in_order,
    maximum,
    minimum,
)

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

_UNSET: Any = object()


class RedBlackBST(Generic[K, V]):
    """
    Ordered symbol table implemented with a colour-less left-leaning
    red-black tree.

    The table owns the single root reference; nodes are never handed out to
    callers.  Keys must be mutually comparable and may not be ``None``;
    ``None`` as a value is the deletion marker of :meth:`put`.
    """

    # Set True (or pass check=True) to validate the tree after each write.
    CHECK_AFTER_WRITE = False

    __slots__ = ("_root", "_check")

    # ------------------------------------------------------------------
    #   Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        items: Optional[Union[Mapping[K, V], Iterable[Tuple[K, V]]]] = None,
        *,
        check: Optional[bool] = None,
    ) -> None:
        """
        Create an empty table, optionally filled from *items*.

        Parameters
        ----------
        items : mapping or iterable of (key, value)   optional
            Inserted one by one, in iteration order.
        check : bool   optional
            Run :meth:`validate` after every mutating call.  Defaults to
            ``RedBlackBST.CHECK_AFTER_WRITE``.
        """
        self._root: Optional[Node[K, V]] = None
        self._check: bool = self.CHECK_AFTER_WRITE if check is None else check

        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.put(key, value)

    # ------------------------------------------------------------------
    #   Size
    # ------------------------------------------------------------------
    def size(self) -> int:
        """Number of key-value pairs in the table."""
        return size_of(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return height(self._root)

    # ------------------------------------------------------------------
    #   Lookup
    # ------------------------------------------------------------------
    def get(self, key: K) -> Optional[V]:
        """Return the value stored under *key*, or ``None`` if it is absent."""
        _require_key(key, "get")
        node = find(self._root, key)
        return None if node is None else node.value

    def contains(self, key: K) -> bool:
        _require_key(key, "contains")
        return find(self._root, key) is not None

    def is_red(self, key: K) -> bool:
        """Colour of the node holding *key*, inferred by walking from the root."""
        _require_key(key, "is_red")
        node = find(self._root, key)
        if node is None:
            raise NotFound(key)
        return is_red(self._root, node)

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def put(self, key: K, value: Optional[V]) -> None:
        """
        Insert *key* with *value*, replacing any previous value.

        A ``None`` value deletes *key* instead.
        """
        _require_key(key, "put")
        if value is None:
            self.delete(key)
            return

        ledger = self._open_ledger()
        self._settle(ledger, rb_insert.put(ledger, self._root, key, value))

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def delete_min(self) -> None:
        """Remove the smallest key.  Raises ``EmptyCollection`` on an empty table."""
        if self.is_empty():
            raise EmptyCollection("delete_min() on an empty table")
        ledger = self._open_ledger()
        self._lend_red_to_root(ledger)
        self._settle(ledger, rb_delete.delete_min(ledger, self._root))

    def delete_max(self) -> None:
        """Remove the largest key.  Raises ``EmptyCollection`` on an empty table."""
        if self.is_empty():
            raise EmptyCollection("delete_max() on an empty table")
        ledger = self._open_ledger()
        self._lend_red_to_root(ledger)
        self._settle(ledger, rb_delete.delete_max(ledger, self._root))

    def delete(self, key: K) -> None:
        """Remove *key* and its value; does nothing if *key* is not stored."""
        _require_key(key, "delete")
        if find(self._root, key) is None:
            logger.debug("delete(%r): key not present, nothing to do", key)
            return
        ledger = self._open_ledger()
        self._lend_red_to_root(ledger)
        self._settle(ledger, rb_delete.delete(ledger, self._root, key))

    # ------------------------------------------------------------------
    #   Ordered queries
    # ------------------------------------------------------------------
    def min(self) -> K:
        """Smallest key.  Raises ``EmptyCollection`` on an empty table."""
        if self._root is None:
            raise EmptyCollection("min() on an empty table")
        return minimum(self._root).key

    def max(self) -> K:
        """Largest key.  Raises ``EmptyCollection`` on an empty table."""
        if self._root is None:
            raise EmptyCollection("max() on an empty table")
        return maximum(self._root).key

    def floor(self, key: K) -> K:
        """Largest stored key ``<= key``; ``NotFound`` if there is none."""
        _require_key(key, "floor")
        node = floor(self._root, key)
        if node is None:
            raise NotFound(f"no key <= {key!r}")
        return node.key

    def ceiling(self, key: K) -> K:
        """Smallest stored key ``>= key``; ``NotFound`` if there is none."""
        _require_key(key, "ceiling")
        node = ceiling(self._root, key)
        if node is None:
            raise NotFound(f"no key >= {key!r}")
        return node.key

    def keys(self, lo: K = _UNSET, hi: K = _UNSET) -> List[K]:
        """
        Return the stored keys in ascending order.

        With no arguments every key is returned; with both bounds only the
        keys in the closed interval ``[lo, hi]`` (empty when ``lo > hi``).
        """
        if lo is _UNSET and hi is _UNSET:
            return [node.key for node in in_order(self._root)]
        if lo is _UNSET or lo is None:
            raise InvalidArgument("first argument to keys() is None")
        if hi is _UNSET or hi is None:
            raise InvalidArgument("second argument to keys() is None")
        out: List[K] = []
        if lo <= hi:
            collect_keys(self._root, lo, hi, out)
        return out

    def values(self) -> List[V]:
        """Return the stored values in key order."""
        return [node.value for node in in_order(self._root)]

    def items(self) -> List[Tuple[K, V]]:
        """Return ``(key, value)`` pairs in key order."""
        return [(node.key, node.value) for node in in_order(self._root)]

    # ------------------------------------------------------------------
    #   Container protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self._root is not None

    def __contains__(self, key: object) -> bool:
        return key is not None and find(self._root, key) is not None

    def __getitem__(self, key: K) -> V:
        _require_key(key, "__getitem__")
        node = find(self._root, key)
        if node is None:
            raise NotFound(key)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def __delitem__(self, key: K) -> None:
        if key not in self:
            raise NotFound(key)
        self.delete(key)

    def __iter__(self) -> Iterator[K]:
        """Yield keys in ascending order."""
        for node in in_order(self._root):
            yield node.key

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"RedBlackBST({{{items}}})"

    # ------------------------------------------------------------------
    #   Root handling shared by every mutating call
    # ------------------------------------------------------------------
    def _open_ledger(self) -> ColorLedger:
        ledger = ColorLedger()
        if self._root is not None:
            ledger.record(self._root, False)
        return ledger

    def _lend_red_to_root(self, ledger: ColorLedger) -> None:
        """Paint the root red when both its children are black."""
        root = self._root
        if not ledger.child_red(root, lesser(root)) and not ledger.child_red(
            root, greater(root)
        ):
            logger.debug("root %r lent red for deletion", root.key)
            paint(ledger, root, True)

    def _settle(self, ledger: ColorLedger, root: Optional[Node[K, V]]) -> None:
        """Install *root* as the new root, painted black."""
        if root is not None:
            paint(ledger, root, False)
        self._root = root
        if self._check:
            self.validate()

    # ------------------------------------------------------------------
    #   Validation – useful for debugging
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify that the tree satisfies every invariant of the encoding.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        root = self._root
        if root is None:
            return
        logger.debug("validating tree of %d nodes", root.size)

        def dfs(node: Optional[Node[K, V]], parent: Optional[Node[K, V]],
                parent_red: bool, low: Any, high: Any) -> int:
            """Return the black height of *node*'s subtree."""
            if node is None:
                return 0

            red = child_is_red(parent, node)
            assert red == is_red(root, node), f"colour of {node.key!r} depends on the walk"
            assert not (red and parent_red), f"red node {node.key!r} has a red parent"

            # BST ordering against the bounds inherited from the ancestors
            assert low is _UNSET or low < node.key, f"key {node.key!r} out of order"
            assert high is _UNSET or node.key < high, f"key {node.key!r} out of order"

            lo, hi = lesser(node), greater(node)
            for child in (node.left, node.right):
                assert child is None or child is lo or child is hi, "broken child link"
            if lo is not None and hi is not None:
                assert red == (node.left.key > node.right.key), "slot order disagrees with colour"
            elif lo is not None or hi is not None:
                assert red == is_inverted(node), "slot order disagrees with colour"

            # left-leaning 2-3 shape: red links lean towards the smaller side only
            assert not child_is_red(node, hi), f"red greater child under {node.key!r}"

            assert node.size == size_of(node.left) + size_of(node.right) + 1, (
                f"size of {node.key!r} is stale"
            )

            left_black = dfs(lo, node, red, low, node.key)
            right_black = dfs(hi, node, red, node.key, high)
            assert left_black == right_black, f"black-height mismatch at {node.key!r}"
            return left_black + (0 if red else 1)

        assert not child_is_red(None, root), "root is not black"
        assert not is_inverted(root), "root stores its children in red order"
        dfs(root, None, False, _UNSET, _UNSET)
        assert self.size() == sum(1 for _ in in_order(root)), "size disagrees with key count"

    # ------------------------------------------------------------------
    #   Debug rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """Pre-order text diagram of the tree; red nodes are marked ``(R)``."""
        root = self._root
        if root is None:
            return ""
        lines = [str(root.key)]

        def walk(node: Node[K, V], parent: Node[K, V], padding: str, last: bool) -> None:
            mark = " (R)" if child_is_red(parent, node) else ""
            lines.append(f"{padding}{'└──' if last else '├──'}{node.key}{mark}")
            _children(node, padding + ("   " if last else "│  "))

        def _children(node: Node[K, V], padding: str) -> None:
            kids = [c for c in (lesser(node), greater(node)) if c is not None]
            for i, child in enumerate(kids):
                walk(child, node, padding, i == len(kids) - 1)

        _children(root, "")
        return "\n".join(lines) + "\n"


def _require_key(key: Any, operation: str) -> None:
    if key is None:
        raise InvalidArgument(f"argument to {operation}() is None")
