#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_errors.py
------------

Failure conditions raised by :class:`red_black_bst.RedBlackBST`.

Every class also derives from the built-in exception a caller would expect
from a ``dict``-like container, so ``except KeyError`` / ``except ValueError``
keep working.
"""

from __future__ import annotations


class SymbolTableError(Exception):
    """Base class for all symbol-table failures."""


class InvalidArgument(SymbolTableError, ValueError):
    """A ``None`` key or range bound was passed where one is required."""


class EmptyCollection(SymbolTableError, LookupError):
    """A structural query or removal was attempted on an empty table."""


class NotFound(SymbolTableError, KeyError):
    """No stored key satisfies the request (missing key, floor/ceiling out of range)."""
