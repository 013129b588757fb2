"""Lookup expressions."""

from typing import Any

from ..helpers import _check_kind
from .base import Expression


def at(*values: Any) -> Expression:
    """
    Retrieves an item from an array.

    Args:
        *values: index (number or number-producing expression) and an
            array-producing expression, e.g. literal([...]) or get("tags").
            Other shapes pass through unchecked.

    Example:
        >>> at(1, get("tags")).serialize()
        ['at', 1, ['get', 'tags']]
    """
    if len(values) == 2:
        _check_kind("at", "index", values[0], "number", "expression")
        _check_kind("at", "array", values[1], "expression")
    return Expression("at", *values)
