"""Helper functions for argument checking and literal normalization."""

from typing import Any, Tuple

import numpy as np


def _is_number(value: Any) -> bool:
    """True for int/float literals (bool excluded, it is its own kind)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _normalize_literal(value: Any, func: str) -> Any:
    """
    Convert a Python or numpy value to a plain JSON-compatible literal.

    Scalars pass through, numpy scalars and arrays are converted to their
    Python equivalents, and list/tuple/dict containers are copied with their
    contents normalized recursively.

    Args:
        value: The candidate literal
        func: Name of the constructor, used in error messages

    Returns:
        The normalized literal

    Raises:
        TypeError: If the value is not a literal kind the expression
            language can represent
    """
    if isinstance(value, np.ndarray):
        return _normalize_literal(value.tolist(), func)
    if isinstance(value, np.generic):
        value = value.item()

    if value is None or isinstance(value, (bool, str)):
        return value
    if _is_number(value):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(_normalize_literal(v, func) for v in value)
    if isinstance(value, dict):
        normalized = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(
                    f"{func}() object literal keys must be str, got {type(k).__name__}"
                )
            normalized[k] = _normalize_literal(v, func)
        return normalized

    raise TypeError(
        f"{func}() got unsupported literal kind: {type(value).__name__}"
    )


def _thaw_literal(value: Any) -> Any:
    """Turn a stored literal back into fresh lists/dicts for output."""
    if isinstance(value, tuple):
        return [_thaw_literal(v) for v in value]
    if isinstance(value, dict):
        return {k: _thaw_literal(v) for k, v in value.items()}
    return value


def _join(prefix: Tuple[Any, ...], suffix: Tuple[Any, ...]) -> Tuple[Any, ...]:
    """
    Concatenate a fixed-position prefix with a variadic suffix.

    Relative order of both parts is preserved, e.g.
    ``_join((input,), (0, "a", 10, "b")) == (input, 0, "a", 10, "b")``.
    """
    return tuple(prefix) + tuple(suffix)


def _check_kind(func: str, param: str, value: Any, *kinds: str) -> None:
    """
    Validate that a typed constructor parameter has one of the given kinds.

    Kinds: "expression", "number", "string", "boolean".

    Raises:
        TypeError: If value matches none of the kinds
    """
    from .expr.base import Expression

    if isinstance(value, np.generic):
        value = value.item()

    checks = {
        "expression": lambda v: isinstance(v, Expression),
        "number": _is_number,
        "string": lambda v: isinstance(v, str),
        "boolean": lambda v: isinstance(v, bool),
    }
    if any(checks[kind](value) for kind in kinds):
        return

    expected = " or ".join(kinds)
    raise TypeError(
        f"{func}() '{param}' must be {expected}, got {type(value).__name__}"
    )
