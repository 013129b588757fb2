"""Decision expressions: comparisons, boolean logic, and conditionals."""

from typing import Any, Union

from ..helpers import _check_kind
from .base import Expression


# =============================================================================
# Comparison
# =============================================================================


def eq(*values: Any) -> Expression:
    """
    Returns true if the input values are equal, false otherwise.

    The inputs must be numbers, strings, or booleans, and both of the same
    type; a mismatch is reported by the evaluator.

    Example:
        >>> eq(get("type"), "Point").serialize()
        ['==', ['get', 'type'], 'Point']
    """
    return Expression("==", *values)


def neq(*values: Any) -> Expression:
    """Returns true if the input values are not equal, false otherwise."""
    return Expression("!=", *values)


def gt(*values: Any) -> Expression:
    """Returns true if the first input is strictly greater than the second."""
    return Expression(">", *values)


def lt(*values: Any) -> Expression:
    """Returns true if the first input is strictly less than the second."""
    return Expression("<", *values)


def gte(*values: Any) -> Expression:
    """Returns true if the first input is greater than or equal to the second."""
    return Expression(">=", *values)


def lte(*values: Any) -> Expression:
    """Returns true if the first input is less than or equal to the second."""
    return Expression("<=", *values)


# =============================================================================
# Boolean logic
# =============================================================================


def all_(*conditions: Any) -> Expression:
    """
    Returns true if all the inputs are true, false otherwise.

    The evaluator checks inputs in order and stops at the first false one,
    so the order given here is kept exactly.

    Example:
        >>> all_(has("name"), gt(get("rank"), 3)).serialize()
        ['all', ['has', 'name'], ['>', ['get', 'rank'], 3]]
    """
    return Expression("all", *conditions)


def any_(*conditions: Any) -> Expression:
    """
    Returns true if any of the inputs are true, false otherwise.

    Inputs are checked in order, stopping at the first true one.
    """
    return Expression("any", *conditions)


def not_(value: Union[Expression, bool]) -> Expression:
    """
    Logical negation.

    Args:
        value: A boolean expression or boolean literal

    Raises:
        TypeError: If value is neither an Expression nor a bool
    """
    _check_kind("not_", "value", value, "expression", "boolean")
    return Expression("!", value)


# =============================================================================
# Conditionals
# =============================================================================


def switch_case(*branches: Any) -> Expression:
    """
    Selects the first output whose corresponding test condition evaluates to true.

    Args:
        *branches: condition1, output1, condition2, output2, ..., fallback

    Example:
        >>> switch_case(eq(get("kind"), "park"), "green", "gray").serialize()
        ['case', ['==', ['get', 'kind'], 'park'], 'green', 'gray']
    """
    return Expression("case", *branches)


def match(*arms: Any) -> Expression:
    """
    Selects the output whose label value matches the input value, or the fallback.

    Each label is a single literal or a list of literals.

    Args:
        *arms: input, label1, output1, label2, output2, ..., fallback

    Example:
        >>> match(get("kind"), ["park", "forest"], "green", "gray").serialize()
        ['match', ['get', 'kind'], ['park', 'forest'], 'green', 'gray']
    """
    return Expression("match", *arms)


def coalesce(*values: Any) -> Expression:
    """Evaluates each expression in turn until the first non-null value is obtained."""
    return Expression("coalesce", *values)
