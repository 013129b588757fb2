"""Math expressions: constants, arithmetic, and numeric functions."""

from typing import Any, Tuple

from ..helpers import _check_kind
from .base import Expression


# =============================================================================
# Constants
# =============================================================================


def ln2() -> Expression:
    """Returns the mathematical constant ln(2)."""
    return Expression("ln2")


def pi() -> Expression:
    """Returns the mathematical constant pi."""
    return Expression("pi")


def e() -> Expression:
    """Returns the mathematical constant e."""
    return Expression("e")


# =============================================================================
# Arithmetic
# =============================================================================


def sum_(*values: Any) -> Expression:
    """
    Returns the sum of the inputs.

    Example:
        >>> sum_(get("a"), get("b"), 1).serialize()
        ['+', ['get', 'a'], ['get', 'b'], 1]
    """
    return Expression("+", *values)


def product(*values: Any) -> Expression:
    """Returns the product of the inputs."""
    return Expression("*", *values)


def subtract(*values: Any) -> Expression:
    """
    Subtraction or negation.

    With one input, returns its negation; with two, subtracts the second
    from the first. Other arities pass through unchecked.

    Args:
        *values: (value,) or (first, second)

    Raises:
        TypeError: If a one or two argument call gets a non-numeric literal

    Example:
        >>> subtract(5).serialize()
        ['-', 5]
        >>> subtract(get("max"), get("min")).serialize()
        ['-', ['get', 'max'], ['get', 'min']]
    """
    if len(values) in (1, 2):
        for i, value in enumerate(values):
            _check_kind("subtract", f"arg{i}", value, "number", "expression")
    return Expression("-", *values)


def division(*values: Any) -> Expression:
    """Returns the result of floating point division of the first input by the second."""
    return _binary("/", "division", values)


def mod(*values: Any) -> Expression:
    """Returns the remainder after integer division of the first input by the second."""
    return _binary("%", "mod", values)


def pow_(*values: Any) -> Expression:
    """Returns the result of raising the first input to the power of the second."""
    return _binary("^", "pow_", values)


# =============================================================================
# Numeric functions
# =============================================================================


def sqrt(*values: Any) -> Expression:
    """Returns the square root of the input."""
    return _unary("sqrt", values)


def log10(*values: Any) -> Expression:
    """Returns the base-ten logarithm of the input."""
    return _unary("log10", values)


def ln(*values: Any) -> Expression:
    """Returns the natural logarithm of the input."""
    return _unary("ln", values)


def log2(*values: Any) -> Expression:
    """Returns the base-two logarithm of the input."""
    return _unary("log2", values)


def sin(*values: Any) -> Expression:
    """Returns the sine of the input (radians)."""
    return _unary("sin", values)


def cos(*values: Any) -> Expression:
    """Returns the cosine of the input (radians)."""
    return _unary("cos", values)


def tan(*values: Any) -> Expression:
    """Returns the tangent of the input (radians)."""
    return _unary("tan", values)


def asin(*values: Any) -> Expression:
    """Returns the arcsine of the input."""
    return _unary("asin", values)


def acos(*values: Any) -> Expression:
    """Returns the arccosine of the input."""
    return _unary("acos", values)


def atan(*values: Any) -> Expression:
    """Returns the arctangent of the input."""
    return _unary("atan", values)


def min_(*values: Any) -> Expression:
    """Returns the minimum value of the inputs."""
    return Expression("min", *values)


def max_(*values: Any) -> Expression:
    """Returns the maximum value of the inputs."""
    return Expression("max", *values)


def _unary(operator: str, values: Tuple[Any, ...]) -> Expression:
    if len(values) == 1:
        _check_kind(operator, "value", values[0], "number", "expression")
    return Expression(operator, *values)


def _binary(operator: str, func: str, values: Tuple[Any, ...]) -> Expression:
    if len(values) == 2:
        _check_kind(func, "first", values[0], "number", "expression")
        _check_kind(func, "second", values[1], "number", "expression")
    return Expression(operator, *values)
