"""Ramps, scales, and curves: step, interpolate, and interpolation types."""

from typing import Any

from ..helpers import _check_kind, _join
from .base import Expression


def step(input: Any, *stops: Any) -> Expression:
    """
    Produces discrete, stepped results from a piecewise-constant function.

    The function is defined by (stop input, output) pairs. Stop inputs must
    be numeric literals in strictly ascending order; that is checked by the
    evaluator, stops are passed through here as given.

    Args:
        input: Numeric input value or expression, e.g. get("population")
        *stops: Base output first, then stop input, output, stop input, output, ...

    Returns:
        ["step", input, *stops]

    Example:
        >>> step(zoom(), 0, 10, 1, 14, 2).serialize()
        ['step', ['zoom'], 0, 10, 1, 14, 2]
    """
    _check_kind("step", "input", input, "number", "expression")
    return Expression("step", *_join((input,), stops))


def interpolate(interpolation: Expression, input: Any, *stops: Any) -> Expression:
    """
    Produces continuous, smooth results by interpolating between stops.

    The output type must be number, array of numbers, or color.

    Args:
        interpolation: linear(), exponential(base) or cubic_bezier(...)
        input: Numeric input value or expression, e.g. zoom()
        *stops: stop input, output, stop input, output, ...

    Returns:
        ["interpolate", interpolation, input, *stops]

    Example:
        >>> interpolate(linear(), zoom(), 5, 1, 10, 4).serialize()
        ['interpolate', ['linear'], ['zoom'], 5, 1, 10, 4]
    """
    _check_kind("interpolate", "interpolation", interpolation, "expression")
    _check_kind("interpolate", "input", input, "number", "expression")
    return Expression("interpolate", *_join((interpolation, input), stops))


def linear() -> Expression:
    """Interpolates linearly between the pair of stops just less than and just greater than the input."""
    return Expression("linear")


def exponential(base: Any) -> Expression:
    """
    Interpolates exponentially between the stops just less than and just greater than the input.

    Higher base values make the output increase more towards the high end of
    the range; values close to 1 behave linearly.
    """
    _check_kind("exponential", "base", base, "number", "expression")
    return Expression("exponential", base)


def cubic_bezier(*control_points: Any) -> Expression:
    """
    Interpolates using the cubic bezier curve defined by the given control points.

    Args:
        *control_points: x1, y1, x2, y2 (each 0-1), as numbers or expressions
    """
    return Expression("cubic-bezier", *control_points)
