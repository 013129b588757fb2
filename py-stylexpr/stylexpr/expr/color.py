"""Color expressions: rgb, rgba, to-rgba."""

from typing import Any, Union

import numpy as np

from ..colors import color_to_rgba_string
from ..helpers import _check_kind
from .base import Expression


def color(value: int) -> str:
    """
    Convert an ARGB color int to the "rgba(r,g,b,a)" string form.

    Use this wherever a color literal is needed as an expression argument.

    Example:
        >>> match(get("kind"), "park", color(0xFF00FF00), color(0xFF888888))
    """
    if isinstance(value, np.integer):
        value = value.item()
    return color_to_rgba_string(value)


def rgb(*components: Any) -> Expression:
    """
    Create a color value from red, green, and blue components (0-255) with alpha 1.

    Components may be numbers or expressions. Out-of-range components are an
    error of the evaluator, not of construction. Called with anything other
    than three components, the arguments pass through unchecked.

    Example:
        >>> rgb(255, 0, get("blue")).serialize()
        ['rgb', 255, 0, ['get', 'blue']]
    """
    if len(components) == 3:
        for name, value in zip(("red", "green", "blue"), components):
            _check_kind("rgb", name, value, "number", "expression")
    return Expression("rgb", *components)


def rgba(*components: Any) -> Expression:
    """
    Create a color value from red, green, blue (0-255) and alpha (0-1) components.

    Accepts either a single expression producing the four components, or the
    four components themselves.

    Args:
        *components: (expression,) or (red, green, blue, alpha)

    Returns:
        Expression serializing to ["rgba", ...]

    Raises:
        TypeError: If called with any other number of arguments, or with
            arguments that are neither numbers nor expressions

    Example:
        >>> rgba(255, 0, 0, 0.5).serialize()
        ['rgba', 255, 0, 0, 0.5]
    """
    if len(components) == 1:
        _check_kind("rgba", "expression", components[0], "expression")
    elif len(components) == 4:
        for name, value in zip(("red", "green", "blue", "alpha"), components):
            _check_kind("rgba", name, value, "number", "expression")
    else:
        raise TypeError(
            f"rgba() takes 1 expression or 4 components, got {len(components)} arguments"
        )
    return Expression("rgba", *components)


def to_rgba(value: Union[Expression, str, int]) -> Expression:
    """
    Return a four-element array of the input color's red, green, blue, and alpha components.

    Args:
        value: A color expression, a color string (e.g. "#ff0000"), or an
            ARGB color int, which is converted with color()

    Example:
        >>> to_rgba("#ff0000").serialize()
        ['to-rgba', '#ff0000']
    """
    if isinstance(value, np.integer):
        value = value.item()
    _check_kind("to_rgba", "value", value, "expression", "string", "number")
    if isinstance(value, float):
        raise TypeError("to_rgba() 'value' must be expression, string or int, got float")
    if isinstance(value, int):
        value = color(value)
    return Expression("to-rgba", value)
