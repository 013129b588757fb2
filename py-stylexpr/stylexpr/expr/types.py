"""Type expressions: literals, type assertions, and conversions."""

from typing import Any

from .base import Expression


def literal(*values: Any) -> Expression:
    """
    Provides a literal array or object value.

    Wrapping a list or dict in literal() stops the evaluator from reading it
    as an expression.

    Example:
        >>> literal([1, 2, 3]).serialize()
        ['literal', [1, 2, 3]]
    """
    return Expression("literal", *values)


def array(*values: Any) -> Expression:
    """
    Asserts that the input is an array (optionally with a specific item type and length).

    If the evaluated input is not of the asserted type, the whole expression
    is aborted.

    Example:
        >>> array("number", 3, get("center")).serialize()
        ['array', 'number', 3, ['get', 'center']]
    """
    return Expression("array", *values)


def type_of(*values: Any) -> Expression:
    """Returns a string describing the type of the given value."""
    return Expression("typeof", *values)


def string(*values: Any) -> Expression:
    """
    Asserts that the input value is a string.

    If multiple values are provided, each one is evaluated in order until a
    string value is obtained.
    """
    return Expression("string", *values)


def number(*values: Any) -> Expression:
    """
    Asserts that the input value is a number.

    If multiple values are provided, each one is evaluated in order until a
    number value is obtained.
    """
    return Expression("number", *values)


def boolean(*values: Any) -> Expression:
    """
    Asserts that the input value is a boolean.

    If multiple values are provided, each one is evaluated in order until a
    boolean value is obtained.
    """
    return Expression("boolean", *values)


def object_(*values: Any) -> Expression:
    """Asserts that the input value is an object."""
    return Expression("object", *values)


def to_string(*values: Any) -> Expression:
    """
    Converts the input value to a string.

    Null stays null, booleans become "true"/"false", numbers use the
    ECMAScript NumberToString rules, colors become "rgba(r,g,b,a)", and
    anything else is JSON-stringified.
    """
    return Expression("to-string", *values)


def to_number(*values: Any) -> Expression:
    """
    Converts the input value to a number, if possible.

    Null and false become 0, true becomes 1, strings are parsed. With
    multiple values, each is tried in order until one converts.
    """
    return Expression("to-number", *values)


def to_boolean(*values: Any) -> Expression:
    """
    Converts the input value to a boolean.

    The result is false for an empty string, 0, false, null, or NaN and true
    otherwise.
    """
    return Expression("to-boolean", *values)


def to_color(*values: Any) -> Expression:
    """
    Converts the input value to a color.

    With multiple values, each is tried in order until one converts.

    Example:
        >>> to_color(get("fill"), "#000000").serialize()
        ['to-color', ['get', 'fill'], '#000000']
    """
    return Expression("to-color", *values)
