"""String expressions."""

from typing import Any

from .base import Expression


def upcase(*values: Any) -> Expression:
    """
    Returns the input string converted to uppercase.

    Follows the Unicode Default Case Conversion algorithm and the
    locale-insensitive case mappings in the Unicode Character Database.
    """
    return Expression("upcase", *values)


def downcase(*values: Any) -> Expression:
    """
    Returns the input string converted to lowercase.

    Follows the Unicode Default Case Conversion algorithm and the
    locale-insensitive case mappings in the Unicode Character Database.
    """
    return Expression("downcase", *values)


def concat(*values: Any) -> Expression:
    """
    Returns a string consisting of the concatenation of the inputs.

    Example:
        >>> concat(get("name"), " (", get("ref"), ")").serialize()
        ['concat', ['get', 'name'], ' (', ['get', 'ref'], ')']
    """
    return Expression("concat", *values)
