"""Camera expressions."""

from .base import Expression


def zoom() -> Expression:
    """
    Gets the current zoom level.

    In layout and paint properties, zoom may only appear as the input to a
    top-level step or interpolate expression.
    """
    return Expression("zoom")
