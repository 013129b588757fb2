"""Feature data expressions: access to the properties of source features."""

from typing import Any, Tuple, Union

from ..helpers import _check_kind
from .base import Expression


def properties() -> Expression:
    """
    Gets the feature properties object.

    In some cases it is more efficient to use get() on a single property.
    """
    return Expression("properties")


def geometry_type() -> Expression:
    """
    Gets the feature's geometry type.

    One of Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon.
    """
    return Expression("geometry-type")


def id_() -> Expression:
    """Gets the feature's id, if it has one."""
    return Expression("id")


def get(*values: Any) -> Expression:
    """
    Retrieves a property value from the current feature's properties.

    Args:
        *values: key, or key and an object expression to read from instead
            of the feature's properties; other shapes pass through unchecked

    Returns:
        ["get", key] or ["get", key, obj]

    Example:
        >>> get("population").serialize()
        ['get', 'population']
        >>> get("name", properties()).serialize()
        ['get', 'name', ['properties']]
    """
    return _keyed("get", values)


def has(*values: Any) -> Expression:
    """
    Tests for the presence of a property value in the current feature's properties.

    Same argument shape as get().
    """
    return _keyed("has", values)


def length(value: Union[str, Expression]) -> Expression:
    """Gets the length of a string or an array."""
    _check_kind("length", "value", value, "expression", "string")
    return Expression("length", value)


def _keyed(operator: str, values: Tuple[Any, ...]) -> Expression:
    if len(values) in (1, 2):
        _check_kind(operator, "key", values[0], "string", "expression")
    if len(values) == 2:
        _check_kind(operator, "obj", values[1], "expression")
    return Expression(operator, *values)
