"""Variable binding expressions."""

from typing import Any, Union

from ..helpers import _check_kind
from .base import Expression


def let(*bindings: Any) -> Expression:
    """
    Binds expressions to named variables, referenced in the body with var().

    Args:
        *bindings: name1, value1, name2, value2, ..., body

    Example:
        >>> let("density", division(get("population"), get("area")), var("density")).serialize()
        ['let', 'density', ['/', ['get', 'population'], ['get', 'area']], ['var', 'density']]
    """
    return Expression("let", *bindings)


def var(name: Union[str, Expression]) -> Expression:
    """
    References a variable bound using let().

    Args:
        name: Variable name, or an expression producing it
    """
    _check_kind("var", "name", name, "string", "expression")
    return Expression("var", name)
