"""Base expression class for stylexpr."""

import json
from typing import Any, List, Tuple, Union

from ..helpers import _normalize_literal, _thaw_literal


class Expression:
    """
    One operator application: an operator name plus ordered arguments.

    Each argument is either a literal (number, string, boolean, None, or a
    literal array/object) or another Expression. Nodes are immutable once
    built and are composed bottom-up, so an expression graph is always a tree.

    Arithmetic and logical Python operators build new nodes instead of
    evaluating, mirroring the named constructors:

        a + b  -> ["+", a, b]        -a     -> ["-", a]
        a - b  -> ["-", a, b]        ~a     -> ["!", a]
        a * b  -> ["*", a, b]        a & b  -> ["all", a, b]
        a / b  -> ["/", a, b]        a | b  -> ["any", a, b]
        a % b  -> ["%", a, b]        a ** b -> ["^", a, b]

    Comparison operators keep their normal meaning: two expressions are
    equal when they have the same operator and equal arguments.

    Attributes:
        operator (str): The expression operator, e.g. "get", "interpolate"
        arguments (tuple): Ordered arguments
    """

    __slots__ = ("_operator", "_arguments")

    def __init__(self, operator: str, *arguments: Any):
        """
        Initialize an Expression.

        Args:
            operator: Operator name (e.g. "+", "case", "zoom")
            *arguments: Literals and/or nested Expressions, in order

        Raises:
            TypeError: If operator is not a string or an argument is not a
                supported literal kind
        """
        if not isinstance(operator, str):
            raise TypeError(
                f"operator must be a string, got {type(operator).__name__}"
            )
        args = tuple(
            arg if isinstance(arg, Expression) else _normalize_literal(arg, operator)
            for arg in arguments
        )
        object.__setattr__(self, "_operator", operator)
        object.__setattr__(self, "_arguments", args)

    @property
    def operator(self) -> str:
        return self._operator

    @property
    def arguments(self) -> Tuple[Any, ...]:
        return self._arguments

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Expression is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Expression is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (Expression, (self._operator,) + self._arguments)

    def serialize(self) -> List[Any]:
        """
        Convert this expression to its nested-array form.

        The first element is the operator; each argument follows in order,
        with nested Expressions replaced by their own serialized arrays and
        literals passed through unchanged (literal arrays and objects are
        emitted as fresh lists/dicts).

        Returns:
            A list ready for JSON encoding, e.g. ["get", "population"]
        """
        out: List[Any] = [self._operator]
        for arg in self._arguments:
            if isinstance(arg, Expression):
                out.append(arg.serialize())
            else:
                out.append(_thaw_literal(arg))
        return out

    def to_json(self, **kwargs: Any) -> str:
        """
        Serialize and encode as a JSON string.

        Args:
            **kwargs: Passed through to json.dumps (e.g. indent, separators)

        Example:
            >>> Expression("get", "name").to_json()
            '["get", "name"]'
        """
        return json.dumps(self.serialize(), **kwargs)

    def __repr__(self) -> str:
        return f"Expression({self.serialize()!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> Tuple[Any, ...]:
        return (self._operator, _freeze(self._arguments))

    # Arithmetic operators
    def __add__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("+", self, other)

    def __sub__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("-", self, other)

    def __mul__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("*", self, other)

    def __truediv__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("/", self, other)

    def __mod__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("%", self, other)

    def __pow__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("^", self, other)

    def __neg__(self) -> "Expression":
        return Expression("-", self)

    # Right-hand operators (for reversed operations like 5 + zoom())
    def __radd__(self, other: Any) -> "Expression":
        return Expression("+", other, self)

    def __rsub__(self, other: Any) -> "Expression":
        return Expression("-", other, self)

    def __rmul__(self, other: Any) -> "Expression":
        return Expression("*", other, self)

    def __rtruediv__(self, other: Any) -> "Expression":
        return Expression("/", other, self)

    def __rmod__(self, other: Any) -> "Expression":
        return Expression("%", other, self)

    def __rpow__(self, other: Any) -> "Expression":
        return Expression("^", other, self)

    # Logical operators
    def __and__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("all", self, other)

    def __rand__(self, other: Any) -> "Expression":
        return Expression("all", other, self)

    def __or__(self, other: Union["Expression", Any]) -> "Expression":
        return Expression("any", self, other)

    def __ror__(self, other: Any) -> "Expression":
        return Expression("any", other, self)

    def __invert__(self) -> "Expression":
        return Expression("!", self)


def _freeze(value: Any) -> Any:
    """Hashable comparison key for a stored argument; keeps True and 1 distinct."""
    if isinstance(value, Expression):
        return ("expr",) + value._key()
    if isinstance(value, dict):
        return ("object", tuple(sorted((k, _freeze(v)) for k, v in value.items())))
    if isinstance(value, tuple):
        return ("array", tuple(_freeze(v) for v in value))
    if isinstance(value, bool):
        return ("bool", value)
    return value
