"""
Unit tests for the Expression node.

Tests verify:
- Serialization format (nested arrays, operator first)
- Argument order and literal pass-through
- Immutability and value semantics
- Operator overloads (+ - * / % ** unary - ~ & |)
"""

import copy
import json
import pickle

import pytest
from stylexpr import Expression, get, literal, not_, eq, zoom


class TestSerialize:
    """Tests for Expression.serialize()"""

    def test_operator_first(self):
        """Serialized form starts with the operator name"""
        assert Expression("get", "name").serialize() == ["get", "name"]

    def test_zero_arguments(self):
        """Zero-argument node serializes to a single-element array"""
        assert Expression("zoom").serialize() == ["zoom"]

    def test_literals_pass_through(self):
        """Numbers, strings, booleans and None are emitted unchanged"""
        expr = Expression("op", 1, 2.5, "s", True, False, None)
        assert expr.serialize() == ["op", 1, 2.5, "s", True, False, None]

    def test_bool_not_coerced_to_int(self):
        """Booleans keep their type in the output"""
        out = Expression("op", True, 1).serialize()
        assert out[1] is True
        assert out[2] == 1 and not isinstance(out[2], bool)

    def test_nested_expression(self):
        """Nested nodes are replaced by their serialized arrays"""
        expr = Expression("!", Expression("==", Expression("get", "type"), "Point"))
        assert expr.serialize() == ["!", ["==", ["get", "type"], "Point"]]

    def test_argument_order_preserved(self):
        """Arguments come out in construction order, duplicates kept"""
        args = [3, "b", 3, zoom(), "a", 3]
        out = Expression("x", *args).serialize()
        assert out == ["x", 3, "b", 3, ["zoom"], "a", 3]

    def test_deep_nesting(self):
        """Recursion works at arbitrary depth"""
        expr = zoom()
        for _ in range(50):
            expr = Expression("+", expr, 1)
        out = expr.serialize()
        depth = 0
        while out[0] == "+":
            assert out[2] == 1
            depth += 1
            out = out[1]
        assert depth == 50
        assert out == ["zoom"]

    def test_deterministic(self):
        """Repeated serialization yields equal output"""
        expr = Expression("case", eq(get("a"), 1), "one", literal([1, 2]))
        assert expr.serialize() == expr.serialize()

    def test_output_is_fresh(self):
        """Mutating the output does not affect the node"""
        expr = Expression("literal", [1, 2, 3])
        out = expr.serialize()
        out[1].append(4)
        out.append("junk")
        assert expr.serialize() == ["literal", [1, 2, 3]]

    def test_shared_subexpression(self):
        """The same child may appear twice; both copies serialize"""
        child = get("x")
        expr = Expression("*", child, child)
        assert expr.serialize() == ["*", ["get", "x"], ["get", "x"]]

    def test_container_literals(self):
        """Lists and dicts serialize as lists and dicts"""
        expr = Expression("literal", {"a": [1, (2, 3)], "b": None})
        assert expr.serialize() == ["literal", {"a": [1, [2, 3]], "b": None}]

    def test_to_json(self):
        """to_json() encodes the serialized form"""
        expr = not_(eq(get("type"), "Point"))
        assert json.loads(expr.to_json()) == ["!", ["==", ["get", "type"], "Point"]]

    def test_to_json_kwargs(self):
        """to_json() passes keyword arguments to json.dumps"""
        assert Expression("get", "a").to_json(separators=(",", ":")) == '["get","a"]'


class TestConstruction:
    """Tests for Expression construction rules"""

    def test_operator_must_be_string(self):
        """Non-string operator is rejected"""
        with pytest.raises(TypeError, match="operator must be a string"):
            Expression(42, 1)

    def test_no_arity_validation(self):
        """The raw constructor accepts any number of arguments"""
        assert Expression("rgb").serialize() == ["rgb"]
        assert len(Expression("rgb", *range(10)).arguments) == 10

    @pytest.mark.parametrize("bad", [object(), {1, 2}, b"bytes", 1 + 2j])
    def test_unsupported_literal_kind(self, bad):
        """Values with no JSON form are rejected at construction"""
        with pytest.raises(TypeError, match="unsupported literal kind"):
            Expression("literal", bad)

    def test_expression_inside_container_rejected(self):
        """Expressions cannot hide inside literal arrays"""
        with pytest.raises(TypeError, match="unsupported literal kind"):
            Expression("literal", [get("a")])

    def test_non_string_object_key_rejected(self):
        """Object literal keys must be strings"""
        with pytest.raises(TypeError, match="keys must be str"):
            Expression("literal", {1: "a"})

    def test_container_copied(self):
        """Caller mutation after construction does not leak into the node"""
        values = [1, 2]
        expr = Expression("literal", values)
        values.append(3)
        assert expr.serialize() == ["literal", [1, 2]]

    def test_copy(self):
        """copy and deepcopy produce equal nodes"""
        expr = not_(eq(get("a"), literal({"k": [1, 2]})))
        assert copy.copy(expr) == expr
        clone = copy.deepcopy(expr)
        assert clone == expr
        assert clone.serialize() == expr.serialize()

    def test_pickle_round_trip(self):
        """Nodes survive pickling with their arguments intact"""
        expr = Expression("case", eq(get("kind"), "park"), True, None, [1, 2.5])
        restored = pickle.loads(pickle.dumps(expr))
        assert restored == expr
        assert restored.serialize() == ["case", ["==", ["get", "kind"], "park"], True, None, [1, 2.5]]

    def test_copy_stays_immutable(self):
        """A copied node still rejects assignment"""
        clone = copy.deepcopy(get("a"))
        with pytest.raises(AttributeError, match="immutable"):
            clone._arguments = ()


class TestImmutability:
    """Tests for Expression immutability"""

    def test_properties(self):
        """operator and arguments are exposed read-only"""
        expr = Expression("get", "a")
        assert expr.operator == "get"
        assert expr.arguments == ("a",)

    def test_cannot_set_operator(self):
        """Assigning operator raises"""
        expr = Expression("get", "a")
        with pytest.raises(AttributeError):
            expr.operator = "has"

    def test_cannot_set_private(self):
        """Assigning internal fields raises"""
        expr = Expression("get", "a")
        with pytest.raises(AttributeError, match="immutable"):
            expr._operator = "has"
        assert expr.operator == "get"

    def test_arguments_is_tuple(self):
        """arguments cannot be appended to"""
        assert isinstance(Expression("a", 1).arguments, tuple)


class TestValueSemantics:
    """Tests for equality, hashing and repr"""

    def test_equal_when_built_the_same(self):
        """Two identical constructions are equal"""
        assert not_(eq(get("a"), 1)) == not_(eq(get("a"), 1))

    def test_not_equal_on_argument_difference(self):
        """Different arguments are not equal"""
        assert get("a") != get("b")

    def test_bool_and_int_distinct(self):
        """True and 1 are different literals"""
        assert Expression("x", True) != Expression("x", 1)

    def test_hash_consistent(self):
        """Equal expressions hash equally, including object literals"""
        a = Expression("literal", {"k": [1, 2]})
        b = Expression("literal", {"k": [1, 2]})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_list(self):
        """An expression is not equal to its serialized form"""
        assert get("a") != ["get", "a"]

    def test_repr(self):
        """repr shows the serialized form"""
        assert repr(get("a")) == "Expression(['get', 'a'])"


class TestOperatorOverloads:
    """Tests for Python operator sugar"""

    def test_add(self):
        """expr + literal"""
        assert (zoom() + 1).serialize() == ["+", ["zoom"], 1]

    def test_radd(self):
        """literal + expr keeps the literal first"""
        assert (1 + zoom()).serialize() == ["+", 1, ["zoom"]]

    def test_sub(self):
        """expr - expr"""
        assert (get("a") - get("b")).serialize() == ["-", ["get", "a"], ["get", "b"]]

    def test_rsub(self):
        """literal - expr"""
        assert (10 - zoom()).serialize() == ["-", 10, ["zoom"]]

    def test_mul_div_mod(self):
        """*, / and % map to their operators"""
        assert (zoom() * 2).serialize() == ["*", ["zoom"], 2]
        assert (zoom() / 2).serialize() == ["/", ["zoom"], 2]
        assert (zoom() % 2).serialize() == ["%", ["zoom"], 2]
        assert (2 / zoom()).serialize() == ["/", 2, ["zoom"]]

    def test_pow(self):
        """** maps to ^"""
        assert (zoom() ** 2).serialize() == ["^", ["zoom"], 2]
        assert (2 ** zoom()).serialize() == ["^", 2, ["zoom"]]

    def test_neg(self):
        """Unary minus is one-argument subtraction"""
        assert (-get("a")).serialize() == ["-", ["get", "a"]]

    def test_invert(self):
        """~ is logical negation"""
        assert (~eq(get("a"), 1)).serialize() == ["!", ["==", ["get", "a"], 1]]

    def test_and_or(self):
        """& and | build all / any"""
        a, b = eq(get("a"), 1), eq(get("b"), 2)
        assert (a & b).serialize()[0] == "all"
        assert (a | b).serialize() == ["any", a.serialize(), b.serialize()]

    def test_equality_not_overloaded(self):
        """== compares nodes instead of building an expression"""
        assert (zoom() == zoom()) is True
