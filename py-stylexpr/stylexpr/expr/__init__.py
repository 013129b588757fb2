"""
Expression system for stylexpr: typed constructors for style expressions.

Every constructor returns an Expression node; nodes nest to form a tree and
serialize() turns the tree into the nested-array form consumed by the
style evaluator.

Core Classes:
  - Expression: Operator name plus ordered arguments (literals or Expressions)

Constructor families:
  - color: rgb, rgba, to_rgba, color
  - decision: eq, neq, gt, lt, gte, lte, all_, any_, not_, switch_case, match, coalesce
  - feature_data: properties, geometry_type, id_, get, has, length
  - heatmap: heatmap_density
  - lookup: at
  - math_ops: ln2, pi, e, sum_, product, subtract, division, mod, pow_, sqrt, ...
  - strings: upcase, downcase, concat
  - types: literal, array, type_of, string, number, boolean, object_, to_*
  - variables: let, var
  - camera: zoom
  - ramps: step, interpolate, linear, exponential, cubic_bezier

Example:
  >>> expr = not_(eq(get("type"), "Point"))
  >>> expr.serialize()
  ['!', ['==', ['get', 'type'], 'Point']]
"""

# Re-export base expression class
from .base import Expression

# Re-export constructor families
from .camera import zoom
from .color import color, rgb, rgba, to_rgba
from .decision import (
    all_,
    any_,
    coalesce,
    eq,
    gt,
    gte,
    lt,
    lte,
    match,
    neq,
    not_,
    switch_case,
)
from .feature_data import geometry_type, get, has, id_, length, properties
from .heatmap import heatmap_density
from .lookup import at
from .math_ops import (
    acos,
    asin,
    atan,
    cos,
    division,
    e,
    ln,
    ln2,
    log2,
    log10,
    max_,
    min_,
    mod,
    pi,
    pow_,
    product,
    sin,
    sqrt,
    subtract,
    sum_,
    tan,
)
from .ramps import cubic_bezier, exponential, interpolate, linear, step
from .strings import concat, downcase, upcase
from .types import (
    array,
    boolean,
    literal,
    number,
    object_,
    string,
    to_boolean,
    to_color,
    to_number,
    to_string,
    type_of,
)
from .variables import let, var

__all__ = [
    "Expression",
    # Color
    "rgb",
    "rgba",
    "to_rgba",
    "color",
    # Decision
    "eq",
    "neq",
    "gt",
    "lt",
    "gte",
    "lte",
    "all_",
    "any_",
    "not_",
    "switch_case",
    "match",
    "coalesce",
    # Feature data
    "properties",
    "geometry_type",
    "id_",
    "get",
    "has",
    "length",
    # Heatmap
    "heatmap_density",
    # Lookup
    "at",
    # Math
    "ln2",
    "pi",
    "e",
    "sum_",
    "product",
    "subtract",
    "division",
    "mod",
    "pow_",
    "sqrt",
    "log10",
    "ln",
    "log2",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "min_",
    "max_",
    # String
    "upcase",
    "downcase",
    "concat",
    # Types
    "literal",
    "array",
    "type_of",
    "string",
    "number",
    "boolean",
    "object_",
    "to_string",
    "to_number",
    "to_boolean",
    "to_color",
    # Variable binding
    "let",
    "var",
    # Zoom
    "zoom",
    # Ramps, scales, curves
    "step",
    "interpolate",
    "linear",
    "exponential",
    "cubic_bezier",
]
