"""Build a fill-color and circle-radius style for a population layer and print it as JSON."""

import json

from stylexpr import (
    coalesce,
    division,
    eq,
    get,
    geometry_type,
    interpolate,
    let,
    linear,
    exponential,
    match,
    not_,
    rgb,
    rgba,
    step,
    to_number,
    var,
    zoom,
)

print("===== POPULATION STYLE =====\n")

# Fill color: density ramp, computed once with let/var
fill_color = let(
    "density",
    division(to_number(get("population"), 0), coalesce(get("area"), 1)),
    interpolate(
        linear(),
        var("density"),
        0, rgba(255, 255, 204, 0.6),
        500, rgb(253, 141, 60),
        5000, rgb(189, 0, 38),
    ),
)

# Circle radius: grows with zoom, stepped by capital status
radius = interpolate(
    exponential(1.5),
    zoom(),
    5, step(get("rank"), 2, 3, 4, 10, 6),
    12, match(get("capital"), ["yes", "true"], 14, 8),
)

# Filter: everything that is not a point
layer_filter = not_(eq(geometry_type(), "Point"))

style = {
    "fill-color": fill_color.serialize(),
    "circle-radius": radius.serialize(),
    "filter": layer_filter.serialize(),
}
print(json.dumps(style, indent=2))
