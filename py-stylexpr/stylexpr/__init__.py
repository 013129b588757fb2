# stylexpr: typed construction of style expressions for rendered vector data.

# Import the expression system early
from .expr import *  # noqa: F401,F403
from .expr import __all__ as _expr_all
from .colors import color_to_rgba_string

__version__ = "0.1.0"

__all__ = list(_expr_all) + ["color_to_rgba_string"]
