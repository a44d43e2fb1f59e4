"""
gunderscore: a small functional programming toolbelt.

Collection functions work on sequences and mappings alike, and are joined by
currying, memoization and pipelines.

Usage:
    import gunderscore as g_

    g_.map([1, 2, 3], lambda x: x * x)                  # [1, 4, 9]
    g_.reduce([1, 2, 3, 4], lambda a, b: a + b)         # 10
    g_.where(people, dict(age=30))
    g_.curry(lambda a, b, c: a + b + c)(1)(2, 3)        # 6

Notice that several names (map, filter, all, any, zip, max, min) shadow
built-ins, so prefer importing the module over star imports.
"""

from .exceptions import GunderscoreError, InvalidArgument
from .defaults import configure, scoped
from .predicates import (
    Kind, kind_of, is_existential, is_truthy, is_function, is_number,
    is_string, is_indexed, is_associative, is_array,
)
from .collection import (
    each, map, filter, not_, reject, find, where, select, all, any, reduce,
    zip, max, min,
)
from .functions import identity, pipeline, curry, memoize
from .objects import keys, vals, clone, mixin, to_array
from .decorators import functions
from . import curried

pluck = select
values = vals

__version__ = "0.1.0"
__all__ = sorted(functions) + [
    "Kind",
    "GunderscoreError",
    "InvalidArgument",
    "configure",
    "scoped",
    "curried",
]
