# sugarpipe
# Two small demos of syntactic sugar: extension-style string helpers and
# lazily evaluated, LINQ-like queries over in-memory sequences.

from .core.query import Query, from_
from .core.stage import stage, aggregator_stage
from .core.context import Context
from .core.errors import SugarpipeError, QueryCompositionError, UnboundQueryError
from .components import filter_, map_values
from .extensions import FIZZ_SUFFIX, StringExtensions, fizzle


__all__ = [
    # Core API
    "Query",
    "from_",
    "stage",
    "aggregator_stage",
    "Context",
    "SugarpipeError",
    "QueryCompositionError",
    "UnboundQueryError",

    # Components
    "filter_",
    "map_values",

    # String extensions
    "FIZZ_SUFFIX",
    "StringExtensions",
    "fizzle",
]

__version__ = "0.1.0"
