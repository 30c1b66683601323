# sugarpipe.core
# The lazy Query, its Stages, and the machinery that evaluates them.

from .context import Context
from .errors import QueryCompositionError, SugarpipeError, UnboundQueryError
from .query import Query, from_
from .stage import Stage, aggregator_stage, stage

__all__ = [
    "Query",
    "from_",
    "stage",
    "aggregator_stage",
    "Stage",
    "Context",
    "SugarpipeError",
    "QueryCompositionError",
    "UnboundQueryError",
]
