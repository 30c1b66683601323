# sugarpipe.components
# Reusable stages for building queries.

from .filter import filter_
from .map import map_values

__all__ = [
    "filter_",
    "map_values",
]
