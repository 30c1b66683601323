"""
The `map_values` component applies a 1-to-1 transformation to each item
of a query.
"""
from __future__ import annotations

from typing import Any, Callable, Generator

from ..core.stage import Stage, stage


def map_values(func: Callable[[Any], Any], *, name: str | None = None) -> Stage:
    """
    Creates a stage that applies a function to each item in the stream.

    Args:
        func: The function to apply to each item.
        name: An optional name for the stage. Defaults to the function's name,
            or "map" for lambdas.

    Returns:
        A Stage configured to perform the mapping operation.
    """
    if name is None:
        name = getattr(func, "__name__", "map")
        if name == "<lambda>":
            name = "map"

    @stage(name=name)
    def _map_func(item: Any) -> Generator[Any, None, None]:
        # Yield so that a `None` result is kept rather than dropped.
        yield func(item)

    return _map_func
