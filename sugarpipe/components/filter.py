from __future__ import annotations

from typing import Any, Callable, Generator

from ..core.stage import Stage, stage


def filter_(predicate: Callable[[Any], bool], *, name: str | None = None) -> Stage:
    """
    Creates a stage that passes on only the items `predicate` accepts.

    Items are kept in their upstream order. The predicate's result is
    tested for truthiness, so `filter_(bool)` drops falsy items.

    Args:
        predicate: Called once per item on every materialization.
        name: A name for the stage. Defaults to "filter".

    Returns:
        An itemwise Stage yielding zero or one item per input.
    """
    @stage(name=name or "filter")
    def _keep_matching(item: Any) -> Generator[Any, None, None]:
        if predicate(item):
            yield item

    return _keep_matching
