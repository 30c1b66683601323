from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from .log import get_logger

if TYPE_CHECKING:
    from .context import Context
    from .query import Query

STAGE_TYPES = ("itemwise", "aggregator")


class Stage:
    """
    A named step of a query.

    An 'itemwise' stage is called once per upstream item and may return a
    single value, `None` (nothing), or a generator yielding several values.
    An 'aggregator' stage is called once with the whole upstream stream.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        *,
        name: Optional[str] = None,
        stage_type: str = "itemwise",
    ):
        if stage_type not in STAGE_TYPES:
            raise ValueError(f"stage_type must be one of {STAGE_TYPES}, got '{stage_type}'")

        self.func = func
        self.name = name or getattr(func, "__name__", "Stage")
        self.logger = get_logger(f"sugarpipe.stage.{self.name}")
        self.stage_type = stage_type

        try:
            parameters = inspect.signature(func).parameters
        except (ValueError, TypeError):
            # Some builtins don't expose a signature.
            parameters = {}
        self._inject_context = "context" in parameters

    def __repr__(self) -> str:
        return f"Stage(name='{self.name}', type='{self.stage_type}')"

    def __or__(self, other: Union["Stage", "Query"]) -> "Query":
        from .query import Query
        return Query(stages=[self]) | other

    def __rshift__(self, other: Union["Stage", "Query"]) -> "Query":
        return self.__or__(other)

    def _invoke(self, context: "Context", *args: Any) -> Any:
        if self._inject_context:
            # Let the stage log under its own name for the duration of the call.
            original_logger = context.logger
            context.logger = self.logger
            try:
                return self.func(context, *args)
            finally:
                context.logger = original_logger
        return self.func(*args)


def stage(
    _func: Optional[Callable[..., Any]] = None,
    *,
    name: Optional[str] = None,
    stage_type: str = "itemwise",
) -> Union[Stage, Callable[[Callable[..., Any]], Stage]]:
    """
    A decorator to create a query Stage from a function.

    Can be used bare (``@stage``) or with arguments
    (``@stage(name="double")``).

    Args:
        name (Optional[str]): A custom name for the stage. If not provided,
            the function's name is used.
        stage_type (str): 'itemwise' or 'aggregator'. Defaults to 'itemwise'.

    Returns:
        A Stage object or a decorator that returns a Stage object.
    """
    def wrapper(func: Callable[..., Any]) -> Stage:
        return Stage(func, name=name, stage_type=stage_type)

    if _func is not None:
        return wrapper(_func)
    return wrapper


def aggregator_stage(
    _func: Optional[Callable[..., Any]] = None,
    *,
    name: Optional[str] = None,
) -> Union[Stage, Callable[[Callable[..., Any]], Stage]]:
    """
    A decorator to create an aggregator stage.

    Equivalent to ``@stage(stage_type="aggregator")``. The function receives
    the entire upstream stream as a single iterable argument.
    """
    return stage(_func, name=name, stage_type="aggregator")  # type: ignore
