from __future__ import annotations

import time
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import Config, load_config
from .context import Context
from .errors import QueryCompositionError, UnboundQueryError
from .log import get_logger
from .runner import SerialRunner, StageMetrics, new_stage_metrics
from .stage import Stage, aggregator_stage


class Query:
    """
    A lazy sequence: a source plus the stages that derive values from it.

    Building a query never touches the source. The source is only walked
    when the query is materialized (`to_list`, `collect` or plain
    iteration), and it is walked again, in its then-current state, on every
    materialization. The query holds a reference to the source, never a copy.

    Example:
        >>> numbers = [0, 1, 2, 3]
        >>> odds_doubled = from_(numbers).filter(lambda v: v % 2 == 1).map(lambda v: v * 2)
        >>> numbers.append(5)
        >>> odds_doubled.to_list()
        [2, 6, 10]
    """

    def __init__(
        self,
        source: Optional[Iterable[Any]] = None,
        stages: Optional[List[Stage]] = None,
        *,
        name: Optional[str] = None,
    ):
        """
        Initializes a Query.

        Args:
            source (Optional[Iterable[Any]]): The data the query reads from
                when materialized. May be left out and bound later.
            stages (Optional[List[Stage]]): The stages to apply, in order.
            name (Optional[str]): A name for the query, used for logging.
                Defaults to "Query".
        """
        self.source = source
        self.stages: List[Stage] = stages or []
        self.name = name or "Query"
        self.logger = get_logger(f"sugarpipe.query.{self.name}")
        # One counter record per stage position, owned by this query.
        self._stage_metrics: List[StageMetrics] = [new_stage_metrics() for _ in self.stages]

    @property
    def is_bound(self) -> bool:
        return self.source is not None

    def _derive(self, stages: List[Stage]) -> "Query":
        return Query(self.source, stages, name=self.name)

    def bind(self, source: Iterable[Any]) -> "Query":
        """Returns a copy of this query that reads from `source`."""
        return Query(source, list(self.stages), name=self.name)

    # --- Fluent construction -------------------------------------------

    def filter(self, predicate: Callable[[Any], bool]) -> "Query":
        """Keeps only the items for which `predicate` returns True."""
        from ..components.filter import filter_
        return self | filter_(predicate)

    def map(self, func: Callable[[Any], Any]) -> "Query":
        """Replaces every item by `func(item)`."""
        from ..components.map import map_values
        return self | map_values(func)

    # LINQ-style spellings of the same operations.
    where = filter
    select = map

    def comprehension(
        self, expression: Callable[[Iterable[Any]], Iterable[Any]], *, name: str = "comprehension"
    ) -> "Query":
        """
        Appends a declarative step written as a generator expression.

        `expression` receives the upstream values and returns an iterable,
        typically ``lambda values: (v * 2 for v in values if v % 2 == 1)``.
        It is called anew on every materialization, so the query stays
        restartable even though a generator expression on its own is not.
        """
        return self | aggregator_stage(expression, name=name)

    # --- Composition ---------------------------------------------------

    def __or__(self, other: Any) -> "Query":
        """
        Composes this query with a `Stage` or an unbound `Query` using `|`.

        Returns a new Query that shares this query's source; the original
        query is left unchanged.
        """
        if isinstance(other, Stage):
            return self._derive(self.stages + [other])
        if isinstance(other, Query):
            if other.is_bound:
                raise QueryCompositionError(other)
            return self._derive(self.stages + other.stages)
        raise QueryCompositionError(other)

    def __rshift__(self, other: Union[Stage, "Query"]) -> "Query":
        return self.__or__(other)

    # --- Materialization -----------------------------------------------

    def _build_context(self, config: Optional[Config] = None) -> Context:
        return Context(config=config, query_name=self.name)

    def _stream(self, context: Context) -> Iterator[Any]:
        if not self.is_bound:
            raise UnboundQueryError(self.name)

        runner = SerialRunner()
        stream: Iterable[Any] = self.source  # type: ignore[assignment]
        for s, metrics in zip(self.stages, self._stage_metrics):
            stream = runner.run(s, context, stream, metrics)
        return iter(stream)

    def __iter__(self) -> Iterator[Any]:
        context = self._build_context()
        for item in self._stream(context):
            context.inc("items_out")
            yield item

    def collect(self, config_path: Optional[str] = None) -> Tuple[List[Any], Context]:
        """
        Materializes the query into a list.

        The source is read now, in its current state.

        Args:
            config_path (Optional[str]): Path to a YAML configuration file
                made available to stages as `context.config`.

        Returns:
            A tuple of the list of results and the `Context` of this run.
        """
        if not self.is_bound:
            raise UnboundQueryError(self.name)

        self.logger.info("materialize_started", stages=len(self.stages))
        start_time = time.perf_counter()
        context = self._build_context(load_config(config_path))
        results: List[Any] = []
        try:
            for item in self._stream(context):
                results.append(item)
            context.set("items_out", len(results))
            return results, context
        finally:
            self.logger.info(
                "materialize_finished",
                items_out=len(results),
                duration=round(time.perf_counter() - start_time, 4),
            )

    def to_list(self) -> List[Any]:
        """Materializes the query and returns only the list of results."""
        results, _ = self.collect()
        return results

    @property
    def metrics(self) -> dict[str, Any]:
        """
        Cumulative counters of every materialization of this query, per stage.

        Stages sharing a name are told apart by position: a second
        "filter" stage is reported as "filter_2".
        """
        stages: dict[str, Any] = {}
        for s, metrics in zip(self.stages, self._stage_metrics):
            key = s.name
            occurrence = 1
            while key in stages:
                occurrence += 1
                key = f"{s.name}_{occurrence}"
            stages[key] = dict(metrics)
        return {"stages": stages}

    def __repr__(self) -> str:
        stage_names = " | ".join(s.name for s in self.stages)
        return f"Query(name='{self.name}', bound={self.is_bound}, stages=[{stage_names}])"


def from_(source: Iterable[Any], *, name: Optional[str] = None) -> Query:
    """Starts a query over `source` without reading it."""
    return Query(source, name=name)
