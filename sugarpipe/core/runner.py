from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator

from .utils import ensure_iterable

if TYPE_CHECKING:
    from .context import Context
    from .stage import Stage

StageMetrics = Dict[str, Any]


def new_stage_metrics() -> StageMetrics:
    """Fresh counters for one stage position of one query."""
    return {"items_in": 0, "items_out": 0, "errors": 0, "time_total": 0.0}


class SerialRunner:
    """
    Executes stages one after another in the calling thread.

    `run` only wires generators together; no item is pulled from the
    upstream iterable until the caller starts iterating the result.
    """

    def run(
        self, stage: "Stage", context: "Context", iterable: Iterable[Any], metrics: StageMetrics
    ) -> Iterator[Any]:
        if stage.stage_type == "aggregator":
            return self._run_aggregator(stage, context, iterable, metrics)
        return self._run_itemwise(stage, context, iterable, metrics)

    def _run_itemwise(
        self, stage: "Stage", context: "Context", iterable: Iterable[Any], metrics: StageMetrics
    ) -> Iterator[Any]:
        stage.logger.debug("stream_started")
        total_items_in = 0
        total_items_out = 0
        stream_start_time = time.perf_counter()

        try:
            for item in iterable:
                total_items_in += 1
                metrics["items_in"] += 1
                item_start_time = time.perf_counter()

                try:
                    for res in ensure_iterable(stage._invoke(context, item)):
                        metrics["items_out"] += 1
                        total_items_out += 1
                        yield res
                except Exception as e:
                    metrics["errors"] += 1
                    stage.logger.warning(
                        "item_error",
                        item_in=total_items_in,
                        error=str(e),
                    )
                    raise
                finally:
                    metrics["time_total"] += time.perf_counter() - item_start_time
        finally:
            stage.logger.debug(
                "stream_finished",
                items_in=total_items_in,
                items_out=total_items_out,
                duration=round(time.perf_counter() - stream_start_time, 4),
            )

    def _run_aggregator(
        self, stage: "Stage", context: "Context", iterable: Iterable[Any], metrics: StageMetrics
    ) -> Iterator[Any]:
        stage.logger.debug("aggregator_started")
        start_time = time.perf_counter()
        items_in = 0
        items_out = 0

        try:
            materialized_items = list(iterable)
            items_in = len(materialized_items)
            metrics["items_in"] += items_in

            results = stage._invoke(context, materialized_items)
            # An aggregator may hand back any iterable, e.g. a map object.
            if isinstance(results, Iterable) and not isinstance(results, (str, bytes)):
                output_stream = results
            else:
                output_stream = ensure_iterable(results)

            for res in output_stream:
                metrics["items_out"] += 1
                items_out += 1
                yield res
        except Exception as e:
            metrics["errors"] += 1
            stage.logger.error("aggregator_error", error=str(e))
            raise
        finally:
            duration = time.perf_counter() - start_time
            metrics["time_total"] += duration
            stage.logger.debug(
                "aggregator_finished",
                items_in=items_in,
                items_out=items_out,
                duration=round(duration, 4),
            )
