"""
Doubles the odd integers of a list, once with fluent chaining and once with
a comprehension, to show that both queries are evaluated lazily.

The fluent query is materialized straight away. The comprehension query is
left unevaluated while another value is appended to the source list, so its
results include the doubled new value as well.
"""
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from ..config import Config
from ..core.log import get_logger
from ..core.query import Query, from_

logger = get_logger("sugarpipe.demos.linq")


def is_odd(value: int) -> bool:
    return value % 2 == 1


def double(value: int) -> int:
    return value * 2


def double_odd_integers_fluent(ints: List[int]) -> Query:
    """Double all odd integers in a list, using fluent chaining."""
    return from_(ints, name="fluent").filter(is_odd).map(double)


def double_odd_integers_query(ints: List[int]) -> Query:
    """Double all odd integers in a list, using a comprehension."""
    return from_(ints, name="comprehension").comprehension(
        lambda values: (value * 2 for value in values if value % 2 == 1)
    )


def run(config: Optional[Config] = None) -> tuple[List[int], List[int]]:
    """
    Builds both queries over one source list and materializes them on
    either side of a mutation. Returns (fluent_results, query_results).
    """
    config = config or Config()
    integers = list(range(config.range_end))

    fluent_results = double_odd_integers_fluent(integers)
    query_results = double_odd_integers_query(integers)

    fluent_evaluated = fluent_results.to_list()

    # query_results has not been evaluated yet, so it will see this value.
    appended = config.appended
    integers.append(appended)
    logger.info("source_mutated", appended=appended, size=len(integers))

    query_evaluated = query_results.to_list()
    return fluent_evaluated, query_evaluated


def render(label: str, values: List[int]) -> str:
    lines = [f"{label}:"]
    lines.extend(f"\t {value}" for value in values)
    return "\n".join(lines)


def main(config: Optional[Config] = None, stdout: Optional[TextIO] = None) -> int:
    stdout = stdout or sys.stdout
    fluent_evaluated, query_evaluated = run(config)
    print(render("Fluent List", fluent_evaluated), file=stdout)
    print(render("Query List", query_evaluated), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
