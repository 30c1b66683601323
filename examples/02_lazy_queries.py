"""
Lazy queries: building a query does not read its source, materializing does.
"""
from sugarpipe import filter_, from_, map_values, stage


@stage
def double(value: int) -> int:
    return value * 2


def main():
    integers = list(range(10))

    # 1. Two ways of writing the same query. Nothing is evaluated yet.
    fluent = from_(integers).filter(lambda v: v % 2 == 1).map(lambda v: v * 2)
    piped = from_(integers) | filter_(lambda v: v % 2 == 1) | double
    comprehension = from_(integers).comprehension(
        lambda values: (v * 2 for v in values if v % 2 == 1)
    )
    print("--- Before mutation ---")
    print(f"Fluent: {fluent.to_list()}")
    print(f"Piped: {piped.to_list()}")

    # 2. Mutate the source, then materialize again.
    integers.append(11)
    print("--- After appending 11 ---")
    print(f"Fluent: {fluent.to_list()}")
    print(f"Comprehension: {comprehension.to_list()}")

    # 3. An unbound query can be reused over different sources.
    odd_doubled = filter_(lambda v: v % 2 == 1) | map_values(lambda v: v * 2)
    print(f"Bound to [1, 2, 3]: {odd_doubled.bind([1, 2, 3]).to_list()}")

    # 4. collect() also hands back the context of the run.
    results, context = fluent.collect()
    print(f"Items out: {context.get('items_out')}")


if __name__ == "__main__":
    main()
