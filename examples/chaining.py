from __future__ import annotations

from functionalpp import Chain, FunctionalConfig, chain, is_container


def dedupe(sequence):
    """Remove repeated values, keeping first occurrences."""
    seen = set()
    result = [item for item in sequence if not (item in seen or seen.add(item))]
    sequence[:] = result
    return sequence


def main() -> None:
    Chain.register_op("dedupe", dedupe)

    config = FunctionalConfig.from_env()
    report = (
        chain([], config)
        .range(1, 20)
        .map(lambda n: n % 7)
        .dedupe()
        .filter(lambda n: n == 0)
        .join(" -> ")
    )
    print(report)

    for tp in (list, tuple, str, dict, int):
        print(f"is_container({tp.__name__}) = {is_container(tp)}")


if __name__ == "__main__":
    main()
