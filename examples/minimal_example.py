"""
Minimal example of the free-function API.

This example shows:
1. In-place map / filter returning the same list
2. Left fold with and without an initial value
3. Emit-then-test range generation
4. Joining, including the single-element legacy mode
"""

import logging
import operator

import functionalpp as fp

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def example_transform() -> None:
    print("\n--- map / filter ---")
    values = [0, 1, 2, 3, 4]
    fp.map(values, lambda x: x * x)
    print("squared:", values)
    fp.filter(values, lambda x: x % 2 == 0)
    print("even values removed:", values)


def example_reduce() -> None:
    print("\n--- reduce ---")
    print("sum:", fp.reduce([0, 1, 2, 3, 4], operator.add))
    print("sum from 10:", fp.reduce([0, 1, 2, 3, 4], operator.add, 10))
    print("concat:", fp.reduce(["0", "1", "2"], operator.add))


def example_range() -> None:
    print("\n--- range ---")
    print(fp.range([], 0, 4))
    print(fp.range([], 0, 4, 2))
    print("start > stop still emits once:", fp.range([], 5, 1))
    print(fp.range([], "a", "f"))


def example_join() -> None:
    print("\n--- join ---")
    print(fp.join(["a", "b", "c"], "-"))
    print(repr(fp.join(["a"], "-")))
    print(repr(fp.join(["a"], "-", config=fp.FunctionalConfig(legacy_join=True))))


def main() -> None:
    print("=" * 60)
    print("functionalpp - Minimal Example")
    print("=" * 60)

    example_transform()
    example_reduce()
    example_range()
    example_join()

    print("\n" + "=" * 60)
    print("All examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
