"""Basic Try example.

Demonstrates capturing faults, lifting functions and composing
fallible steps. No setup required.

Usage:
    python examples/basic_try.py
"""

import logging

from src.fallible import (
    bind,
    fmap,
    from_try,
    is_success,
    run_or_else,
    run_or_recover,
    success,
    traverse,
    wrap,
)


@wrap
def parse_price(text: str) -> float:
    return float(text.strip().lstrip("$"))


@wrap
def divide(a: float, b: float) -> float:
    return a / b


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # 1. Lifted functions return Success or Failure instead of raising
    for raw in ["$12.50", "twelve"]:
        result = parse_price(raw)
        status = "ok" if is_success(result) else "failed"
        print(f"parse_price({raw!r}) -> {status}: {from_try(result)!r}")

    # 2. fmap captures faults, bind hands the next step a plain value
    total = fmap(lambda price: price * 3, parse_price("$4"))
    per_person = bind(total, lambda amount: divide(amount, 0))
    print(f"\nSplit bill: {per_person}")

    # 3. Fall back to a default or recover from the fault
    quantity = run_or_else(lambda: int("many"), 1)
    print(f"Quantity: {from_try(quantity)}")

    recovered = run_or_recover(
        lambda: {"apples": 3}["pears"],
        lambda error: success(f"no stock entry for {error}"),
    )
    print(f"Stock: {from_try(recovered)}")

    # 4. Collect many results, stopping at the first failure
    prices = traverse(parse_price, ["$1", "$2.25", "$3"])
    print(f"\nPrices: {from_try(prices)}")
    broken = traverse(parse_price, ["$1", "??", "$3"])
    print(f"Broken prices: {broken}")


if __name__ == "__main__":
    main()
