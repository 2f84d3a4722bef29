"""Greedy harvest planning: pick the most valuable ripe plants each day."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Plant:
    """A batch of ``quantity`` seeds worth ``value`` each, ripe after ``ripens``."""

    quantity: int
    ripens: int
    value: int


def _ripening_order(plants: Sequence[Plant]) -> list[int]:
    return sorted(
        range(len(plants)),
        key=lambda index: (plants[index].ripens, plants[index].value, index),
    )


def best_single_picks(days: int, plants: Sequence[Plant]) -> int:
    """Pick at most one ripe plant per day, the most valuable first; sum the values."""
    order = iter(_ripening_order(plants))
    pending = next(order, None)
    heap: list[tuple[int, int]] = []
    total = 0
    for day in range(1, days + 1):
        while pending is not None and plants[pending].ripens < day:
            heapq.heappush(heap, (-plants[pending].value, -plants[pending].quantity))
            pending = next(order, None)
        if heap:
            total -= heapq.heappop(heap)[0]
    return total


def max_harvest(days: int, capacity: int, plants: Sequence[Plant]) -> int:
    """Harvest up to ``capacity`` seeds a day, most valuable ripe seeds first."""
    remaining = [plant.quantity for plant in plants]
    order = iter(_ripening_order(plants))
    pending = next(order, None)
    heap: list[tuple[int, int]] = []
    total = 0
    for day in range(1, days + 1):
        while pending is not None and plants[pending].ripens < day:
            heapq.heappush(heap, (-plants[pending].value, -pending))
            pending = next(order, None)
        room = capacity
        while heap and room > 0:
            index = -heap[0][1]
            taken = min(room, remaining[index])
            total += plants[index].value * taken
            remaining[index] -= taken
            room -= taken
            if remaining[index] == 0:
                heapq.heappop(heap)
    return total


def _cases(tokens: Iterator[int]) -> Iterator[tuple[int, int, list[Plant]]]:
    for _ in range(next(tokens)):
        days, count, capacity = next(tokens), next(tokens), next(tokens)
        plants = [Plant(next(tokens), next(tokens), next(tokens)) for _ in range(count)]
        yield days, capacity, plants


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print ``Case #i: total`` for each."""
    parser = argparse.ArgumentParser(description="Plan the most valuable harvest.")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file holding the test cases (default: stdin)",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="pick one whole plant per day, ignoring the capacity",
    )
    args = parser.parse_args(argv)
    with args.input as stream:
        text = stream.read()

    try:
        tokens = iter([int(token) for token in text.split()])
        results = []
        for days, capacity, plants in _cases(tokens):
            if args.single:
                results.append(best_single_picks(days, plants))
            else:
                results.append(max_harvest(days, capacity, plants))
    except (ValueError, StopIteration):
        print("error: malformed input", file=sys.stderr)
        return 1

    for number, total in enumerate(results, start=1):
        print(f"Case #{number}: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())