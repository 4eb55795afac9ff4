"""Solutions to the first four problems of AtCoder Beginner Contest 355."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence


def solve_a(a: int, b: int) -> int:
    """Return the suspect among 1, 2, 3 that neither witness excluded, or -1 if ambiguous."""
    if a == b:
        return -1
    return 6 - a - b


def solve_b(a: Iterable[int], b: Iterable[int]) -> bool:
    """Tell whether two elements of ``a`` are adjacent in the sorted union of ``a`` and ``b``."""
    sorted_a = sorted(a)
    merged = sorted([*sorted_a, *b])
    next_a = 0
    previous_from_a = False
    for value in merged:
        if next_a < len(sorted_a) and value == sorted_a[next_a]:
            if previous_from_a:
                return True
            next_a += 1
            previous_from_a = True
        else:
            previous_from_a = False
    return False


def solve_c(n: int, calls: Iterable[int]) -> int:
    """Return the turn (1-based) on which an ``n`` by ``n`` bingo card first wins, or -1."""
    columns = [0] * n
    rows = [0] * n
    diagonals = [0, 0]
    for turn, number in enumerate(calls, start=1):
        row, column = divmod(number - 1, n)
        columns[column] += 1
        rows[row] += 1
        bingo = columns[column] == n or rows[row] == n
        if row == column:
            diagonals[0] += 1
            bingo = bingo or diagonals[0] == n
        if row + column == n - 1:
            diagonals[1] += 1
            bingo = bingo or diagonals[1] == n
        if bingo:
            return turn
    return -1


def solve_d(intervals: Iterable[tuple[int, int]]) -> int:
    """Count the pairs of closed intervals that intersect."""
    events: list[tuple[int, int, int]] = []
    for index, (left, right) in enumerate(intervals):
        events.append((left, 1, index))
        events.append((right + 1, 0, index))
    events.sort()

    open_count = 0
    pairs = 0
    for _, is_start, _ in events:
        if is_start:
            pairs += open_count
            open_count += 1
        else:
            open_count -= 1
    return pairs


def _take(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _run(problem: str, tokens: Iterator[str]) -> str:
    if problem == "a":
        a, b = _take(tokens, 2)
        return str(solve_a(a, b))
    if problem == "b":
        n, m = _take(tokens, 2)
        a = _take(tokens, n)
        b = _take(tokens, m)
        return "Yes" if solve_b(a, b) else "No"
    if problem == "c":
        n, t = _take(tokens, 2)
        return str(solve_c(n, _take(tokens, t)))
    count = int(next(tokens))
    intervals = [tuple(_take(tokens, 2)) for _ in range(count)]
    return str(solve_d(intervals))


def main(argv: Sequence[str] | None = None) -> int:
    """Read one problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(description="Solve an ABC355 problem from standard input.")
    parser.add_argument("problem", choices=["a", "b", "c", "d"], type=str.lower)
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        answer = _run(args.problem, tokens)
    except StopIteration:
        parser.error("input ended early")
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())