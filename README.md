# contest_solutions

Solutions to a handful of competitive programming tasks, usable both as
command-line programs that read the judge's input format from standard input
and as plain Python functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `contest_solutions.abc355`

Four short problems:

- `solve_a(a, b)` – of the suspects 1, 2 and 3, returns the one that neither
  witness excluded, or `-1` when both witnesses name the same person.
- `solve_b(a, b)` – sorts the union of the two sequences and returns `True`
  if two elements of `a` end up next to each other.
- `solve_c(n, calls)` – marks the called numbers on an `n` × `n` bingo card
  and returns the 1-based turn on which a row, column or diagonal is first
  complete, or `-1`.
- `solve_d(intervals)` – counts the pairs of closed intervals `(left, right)`
  that intersect.

From the command line, name the problem by its letter (`a` to `d`, either
case) and feed the judge's input on standard input; the answer is printed
(`Yes`/`No` for problem B):

```
abc355 d < input.txt
```

If the input ends before all expected numbers are read, the command exits
with a usage error.

## `contest_solutions.ahc033`

A heuristic for a crane-yard puzzle on an `N` × `N` grid: containers arrive
at the left edge of each row and must leave at the right edge of row
`id // N`, in increasing order within each row.

The model:

- `Pos(x, y)` – an immutable cell; `Pos()` is the null position.
- `Crane` – position, held container, and the current `start`/`goal` path.
- `Container` – position (`x == -1` while waiting, `x == N` once dispatched)
  and the crane it is assigned to.
- `Terminal(grid)` – the yard. `grid[y]` lists the containers arriving in
  row `y`, first arrival first; it must be square and hold `0` to `N*N - 1`
  once each, otherwise `ValueError` is raised. `step(actions)` applies one
  turn, one character per crane (`L`, `R`, `U`, `D`, `P` pick, `Q` release,
  `.` wait, `B` destroy), raising `RuntimeError` on an illegal action.
  `history` holds each crane's actions so far and `calc_score()` evaluates
  the run (turns, plus penalties for out-of-order, misplaced and
  undispatched containers).

`solve(grid)` plays the whole strategy – spreading the first containers over
the yard, destroying all cranes but the first two, then dispatching along the
order chosen by `best_container_queue` – until every container is out or
10 000 turns have passed, and returns the final `Terminal`:

```python
from contest_solutions.ahc033 import solve

terminal = solve(grid)
for line in terminal.history:
    print(line)
print(terminal.calc_score())
```

The strategy needs at least two cranes, so `N` should be 2 or more.

From the command line, give `N` followed by the grid on standard input; one
line of actions per crane is printed, and the score is written to standard
error:

```
ahc033 < input.txt
```