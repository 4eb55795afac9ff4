"""Crane scheduling heuristic for AtCoder Heuristic Contest 033."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

MAX_TURN = 10000
MOVES = "LRUD"


@dataclass(frozen=True)
class Pos:
    """A cell of the terminal; ``Pos()`` is the null position."""

    x: int = -1
    y: int = -1

    def is_null(self) -> bool:
        return self.x == -1 and self.y == -1

    def __str__(self) -> str:
        return f"{self.x} {self.y}"


NULL_POS = Pos()


@dataclass
class Crane:
    """A crane with its position, load and current pick-up/drop-off path."""

    id: int
    pos: Pos
    holding_container_id: int = -1
    alive: bool = True
    succeed: bool = False
    start: Pos = NULL_POS
    goal: Pos = NULL_POS

    def is_holding(self) -> bool:
        return self.holding_container_id != -1

    def hold(self, container_id: int) -> None:
        self.holding_container_id = container_id

    def release(self) -> None:
        self.holding_container_id = -1

    def is_at_goal(self) -> bool:
        return self.pos == self.goal

    def is_at_start(self) -> bool:
        return self.pos == self.start

    def is_finished(self) -> bool:
        return self.goal.is_null()

    def destroy(self) -> None:
        self.alive = False

    def set_path(self, start: Pos, goal: Pos) -> None:
        self.start = start
        self.goal = goal

    def clear_path(self) -> None:
        self.start = NULL_POS
        self.goal = NULL_POS


@dataclass
class Container:
    """A container; ``pos.x`` is -1 while waiting and ``size`` once dispatched."""

    id: int
    pos: Pos
    size: int
    assigned_crane_id: int = -1

    def move_to(self, pos: Pos) -> None:
        self.pos = pos

    def is_loaded(self) -> bool:
        return self.pos.x != -1

    def is_dispatched(self) -> bool:
        return self.pos.x == self.size

    def is_assigned(self) -> bool:
        return self.assigned_crane_id != -1

    def assign_to(self, crane_id: int) -> None:
        self.assigned_crane_id = crane_id

    def unassign(self) -> None:
        self.assigned_crane_id = -1


class Terminal:
    """The container terminal: grid, queues, cranes and the actions taken so far."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        n = len(grid)
        if n == 0 or any(len(row) != n for row in grid):
            raise ValueError("the container grid must be square and non-empty")
        if sorted(value for row in grid for value in row) != list(range(n * n)):
            raise ValueError(f"the grid must hold the numbers 0 to {n * n - 1} once each")
        self.n = n
        self.turn = 0
        self.grid: list[list[int]] = [[-1] * n for _ in range(n)]
        self.dispatched: list[list[int]] = [[] for _ in range(n)]
        # Waiting containers per row, the next one to enter at the end.
        self.waiting: list[list[int]] = [list(reversed(row)) for row in grid]
        self.containers: list[Container] = [Container(0, NULL_POS, n)] * (n * n)
        for y, row in enumerate(grid):
            for container_id in row:
                self.containers[container_id] = Container(container_id, Pos(-1, y), n)
        self.cranes: list[Crane] = [Crane(i, Pos(0, i)) for i in range(n)]
        self.history: list[str] = [""] * n
        for y in range(n):
            self._load_entrance(y)

    def _load_entrance(self, y: int) -> None:
        container_id = self.waiting[y].pop()
        self.grid[y][0] = container_id
        self.containers[container_id].move_to(Pos(0, y))

    def in_field(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.n and 0 <= pos.y < self.n

    def cell(self, pos: Pos) -> int:
        return self.grid[pos.y][pos.x]

    def set_cell(self, pos: Pos, value: int) -> None:
        self.grid[pos.y][pos.x] = value

    def step(self, actions: str) -> None:
        """Apply one turn; ``actions`` holds one action character per crane."""
        if len(actions) < len(self.cranes):
            raise ValueError("one action is needed for every crane")
        self.turn += 1
        for crane in self.cranes:
            action = actions[crane.id]
            self.history[crane.id] += action
            if action == "P":
                self._pick(crane)
            elif action == "Q":
                self._release(crane)
            elif action == ".":
                continue
            elif action == "B":
                self._destroy(crane)
            else:
                self._move(crane, next_pos(crane.pos, action))

    def _move(self, crane: Crane, target: Pos) -> None:
        if not crane.alive:
            raise RuntimeError(f"crane {crane.id} has been destroyed")
        if not self.in_field(target):
            raise RuntimeError(f"crane {crane.id} cannot leave the terminal")
        row = crane.pos.y
        crane.pos = target
        if crane.is_holding():
            if crane.id != 0 and not self.is_empty(target):
                raise RuntimeError(f"crane {crane.id} cannot carry a container over another")
            self.containers[crane.holding_container_id].move_to(target)
            if self.is_empty(Pos(0, row)) and self.waiting[row]:
                self._load_entrance(row)

    def _pick(self, crane: Crane) -> None:
        if not crane.alive:
            raise RuntimeError(f"crane {crane.id} has been destroyed")
        if crane.is_holding():
            raise RuntimeError(f"crane {crane.id} already holds a container")
        if self.cell(crane.pos) == -1:
            raise RuntimeError(f"there is no container at {crane.pos}")
        crane.hold(self.cell(crane.pos))
        self.set_cell(crane.pos, -1)

    def _destroy(self, crane: Crane) -> None:
        if not crane.alive:
            raise RuntimeError(f"crane {crane.id} has been destroyed")
        if crane.is_holding():
            raise RuntimeError(f"crane {crane.id} holds a container")
        crane.destroy()

    def _release(self, crane: Crane) -> None:
        if not crane.alive:
            raise RuntimeError(f"crane {crane.id} has been destroyed")
        if not crane.is_holding():
            raise RuntimeError(f"crane {crane.id} holds no container")
        if not self.is_empty(crane.pos):
            raise RuntimeError(f"the cell {crane.pos} is occupied")
        crane.clear_path()
        self.containers[crane.holding_container_id].unassign()
        self.set_cell(crane.pos, crane.holding_container_id)
        crane.release()
        if crane.pos.x == self.n - 1:
            container_id = self.cell(crane.pos)
            self.dispatched[crane.pos.y].append(container_id)
            self.containers[container_id].move_to(Pos(self.n, crane.pos.y))
            self.set_cell(crane.pos, -1)

    def calc_score(self) -> int:
        """Score the run so far: turns, inversions, misplaced and missing containers."""
        n = self.n
        inversions = 0
        misplaced = 0
        missing = n * n
        for row, ids in enumerate(self.dispatched):
            missing -= len(ids)
            in_row = [n * row <= cid < n * (row + 1) for cid in ids]
            for j, cid in enumerate(ids):
                if not in_row[j]:
                    misplaced += 1
                    continue
                inversions += sum(
                    1 for k in range(j + 1, len(ids)) if in_row[k] and cid > ids[k]
                )
        return self.turn + inversions * 100 + misplaced * 10_000 + missing * 1_000_000

    def is_empty(self, pos: Pos) -> bool:
        return self.cell(pos) < 0

    def is_goal_settable(self, pos: Pos) -> bool:
        if pos.x == self.n - 1:
            return True
        if pos.x == 0 and self.waiting[pos.y]:
            return False
        return self.cell(pos) == -1

    def is_clear(self) -> bool:
        return all(len(ids) == self.n for ids in self.dispatched)

    def is_timeout(self) -> bool:
        return self.turn >= MAX_TURN


def is_move(action: str) -> bool:
    return action in ("L", "R", "U", "D")


def move_to_target(here: Pos, target: Pos) -> str:
    """Return the move that brings ``here`` one step closer to ``target``."""
    if here.x < target.x:
        return "R"
    if here.x > target.x:
        return "L"
    if here.y < target.y:
        return "D"
    if here.y > target.y:
        return "U"
    raise ValueError(f"already at the target {target}")


def next_pos(here: Pos, move: str) -> Pos:
    if move == "L":
        return Pos(here.x - 1, here.y)
    if move == "R":
        return Pos(here.x + 1, here.y)
    if move == "U":
        return Pos(here.x, here.y - 1)
    if move == "D":
        return Pos(here.x, here.y + 1)
    raise ValueError(f"unknown move {move!r}")


def avoid_action(
    terminal: Terminal, here: Pos, obstacles: Iterable[Pos], undesirable_move: str
) -> str:
    """Pick a move away from ``obstacles``, trying ``undesirable_move`` last; 'B' if none."""
    blocked = set(obstacles)
    moves = [m for m in MOVES if m != undesirable_move] + [undesirable_move]
    for action in moves:
        target = next_pos(here, action)
        if terminal.in_field(target) and target not in blocked:
            return action
    return "B"


def dist(a: Pos, b: Pos) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def next_action(crane: Crane) -> str:
    """The action that advances ``crane`` along its path, or '.' if it has none."""
    if not crane.alive or crane.is_finished():
        return "."
    if crane.is_holding():
        return "Q" if crane.is_at_goal() else move_to_target(crane.pos, crane.goal)
    return "P" if crane.is_at_start() else move_to_target(crane.pos, crane.start)


def _dispatched_in_row(state: int, row: int, n: int) -> int:
    return (state // (n + 1) ** row) % (n + 1)


def _is_full(state: int, terminal: Terminal) -> bool:
    n = terminal.n
    for y in range(n):
        count = _dispatched_in_row(state, y, n)
        for container_id in range(n * y, n * y + count):
            if terminal.containers[container_id].pos.x != 0:
                return False
    return True


def best_container_queue(terminal: Terminal) -> list[int]:
    """Order containers for dispatch; the first to take is at the end of the list."""
    n = terminal.n
    num_states = (n + 1) ** n
    dp = [[math.inf] * n for _ in range(num_states)]
    prev = [[(0, 0, 0)] * n for _ in range(num_states)]
    dp[0][terminal.cranes[0].pos.y] = 0
    for state in range(num_states):
        full = _is_full(state, terminal)
        for crane_y in range(n):
            here = dp[state][crane_y]
            if here == math.inf:
                continue
            for next_y in range(n):
                count = _dispatched_in_row(state, next_y, n)
                if count == n:
                    continue
                container_id = n * next_y + count
                container = terminal.containers[container_id]
                if full and not container.is_loaded():
                    continue
                next_state = state + (n + 1) ** next_y
                cost = here + abs(crane_y - container.pos.y)
                if cost < dp[next_state][next_y]:
                    dp[next_state][next_y] = cost
                    prev[next_state][next_y] = (state, crane_y, container_id)

    queue: list[int] = []
    state = num_states - 1
    crane_y = terminal.cranes[0].pos.y
    while state > 0:
        state, crane_y, container_id = prev[state][crane_y]
        queue.append(container_id)
    return queue


def _is_next(terminal: Terminal, container_id: int) -> bool:
    n = terminal.n
    return len(terminal.dispatched[container_id // n]) == container_id % n


def _exit_of(terminal: Terminal, container_id: int) -> Pos:
    return Pos(terminal.n - 1, container_id // terminal.n)


def _approaching_actions(here: Pos, target: Pos) -> str:
    actions = ""
    if here.x < target.x:
        actions += "R"
    if here.x > target.x:
        actions += "L"
    if here.y < target.y:
        actions += "D"
    if here.y > target.y:
        actions += "U"
    return actions


def set_next_target(crane: Crane, terminal: Terminal, queue: list[int]) -> None:
    """Give an idle crane its next path, consuming ``queue`` for crane 0."""
    n = terminal.n
    empty_positions = [
        Pos(gx, gy)
        for gx in range(n - 1)
        for gy in range(n)
        if terminal.is_goal_settable(Pos(gx, gy))
    ]

    if crane.id == 0:
        while queue and terminal.containers[queue[-1]].is_dispatched():
            queue.pop()
        if not queue:
            return
        next_id = queue[-1]
        next_container = terminal.containers[next_id]
        if not next_container.is_loaded():
            # Clear the entrance of the row the wanted container waits in.
            start = Pos(0, next_container.pos.y)
            blocking_id = terminal.cell(start)
            if blocking_id != -1 and not terminal.containers[blocking_id].is_assigned():
                goal = min(
                    empty_positions,
                    key=lambda p: dist(p, start) * n - abs(p.x),
                )
                crane.set_path(start, goal)
        elif not next_container.is_assigned():
            queue.pop()
            crane.set_path(next_container.pos, Pos(n - 1, next_id // n))
    elif len(empty_positions) >= 2:
        candidates: list[tuple[Pos, Pos]] = []
        for container in terminal.containers:
            if (
                not container.is_loaded()
                or container.is_dispatched()
                or container.is_assigned()
            ):
                continue
            exit_pos = _exit_of(terminal, container.id)
            for move in _approaching_actions(container.pos, exit_pos):
                target = next_pos(container.pos, move)
                if target.x == n - 1 and not _is_next(terminal, container.id):
                    continue
                if terminal.is_goal_settable(target):
                    candidates.append((container.pos, target))
        if candidates:
            start, goal = min(candidates, key=lambda c: dist(c[0], crane.pos))
            crane.set_path(start, goal)

    if not crane.is_finished():
        terminal.containers[terminal.cell(crane.start)].assign_to(crane.id)
        terminal.set_cell(crane.goal, -2)


def succeed(crane: Crane, terminal: Terminal) -> None:
    """Push the goal of a crane at its goal one step further toward the exit."""
    exit_pos = _exit_of(terminal, crane.holding_container_id)
    for action in _approaching_actions(crane.pos, exit_pos):
        target = next_pos(crane.pos, action)
        if target.x == terminal.n - 1 and not _is_next(terminal, crane.holding_container_id):
            continue
        if terminal.in_field(target) and terminal.is_goal_settable(target):
            terminal.set_cell(crane.goal, -1)
            crane.goal = target
            terminal.set_cell(crane.goal, -2)


def _avoid_collision(terminal: Terminal, actions: list[str]) -> None:
    crane0, crane1 = terminal.cranes[0], terminal.cranes[1]
    action0, action1 = actions[0], actions[1]
    if is_move(action1):
        next1 = next_pos(crane1.pos, action1)
        if next1 == crane0.pos:
            actions[0] = avoid_action(terminal, crane0.pos, [crane1.pos], action1)
        if is_move(action0) and next_pos(crane0.pos, action0) == next1:
            actions[0] = "."
    elif is_move(action0) and next_pos(crane0.pos, action0) == crane1.pos:
        if actions[1] == ".":
            actions[1] = avoid_action(terminal, crane1.pos, [crane0.pos], action0)
        else:
            actions[0] = "."


def solve(grid: Sequence[Sequence[int]]) -> Terminal:
    """Run the whole strategy on ``grid`` and return the final terminal."""
    terminal = Terminal(grid)
    n = terminal.n

    # Spread the first containers over the terminal, one column at a time.
    for i in range(n - 2):
        for crane in terminal.cranes:
            if crane.is_finished():
                crane.set_path(Pos(0, crane.pos.y), Pos(n - i - 2, crane.pos.y))
        while not terminal.cranes[0].is_finished():
            terminal.step("".join(next_action(c) for c in terminal.cranes))

    terminal.step("".join("." if i < 2 else "B" for i in range(n)))

    terminal.cranes[1].succeed = True
    queue = best_container_queue(terminal)

    while not terminal.is_clear() and not terminal.is_timeout():
        for crane in terminal.cranes:
            if not crane.alive:
                continue
            if crane.is_finished():
                set_next_target(crane, terminal, queue)
            elif crane.is_holding() and crane.is_at_goal() and crane.succeed:
                succeed(crane, terminal)
        actions = [next_action(c) for c in terminal.cranes]
        _avoid_collision(terminal, actions)
        terminal.step("".join(actions))
    return terminal


def main(argv: Sequence[str] | None = None) -> int:
    """Read the grid from standard input and print each crane's actions."""
    parser = argparse.ArgumentParser(description="Plan crane actions for a container terminal.")
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("no input")
    n = int(tokens[0])
    values = [int(t) for t in tokens[1 : 1 + n * n]]
    if len(values) != n * n:
        parser.error("input ended early")
    grid = [values[row * n : (row + 1) * n] for row in range(n)]
    try:
        terminal = solve(grid)
    except ValueError as error:
        parser.error(str(error))
    for line in terminal.history:
        print(line)
    print(f"Score = {terminal.calc_score()}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())