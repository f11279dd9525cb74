# statesearch/problems/grid.py
from __future__ import annotations
from typing import FrozenSet, Iterable, List, Optional, Tuple
from ..core.problem import Problem, require_legal

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem(Problem):
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - ACTIONS(s): subset of {'Up','Down','Left','Right'} that keep you in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - test_goal(): position == goal
    - step cost: 1.0
    - value(): Manhattan distance to the goal
    """
    def __init__(self, rows: int, cols: int, position: Coord, goal: Coord,
                 walls: Optional[Iterable[Coord]] = None, step_cost: float = 0.0):
        self.rows = rows
        self.cols = cols
        self.position = position
        self.goal = goal
        self.walls: FrozenSet[Coord] = frozenset(walls or ())
        self._step_cost = step_cost

    def _inside(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols and (r, c) not in self.walls

    def actions(self) -> List[str]:
        r, c = self.position
        return [name for name, (dr, dc) in _MOVES.items() if self._inside(r + dr, c + dc)]

    def result(self, action: str) -> GridProblem:
        require_legal(self, action)
        r, c = self.position
        dr, dc = _MOVES[action]
        return GridProblem(self.rows, self.cols, (r + dr, c + dc), self.goal, self.walls, step_cost=1.0)

    def test_goal(self) -> bool:
        return self.position == self.goal

    def path_cost(self) -> float:
        return self._step_cost

    def value(self) -> float:
        r, c = self.position
        gr, gc = self.goal
        return float(abs(r - gr) + abs(c - gc))

    def describe(self) -> str:
        return f"Grid{self.rows}x{self.cols} at {self.position}"

    def fingerprint(self) -> int:
        r, c = self.position
        return r * self.cols + c

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = {(1,3), (2,3), (3,3), (3,4)}
    return GridProblem(rows=5, cols=7, position=(0,0), goal=(4,6), walls=walls)
