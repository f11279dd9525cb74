# statesearch/problems/eight_puzzle.py
# The 3x3 sliding-tile puzzle as a search problem. Moves are named after the direction the *blank* travels.
from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from ..core.problem import IllegalActionError, Problem, require_legal

Row = Tuple[int, ...]

SIDE = 3
MIN_INDEX, MAX_INDEX = 0, SIDE * SIDE - 1
DEFAULT_GOAL: Row = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class InvalidPuzzleError(ValueError):
    pass


class Move(Enum):
    Up = -SIDE
    Down = SIDE
    Left = -1
    Right = 1

    @property
    def delta(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name


class Tile:
    """A board position 0..8, and which ways the blank may leave it."""
    def __init__(self, index: int):
        if not MIN_INDEX <= index <= MAX_INDEX:
            raise InvalidPuzzleError(f"tile index {index} outside {MIN_INDEX}..{MAX_INDEX}")
        self.index = index

    def can_go_up(self) -> bool: return self.index >= SIDE
    def can_go_down(self) -> bool: return self.index < SIDE * (SIDE - 1)
    def can_go_left(self) -> bool: return self.index % SIDE != 0
    def can_go_right(self) -> bool: return self.index % SIDE != SIDE - 1

    def check_action(self, move: Move) -> bool:
        return {
            Move.Up: self.can_go_up,
            Move.Down: self.can_go_down,
            Move.Left: self.can_go_left,
            Move.Right: self.can_go_right,
        }[move]()

    def possible_actions(self) -> List[Move]:
        # order matters: Up, Down, Left, Right
        return [m for m in Move if self.check_action(m)]

    def neighbor(self, move: Move) -> Tile:
        if not self.check_action(move):
            raise IllegalActionError(f"blank at {self.index} cannot move {move}")
        return Tile(self.index + move.delta)


class PuzzleState:
    __slots__ = ("tiles",)

    def __init__(self, tiles: Iterable[int]):
        tiles = tuple(int(t) for t in tiles)
        if sorted(tiles) != list(range(SIDE * SIDE)):
            raise InvalidPuzzleError(f"expected a permutation of 0..{MAX_INDEX}, got {list(tiles)}")
        self.tiles: Row = tiles

    @classmethod
    def _trusted(cls, tiles: Row) -> PuzzleState:
        # skips validation; only for tiles derived from an already valid state
        state = cls.__new__(cls)
        state.tiles = tiles
        return state

    def blank_index(self) -> int:
        return self.tiles.index(0)

    def possible_actions(self) -> List[Move]:
        return Tile(self.blank_index()).possible_actions()

    def next_state(self, move: Move) -> PuzzleState:
        blank = Tile(self.blank_index())
        other = blank.neighbor(move)
        tiles = list(self.tiles)
        tiles[blank.index], tiles[other.index] = tiles[other.index], tiles[blank.index]
        return PuzzleState._trusted(tuple(tiles))

    def inversions(self) -> int:
        t = [x for x in self.tiles if x != 0]
        return sum(1 for i in range(len(t)) for j in range(i + 1, len(t)) if t[i] > t[j])

    def is_solvable(self, goal: Sequence[int] = DEFAULT_GOAL) -> bool:
        """On an odd-width board a slide never changes inversion parity, so the parities must match."""
        return self.inversions() % 2 == PuzzleState(goal).inversions() % 2

    def misplaced(self, goal: Sequence[int]) -> int:
        return sum(1 for s, g in zip(self.tiles, goal) if s != g)

    def __eq__(self, other) -> bool:
        return isinstance(other, PuzzleState) and self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __repr__(self) -> str:
        return f"PuzzleState({list(self.tiles)})"


class EightPuzzle(Problem):
    """
    - State: PuzzleState (row-major tiles, 0 = blank)
    - ACTIONS: blank moves that stay on the board, in order Up, Down, Left, Right
    - RESULT: swap blank with the neighbour; IllegalActionError otherwise
    - step cost: 1
    - value(): misplaced squares (blank included), unused by the engine
    """
    def __init__(self, state: PuzzleState, goal: Sequence[int] = DEFAULT_GOAL):
        self.state = state
        self.goal: Row = tuple(goal)
        self._fp = _encode(state.tiles)

    @classmethod
    def from_row(cls, row: Iterable[int], goal: Sequence[int] = DEFAULT_GOAL) -> EightPuzzle:
        return cls(PuzzleState(row), PuzzleState(goal).tiles)

    def actions(self) -> List[Move]:
        return self.state.possible_actions()

    def result(self, action: Move) -> EightPuzzle:
        require_legal(self, action)
        return EightPuzzle(self.state.next_state(action), self.goal)

    def test_goal(self) -> bool:
        return self.state.tiles == self.goal

    def path_cost(self) -> float:
        return 1.0

    def value(self) -> float:
        return float(self.state.misplaced(self.goal))

    def describe(self) -> str:
        return f"EightPuzzle({list(self.state.tiles)})"

    def board(self) -> str:
        t = ["_" if x == 0 else str(x) for x in self.state.tiles]
        return "\n".join(" ".join(t[r * SIDE:(r + 1) * SIDE]) for r in range(SIDE))

    def fingerprint(self) -> int:
        return self._fp


def _encode(tiles: Row) -> int:
    # base-9 number: exact, so no collisions at all
    code = 0
    for t in tiles:
        code = code * (SIDE * SIDE) + t
    return code


def parse_row(text: str) -> Row:
    """'1,2,3,4,0,5,7,8,6' or '1 2 3 4 0 5 7 8 6' -> validated tuple."""
    parts = text.replace(",", " ").split()
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise InvalidPuzzleError(f"not a list of integers: {text!r}") from None
    return PuzzleState(values).tiles
