import pytest

from statesearch.core.problem import IllegalActionError
from statesearch.problems.checks import sanity_check_problem
from statesearch.problems.eight_puzzle import (
    DEFAULT_GOAL, EightPuzzle, InvalidPuzzleError, Move, PuzzleState, Tile, parse_row,
)


@pytest.mark.parametrize("index,up,down,left,right", [
    (0, False, True, False, True),
    (1, False, True, True, True),
    (2, False, True, True, False),
    (4, True, True, True, True),
    (6, True, False, False, True),
    (8, True, False, True, False),
])
def test_tile_geometry(index, up, down, left, right):
    t = Tile(index)
    assert (t.can_go_up(), t.can_go_down(), t.can_go_left(), t.can_go_right()) == (up, down, left, right)


@pytest.mark.parametrize("index,expected", [
    (0, [Move.Down, Move.Right]),
    (1, [Move.Down, Move.Left, Move.Right]),
    (2, [Move.Down, Move.Left]),
    (6, [Move.Up, Move.Right]),
    (8, [Move.Up, Move.Left]),
])
def test_possible_actions_order(index, expected):
    assert Tile(index).possible_actions() == expected


def test_tile_index_is_validated():
    with pytest.raises(InvalidPuzzleError):
        Tile(9)


def test_neighbor_refuses_to_leave_board():
    assert Tile(4).neighbor(Move.Up).index == 1
    with pytest.raises(IllegalActionError):
        Tile(0).neighbor(Move.Left)


@pytest.mark.parametrize("row,blank", [
    ([0, 1, 2, 3, 4, 5, 6, 7, 8], 0),
    ([1, 2, 3, 4, 0, 5, 6, 7, 8], 4),
    ([1, 2, 3, 4, 5, 6, 7, 8, 0], 8),
])
def test_blank_index(row, blank):
    assert PuzzleState(row).blank_index() == blank


def test_actions_from_default_goal():
    assert EightPuzzle.from_row(DEFAULT_GOAL).actions() == [Move.Up, Move.Left]


def test_result_returns_new_instance():
    puzzle = EightPuzzle.from_row(DEFAULT_GOAL)
    moved = puzzle.result(Move.Up)
    assert moved is not puzzle
    assert moved.state.tiles == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert puzzle.state.tiles == DEFAULT_GOAL
    assert moved.value() == 2.0


def test_result_rejects_illegal_move():
    with pytest.raises(IllegalActionError):
        EightPuzzle.from_row(DEFAULT_GOAL).result(Move.Down)


def test_goal_test():
    assert EightPuzzle.from_row(DEFAULT_GOAL).test_goal()
    assert not EightPuzzle.from_row([1, 2, 0, 3, 4, 5, 6, 7, 8]).test_goal()


def test_custom_goal():
    goal = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert EightPuzzle.from_row(goal, goal=goal).test_goal()
    assert not EightPuzzle.from_row(DEFAULT_GOAL, goal=goal).test_goal()


def test_solvability_parity():
    assert PuzzleState(DEFAULT_GOAL).is_solvable()
    assert PuzzleState([1, 2, 3, 4, 0, 5, 6, 7, 8]).is_solvable()
    assert not PuzzleState([7, 0, 2, 8, 5, 3, 6, 4, 1]).is_solvable()
    assert not PuzzleState([2, 1, 3, 4, 5, 6, 7, 8, 0]).is_solvable()


def test_misplaced_heuristic():
    assert EightPuzzle.from_row(DEFAULT_GOAL).value() == 0.0
    assert EightPuzzle.from_row([1, 2, 3, 4, 5, 6, 7, 0, 8]).value() == 2.0


def test_fingerprint_depends_on_tiles_only():
    a = EightPuzzle.from_row([1, 2, 3, 4, 0, 5, 7, 8, 6])
    b = EightPuzzle.from_row([1, 2, 3, 4, 0, 5, 7, 8, 6], goal=[0, 1, 2, 3, 4, 5, 6, 7, 8])
    c = EightPuzzle.from_row([1, 2, 3, 0, 4, 5, 7, 8, 6])
    assert a.fingerprint() == b.fingerprint()
    assert a.fingerprint() != c.fingerprint()
    assert a.result(Move.Right).result(Move.Left).fingerprint() == a.fingerprint()


@pytest.mark.parametrize("text", ["1,2,3,4,0,5,7,8,6", "1 2 3 4 0 5 7 8 6", " 1, 2,3 4 0 5 7 8 6 "])
def test_parse_row(text):
    assert parse_row(text) == (1, 2, 3, 4, 0, 5, 7, 8, 6)


@pytest.mark.parametrize("text", ["1,2,3", "1,1,2,3,4,5,6,7,8", "a,b,c,d,e,f,g,h,i", "1,2,3,4,5,6,7,8,9"])
def test_parse_row_rejects_garbage(text):
    with pytest.raises(InvalidPuzzleError):
        parse_row(text)


def test_board_rendering():
    assert EightPuzzle.from_row(DEFAULT_GOAL).board() == "1 2 3\n4 5 6\n7 8 _"


def test_puzzle_honours_problem_contract():
    assert sanity_check_problem(EightPuzzle.from_row([1, 2, 3, 4, 0, 5, 7, 8, 6]), max_states=200).startswith("OK")
