import itertools
import logging
import random

import pytest

import permutations
from cube_state import SOLVED_CUBE, extract
from moves import Move, simulate_orientations, simulate_positions
from solver import (
    popcount, solve, solve_orientation, solve_positions, swap_moves, twist_moves,
)

PAIRS = [(i, j) for i in range(8) for j in range(8) if i != j]

SWAP_LENGTHS = {1: 11, 2: 13, 3: 13}
TWIST_LENGTHS = {1: 12, 2: 14, 3: 14}


@pytest.mark.parametrize("i,j", PAIRS)
def test_swap_macro_exchanges_exactly_two_corners(i, j):
    macro = swap_moves(i, j)
    assert len(macro) == SWAP_LENGTHS[popcount(i ^ j)]
    p = simulate_positions(permutations.IDENTITY, macro)
    for k in range(8):
        if k == i:
            assert p[k] == j
        elif k == j:
            assert p[k] == i
        else:
            assert p[k] == k


@pytest.mark.parametrize("i,j", PAIRS)
def test_twist_macro_twists_exactly_two_corners(i, j):
    macro = twist_moves(i, j)
    assert len(macro) == TWIST_LENGTHS[popcount(i ^ j)]
    o = simulate_orientations([0] * 8, macro)
    p = simulate_positions(permutations.IDENTITY, macro)
    expected = [0] * 8
    expected[i] = 1
    expected[j] = 2
    assert o == expected
    assert p == list(permutations.IDENTITY)


@pytest.mark.parametrize("i,j", PAIRS)
def test_twist_macro_on_full_cube(i, j):
    cube = SOLVED_CUBE.apply_sequence(twist_moves(i, j))
    positions, orientations = extract(cube)
    assert positions == list(range(8))
    assert orientations[i] == 1
    assert orientations[j] == 2
    assert sum(orientations) == 3


def test_no_macro_for_a_corner_and_itself():
    with pytest.raises(AssertionError):
        swap_moves(3, 3)
    with pytest.raises(AssertionError):
        twist_moves(5, 5)


@pytest.mark.parametrize("p", [
    [0, 1, 2, 3, 4, 5, 6, 7],
    [0, 1, 2, 4, 3, 5, 6, 7],
    [0, 7, 2, 4, 3, 5, 6, 1],
    [6, 7, 5, 2, 3, 4, 0, 1],
])
def test_solve_positions_round_trip(p):
    assert simulate_positions(p, solve_positions(p)) == list(permutations.IDENTITY)


def test_solve_positions_round_trip_over_sampled_permutations():
    for p in itertools.islice(itertools.permutations(range(8)), 0, 40320, 211):
        macro = solve_positions(p)
        assert simulate_positions(p, macro) == list(permutations.IDENTITY)


def test_identity_needs_no_moves():
    assert solve_positions(permutations.IDENTITY) == []
    assert solve_orientation([0] * 8) == []
    assert solve(SOLVED_CUBE) == []


def test_single_opposite_swap_takes_thirteen_moves():
    p = [0, 1, 2, 4, 3, 5, 6, 7]
    macro = solve_positions(p)
    assert len(macro) == 13
    assert simulate_positions(p, macro) == [0, 1, 2, 3, 4, 5, 6, 7]


def test_three_cycle_across_swap_classes():
    p = [6, 7, 5, 2, 3, 4, 0, 1]
    macro = solve_positions(p)
    assert simulate_positions(p, macro) == list(permutations.IDENTITY)
    assert len(macro) <= 7 * 13


@pytest.mark.parametrize("o", [
    [0, 1, 2, 0, 1, 2, 0, 0],
    [1, 1, 1, 2, 2, 2, 1, 2],
    [1, 1, 1, 0, 2, 2, 0, 2],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [2, 0, 0, 0, 0, 0, 0, 1],
    [2, 0, 0, 1, 1, 1, 0, 1],
    [2, 2, 2, 2, 2, 2, 2, 1],
])
def test_solve_orientation_round_trip(o):
    macro = solve_orientation(o)
    assert simulate_orientations(o, macro) == [0] * 8
    assert simulate_positions(permutations.IDENTITY, macro) == list(permutations.IDENTITY)


def test_solve_orientation_over_all_reachable_twists():
    for head in itertools.product(range(3), repeat=7):
        o = [(-sum(head)) % 3] + list(head)
        assert simulate_orientations(o, solve_orientation(o)) == [0] * 8


def test_solve_scrambled_cubes(scrambled_cubes):
    for cube in scrambled_cubes:
        solution = solve(cube)
        assert cube.apply_sequence(solution).is_solved()
        assert len(solution) <= 7 * 13 + 7 * 14


def test_solve_many_random_scrambles():
    rng = random.Random(99)
    for _ in range(200):
        scramble = [Move.from_index(rng.randrange(18)) for _ in range(rng.randrange(1, 25))]
        cube = SOLVED_CUBE.apply_sequence(scramble)
        assert cube.apply_sequence(solve(cube)).is_solved()


def test_solve_leaves_input_untouched():
    cube = SOLVED_CUBE.apply_sequence([Move.R1, Move.U1, Move.F3])
    snapshot = cube.transforms
    solve(cube)
    assert cube.transforms == snapshot


def test_solve_logs_solution_notation(caplog):
    cube = SOLVED_CUBE.apply_move(Move.R1)
    with caplog.at_level(logging.DEBUG, logger="solver"):
        solution = solve(cube)
    expected = "solution: " + " ".join(m.notation for m in solution)
    assert expected in caplog.messages
