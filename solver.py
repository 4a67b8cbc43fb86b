"""
Solver - corner placement by conjugated swap macros, then corner twist by
conjugated twist macros
"""

import logging
from typing import List, Sequence

import permutations
from cube_state import Cube
from moves import Macro, Move, concatenate, simulate_orientations

logger = logging.getLogger(__name__)


def popcount(x: int) -> int:
    return bin(x).count("1")


def _turn(c: int, f: int) -> int:
    """Turn amount index for c quarter turns, reversed when f is odd"""
    return (2 + f + (c << f)) % 3


# Position macros
#
# Each one swaps the corners in slots i and j and leaves every other slot
# holding the same corner. They are written for one reference pair and
# carried to (i, j) by reflecting the axes that map the reference pair onto
# it; an odd number of reflections turns clockwise moves into
# counter-clockwise ones.

def swap_opposite_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 3
    f = popcount(i) & 1

    def m(p, d, c):
        return Move.from_index(6 * d + 3 * ((p >> d) & 1) + _turn(c, f))

    return [
        m(i, 0, 2), m(j, 2, 3), m(j, 0, 3), m(i, 1, 3),
        m(j, 0, 1), m(i, 1, 1), m(j, 2, 1), m(j, 0, 3),
        m(i, 1, 3), m(j, 0, 1), m(i, 1, 1), m(j, 2, 3),
        m(i, 0, 2),
    ]


def swap_edge_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 1
    shared = i & ~(i ^ j)
    f = popcount(shared) & 1

    def d(k):
        return (k + ((i ^ j) >> 1)) % 3

    def flip(k):
        return (shared >> d(k)) & 1

    def m(k, s, c):
        return Move.from_index(6 * d(k) + 3 * (s ^ flip(k)) + _turn(c, f))

    return [
        m(2, 0, 3), m(0, 1, 3), m(1, 1, 3),
        m(0, 1, 1), m(1, 1, 1), m(2, 0, 1), m(0, 1, 3),
        m(1, 1, 3), m(0, 1, 1), m(1, 1, 1), m(2, 0, 3),
    ]


def swap_diag_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 2
    f = popcount(i) & 1

    def d(k):
        return (((i ^ j ^ 7) >> 1) + 1 + k) % 3

    def flip(k):
        return (i >> d(k)) & 1

    def m(k, s, c):
        return Move.from_index(6 * d(k) + 3 * (s ^ flip(k)) + _turn(c, f))

    return [
        m(0, 1, 3), m(2, 0, 3), m(0, 1, 3), m(1, 1, 3),
        m(0, 1, 1), m(1, 1, 1), m(2, 0, 1), m(0, 1, 3),
        m(1, 1, 3), m(0, 1, 1), m(1, 1, 1), m(2, 0, 3),
        m(0, 1, 1),
    ]


SWAP_MACROS = {
    1: swap_edge_moves,
    2: swap_diag_moves,
    3: swap_opposite_moves,
}


def swap_moves(i: int, j: int) -> Macro:
    """Macro exchanging the corners in slots i and j"""
    distance = popcount(i ^ j)
    assert distance in SWAP_MACROS, f"no swap macro for slots {i} and {j}"
    return SWAP_MACROS[distance](i, j)


def solve_positions(permutation: Sequence[int]) -> Macro:
    """
    Moves that take a position vector equal to permutation to the identity.

    Corner twists are disturbed along the way.
    """
    macro: Macro = []
    for i, j in permutations.transpositions(permutations.inverse(permutation)):
        macro.extend(swap_moves(i, j))
    return macro


# Orientation macros
#
# Each one twists the corner in slot i by +1 and the one in slot j by +2,
# without moving any corner.

def twist_edge_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 1
    d0 = (i ^ j) >> 1
    f = popcount(i) & 1

    def d(k):
        return (d0 + 1 + k) % 3

    def s(k):
        return (i >> d(k)) & 1

    def m(k, c):
        return Move.from_index(6 * d(k ^ f) + 3 * s(k ^ f) + c - 1)

    return [
        m(0, 1), m(1, 3), m(0, 1), m(1, 3), m(0, 1), m(1, 3),
        m(0, 3), m(1, 1), m(0, 3), m(1, 1), m(0, 3), m(1, 1),
    ]


def twist_diag_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 2
    d0 = (i ^ j ^ 7) >> 1
    f = popcount(i) & 1
    reference = j if f == 1 else i

    def d(k):
        return (k + d0) % 3

    def fs(k):
        return (reference >> d(k)) & 1

    def m(k, s, c):
        return Move.from_index(6 * d(k) + 3 * (s ^ fs(k)) + _turn(c, f))

    return [
        m(2, 1, 1), m(0, 0, 1), m(1, 0, 3), m(0, 0, 1), m(1, 0, 3), m(0, 0, 1), m(1, 0, 3),
        m(0, 0, 3), m(1, 0, 1), m(0, 0, 3), m(1, 0, 1), m(0, 0, 3), m(1, 0, 1), m(2, 1, 3),
    ]


def twist_opposite_moves(i: int, j: int) -> Macro:
    assert popcount(i ^ j) == 3
    f = popcount(i) & 1

    def axis(d):
        return d ^ f ^ (f & (d >> 1))

    def m(d, s, c):
        a = axis(d)
        return Move.from_index(6 * a + 3 * (s ^ ((i >> a) & 1)) + c - 1)

    return [
        m(2, 1, 2),
        m(0, 0, 1), m(1, 0, 3), m(0, 0, 1), m(1, 0, 3), m(0, 0, 1), m(1, 0, 3),
        m(0, 0, 3), m(1, 0, 1), m(0, 0, 3), m(1, 0, 1), m(0, 0, 3), m(1, 0, 1),
        m(2, 1, 2),
    ]


TWIST_MACROS = {
    1: twist_edge_moves,
    2: twist_diag_moves,
    3: twist_opposite_moves,
}


def twist_moves(i: int, j: int) -> Macro:
    """Macro twisting slot i by +1 and slot j by +2"""
    distance = popcount(i ^ j)
    assert distance in TWIST_MACROS, f"no twist macro for slots {i} and {j}"
    return TWIST_MACROS[distance](i, j)


def solve_orientation(orientations: Sequence[int]) -> Macro:
    """
    Moves that untwist every corner of an otherwise solved cube.

    Slot 0 is never paired with itself; it comes out right once the other
    seven do, because the twists of a reachable cube sum to 0 mod 3.
    """
    macro: Macro = []
    for k in range(1, 8):
        t = orientations[k]
        if t != 0:
            i, j = (0, k) if t == 1 else (k, 0)
            macro.extend(twist_moves(i, j))
    return macro


def solve(cube: Cube) -> List[Move]:
    """Move sequence that returns cube to the solved state"""
    positions, orientations = cube.positions_orientations()
    logger.debug("positions %s, orientations %s", positions, orientations)
    logger.debug("cycles %s", permutations.cycle_decomposition(positions))

    position_macro = solve_positions(permutations.inverse(positions))
    placed_orientations = simulate_orientations(orientations, position_macro)
    orientation_macro = solve_orientation(placed_orientations)

    logger.debug(
        "position macro: %d moves, orientation macro: %d moves",
        len(position_macro), len(orientation_macro),
    )
    solution = concatenate(position_macro, orientation_macro)
    logger.debug("solution: %s", " ".join(m.notation for m in solution))
    return solution
