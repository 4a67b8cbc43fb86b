"""
Face turns - the 18 moves, their rotations, and the cheap position and
orientation vector updates used to simulate move sequences
"""

from enum import IntEnum
from typing import Iterable, List, Sequence

import permutations
from rotation import Side, Transform


class Move(IntEnum):
    """A quarter, half or three-quarter clockwise turn of one face"""
    L1 = 0
    L2 = 1
    L3 = 2
    R1 = 3
    R2 = 4
    R3 = 5
    D1 = 6
    D2 = 7
    D3 = 8
    U1 = 9
    U2 = 10
    U3 = 11
    B1 = 12
    B2 = 13
    B3 = 14
    F1 = 15
    F2 = 16
    F3 = 17

    @classmethod
    def from_index(cls, index: int) -> "Move":
        assert 0 <= index < 18, f"move index out of range: {index}"
        return cls(index)

    @classmethod
    def of(cls, side: Side, quarter_turns: int) -> "Move":
        assert 1 <= quarter_turns <= 3
        return cls.from_index(3 * int(side) + quarter_turns - 1)

    @property
    def side(self) -> Side:
        return Side.from_index(int(self) // 3)

    @property
    def quarter_turns(self) -> int:
        return int(self) % 3 + 1

    @property
    def degrees(self) -> int:
        return 90 * self.quarter_turns

    @property
    def notation(self) -> str:
        return self.name

    @property
    def inverse(self) -> "Move":
        return Move.of(self.side, 4 - self.quarter_turns)

    @property
    def transform(self) -> Transform:
        return MOVE_TRANSFORMS[self]


# Rotation of each turn, clockwise as seen from outside the face
MOVE_TRANSFORMS = {
    Move.L1: Transform([[1, 0, 0], [0, 0, 1], [0, -1, 0]]),
    Move.L2: Transform([[1, 0, 0], [0, -1, 0], [0, 0, -1]]),
    Move.L3: Transform([[1, 0, 0], [0, 0, -1], [0, 1, 0]]),
    Move.R1: Transform([[1, 0, 0], [0, 0, -1], [0, 1, 0]]),
    Move.R2: Transform([[1, 0, 0], [0, -1, 0], [0, 0, -1]]),
    Move.R3: Transform([[1, 0, 0], [0, 0, 1], [0, -1, 0]]),
    Move.D1: Transform([[0, 0, -1], [0, 1, 0], [1, 0, 0]]),
    Move.D2: Transform([[-1, 0, 0], [0, 1, 0], [0, 0, -1]]),
    Move.D3: Transform([[0, 0, 1], [0, 1, 0], [-1, 0, 0]]),
    Move.U1: Transform([[0, 0, 1], [0, 1, 0], [-1, 0, 0]]),
    Move.U2: Transform([[-1, 0, 0], [0, 1, 0], [0, 0, -1]]),
    Move.U3: Transform([[0, 0, -1], [0, 1, 0], [1, 0, 0]]),
    Move.B1: Transform([[0, 1, 0], [-1, 0, 0], [0, 0, 1]]),
    Move.B2: Transform([[-1, 0, 0], [0, -1, 0], [0, 0, 1]]),
    Move.B3: Transform([[0, -1, 0], [1, 0, 0], [0, 0, 1]]),
    Move.F1: Transform([[0, -1, 0], [1, 0, 0], [0, 0, 1]]),
    Move.F2: Transform([[-1, 0, 0], [0, -1, 0], [0, 0, 1]]),
    Move.F3: Transform([[0, 1, 0], [-1, 0, 0], [0, 0, 1]]),
}

# Twist added to the corner landing in each slot by one clockwise quarter turn
TWIST_CHANGES = {
    Side.L: [0, 0, 0, 0, 0, 0, 0, 0],
    Side.R: [0, 0, 0, 0, 0, 0, 0, 0],
    Side.D: [2, 1, 0, 0, 1, 2, 0, 0],
    Side.U: [0, 0, 1, 2, 0, 0, 2, 1],
    Side.B: [1, 2, 2, 1, 0, 0, 0, 0],
    Side.F: [0, 0, 0, 0, 2, 1, 1, 2],
}

Macro = List[Move]


def concatenate(*macros: Iterable[Move]) -> Macro:
    result: Macro = []
    for macro in macros:
        result.extend(macro)
    return result


def _turn_slot(k: int, side: Side) -> int:
    """Slot reached by slot k under one clockwise quarter turn of side"""
    d = side.axis
    s = int(side.positive)

    def idx(i):
        return (d + i + 1) % 3

    turned = (s << d) ^ (1 << idx(s ^ 1))
    for j in range(2):
        turned ^= ((k >> idx(j)) & 1) << idx(j ^ 1)
    return turned


def apply_to_positions(positions: Sequence[int], move: Move) -> List[int]:
    """
    Update a vector holding, for each corner, the slot it occupies.

    Entries on the turned face are carried to their new slot; the others
    are left alone.
    """
    side = move.side
    d = side.axis
    s = int(side.positive)
    result = []
    for k in positions:
        if ((k >> d) & 1) == s:
            for _ in range(move.quarter_turns):
                k = _turn_slot(k, side)
        result.append(k)
    return result


# Slot each slot is carried to by one clockwise quarter turn of a side
QUARTER_TURN_RELOCATIONS = {
    side: apply_to_positions(permutations.IDENTITY, Move.of(side, 1)) for side in Side
}


def apply_to_orientations(orientations: Sequence[int], move: Move) -> List[int]:
    """Update a slot-indexed twist vector for one move"""
    side = move.side
    changes = TWIST_CHANGES[side]
    relocation = QUARTER_TURN_RELOCATIONS[side]
    result = list(orientations)
    for _ in range(move.quarter_turns):
        result = permutations.apply(result, relocation)
        result = [(o + c) % 3 for o, c in zip(result, changes)]
    return result


def simulate_positions(positions: Sequence[int], moves: Iterable[Move]) -> List[int]:
    result = list(positions)
    for m in moves:
        result = apply_to_positions(result, m)
    return result


def simulate_orientations(orientations: Sequence[int], moves: Iterable[Move]) -> List[int]:
    result = list(orientations)
    for m in moves:
        result = apply_to_orientations(result, m)
    return result
