"""
Cube state - one rotation per corner slot, move application and
extraction of the corner permutation and twists
"""

from typing import Iterable, List, Sequence, Tuple

from moves import Move
from rotation import (
    Side, Transform, Vector, in_cube, inner_product, normal, normal_side,
    vector_direction_index,
)

# Twist class by parity of the solved corner and the solved axis showing
# on the slot's x-facing sticker
ORIENTATION_CLASSES = [[0, 2, 1], [0, 1, 2]]


def slot_index(index: Sequence[int]) -> int:
    return index[0] | (index[1] << 1) | (index[2] << 2)


def slot_bits(slot: int) -> Tuple[int, int, int]:
    return (slot & 1, (slot >> 1) & 1, (slot >> 2) & 1)


def index_position(index: Sequence[int]) -> Vector:
    return tuple(2 * i - 1 for i in index)


def position_index(position: Sequence[int]) -> Tuple[int, int, int]:
    assert in_cube(position), f"position outside cube: {position}"
    return tuple((p + 1) // 2 for p in position)


def slot_position(slot: int) -> Vector:
    return index_position(slot_bits(slot))


def position_slot(position: Sequence[int]) -> int:
    assert all(abs(p) == 1 for p in position), f"not a corner position: {position}"
    return slot_index(position_index(position))


def cubicle_face_normals(position: Sequence[int]) -> List[Vector]:
    return [
        (position[0], 0, 0),
        (0, position[1], 0),
        (0, 0, position[2]),
    ]


class Cube:
    """
    The puzzle as eight corner transforms, addressed by slot.

    Values are never changed in place; every move returns a new cube.
    """

    __slots__ = ("transforms",)

    def __init__(self, transforms: Sequence[Transform]):
        assert len(transforms) == 8
        self.transforms = tuple(transforms)

    @classmethod
    def solved(cls) -> "Cube":
        return cls([Transform.identity()] * 8)

    def transform(self, position: Sequence[int]) -> Transform:
        return self.transforms[position_slot(position)]

    def apply_move(self, move: Move) -> "Cube":
        move_transform = move.transform
        face_normal = normal(move.side)
        transforms = list(self.transforms)
        for slot in range(8):
            start = slot_position(slot)
            if inner_product(face_normal, start) > 0:
                end = move_transform.apply(start)
                transforms[position_slot(end)] = self.transforms[slot].then(move_transform)
        return Cube(transforms)

    def apply_sequence(self, moves: Iterable[Move]) -> "Cube":
        cube = self
        for m in moves:
            cube = cube.apply_move(m)
        return cube

    def positions_orientations(self) -> Tuple[List[int], List[int]]:
        """
        Which solved corner sits in each slot, and its twist.

        The slot's face normals are mapped back through the inverse
        transform; their sum is the solved position of the corner.
        """
        positions = [0] * 8
        orientations = [0] * 8
        for slot in range(8):
            inverse_transform = self.transforms[slot].inverse()
            solved_normals = [
                inverse_transform.apply(n) for n in cubicle_face_normals(slot_position(slot))
            ]
            solved_position = tuple(sum(n[axis] for n in solved_normals) for axis in range(3))
            solved_slot = slot_index(position_index(solved_position))
            positions[slot] = solved_slot
            parity = bin(solved_slot).count("1") & 1
            orientations[slot] = ORIENTATION_CLASSES[parity][vector_direction_index(solved_normals[0])]
        return positions, orientations

    def sticker(self, side: Side, position: Sequence[int]) -> Side:
        """The solved face showing on the given side of the corner at position"""
        return normal_side(self.transform(position).inverse().apply(normal(side)))

    def is_valid(self) -> bool:
        return all(t.is_rotation() for t in self.transforms)

    def is_solved(self) -> bool:
        positions, orientations = self.positions_orientations()
        return list(positions) == list(range(8)) and not any(orientations)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.transforms == other.transforms

    def __hash__(self) -> int:
        return hash(self.transforms)

    def __repr__(self) -> str:
        return f"Cube({list(self.transforms)!r})"


SOLVED_CUBE = Cube.solved()


def apply_move(cube: Cube, move: Move) -> Cube:
    return cube.apply_move(move)


def apply_sequence(cube: Cube, moves: Iterable[Move]) -> Cube:
    return cube.apply_sequence(moves)


def extract(cube: Cube) -> Tuple[List[int], List[int]]:
    return cube.positions_orientations()
