"""
Rotation algebra - integer rotation matrices, face sides and face normals
"""

from enum import IntEnum
from typing import Optional, Sequence, Tuple

Vector = Tuple[int, int, int]


class Side(IntEnum):
    """The six faces, paired by axis (negative side first)"""
    L = 0
    R = 1
    D = 2
    U = 3
    B = 4
    F = 5

    @classmethod
    def from_index(cls, index: int) -> "Side":
        assert 0 <= index < 6, f"side index out of range: {index}"
        return cls(index)

    @classmethod
    def deserialize(cls, serialization: str) -> Optional["Side"]:
        """Look a side up by its name, None if there is no such side"""
        return _SIDE_BY_NAME.get(serialization)

    @property
    def serialization(self) -> str:
        return _SIDE_NAMES[self]

    @property
    def axis(self) -> int:
        return int(self) >> 1

    @property
    def positive(self) -> bool:
        return bool(int(self) & 1)


_SIDE_NAMES = {
    Side.L: "left",
    Side.R: "right",
    Side.D: "down",
    Side.U: "up",
    Side.B: "back",
    Side.F: "front",
}

_SIDE_BY_NAME = {name: side for side, name in _SIDE_NAMES.items()}


def normal(side: Side) -> Vector:
    """Outward unit normal of a face"""
    n = [0, 0, 0]
    n[side.axis] = 1 if side.positive else -1
    return tuple(n)


def is_face_normal(vector: Sequence[int]) -> bool:
    zero_count = 0
    for coordinate in vector:
        if coordinate == 0:
            zero_count += 1
        elif abs(coordinate) > 1:
            return False
    return len(vector) == 3 and zero_count == 2


def normal_side(vector: Sequence[int]) -> Side:
    assert is_face_normal(vector), f"not a face normal: {vector}"
    axis = vector_direction_index(vector)
    return Side.from_index(2 * axis + (1 if vector[axis] > 0 else 0))


def vector_direction_index(vector: Sequence[int]) -> int:
    """Index of the first nonzero coordinate"""
    for i, coordinate in enumerate(vector):
        if coordinate != 0:
            return i
    raise AssertionError(f"zero vector has no direction: {vector}")


def in_cube(position: Sequence[int]) -> bool:
    return all(abs(coordinate) <= 1 for coordinate in position)


def inner_product(a: Sequence[int], b: Sequence[int]) -> int:
    return sum(x * y for x, y in zip(a, b))


class Transform:
    """
    3x3 integer matrix describing how a corner's frame is rotated
    relative to its solved frame.

    Every transform built by the cube is a proper signed permutation
    matrix, so the inverse is the transpose.
    """

    __slots__ = ("entries",)

    def __init__(self, entries: Sequence[Sequence[int]]):
        assert len(entries) == 3 and all(len(row) == 3 for row in entries)
        self.entries = tuple(tuple(int(e) for e in row) for row in entries)

    @classmethod
    def identity(cls) -> "Transform":
        return cls([[1 if i == j else 0 for j in range(3)] for i in range(3)])

    @classmethod
    def from_columns(cls, columns: Sequence[Vector]) -> "Transform":
        return cls([[columns[j][i] for j in range(3)] for i in range(3)])

    def inverse(self) -> "Transform":
        return Transform([[self.entries[j][i] for j in range(3)] for i in range(3)])

    def then(self, following: "Transform") -> "Transform":
        """The rotation that applies self first and following second"""
        a = following.entries
        b = self.entries
        return Transform([
            [sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3)]
            for i in range(3)
        ])

    def apply(self, vector: Sequence[int]) -> Vector:
        assert in_cube(vector), f"vector outside unit cube: {vector}"
        return tuple(
            sum(self.entries[row][column] * vector[column] for column in range(3))
            for row in range(3)
        )

    def column(self, index: int) -> Vector:
        return tuple(self.entries[row][index] for row in range(3))

    def determinant(self) -> int:
        (a, b, c), (d, e, f), (g, h, i) = self.entries
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def is_rotation(self) -> bool:
        """Signed permutation matrix with determinant +1"""
        for row in self.entries:
            if sorted(abs(e) for e in row) != [0, 0, 1]:
                return False
        for j in range(3):
            if sorted(abs(e) for e in self.column(j)) != [0, 0, 1]:
                return False
        return self.determinant() == 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return self.entries == other.entries

    def __hash__(self) -> int:
        return hash(self.entries)

    def __repr__(self) -> str:
        return f"Transform({[list(row) for row in self.entries]})"


def identity() -> Transform:
    return Transform.identity()


def inverse(transform: Transform) -> Transform:
    return transform.inverse()


def compose(first: Transform, second: Transform) -> Transform:
    return first.then(second)
