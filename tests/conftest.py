import random

import pytest

from cube_state import SOLVED_CUBE
from moves import Move


def random_moves(rng: random.Random, count: int):
    return [Move.from_index(rng.randrange(18)) for _ in range(count)]


@pytest.fixture
def rng():
    return random.Random(2024)


@pytest.fixture
def scrambles(rng):
    """Move sequences of assorted lengths, including the empty one"""
    return [random_moves(rng, n) for n in (0, 1, 2, 3, 5, 8, 13, 20, 30, 40)]


@pytest.fixture
def scrambled_cubes(scrambles):
    return [SOLVED_CUBE.apply_sequence(s) for s in scrambles]
