"""
Permutations of the eight corner slots - inverse, cycles and transpositions
"""

from typing import Iterator, List, Sequence, Tuple

IDENTITY = (0, 1, 2, 3, 4, 5, 6, 7)


def is_permutation(p: Sequence[int]) -> bool:
    return sorted(p) == list(IDENTITY)


def inverse(p: Sequence[int]) -> List[int]:
    """q with q[p[i]] == i"""
    assert is_permutation(p), f"not a permutation of 0..7: {p}"
    q = [0] * len(p)
    for i, value in enumerate(p):
        q[value] = i
    return q


def apply(values: Sequence[int], p: Sequence[int]) -> List[int]:
    """Move values[i] to index p[i]"""
    result = list(values)
    for i, target in enumerate(p):
        result[target] = values[i]
    return result


def cycles(p: Sequence[int]) -> Iterator[Tuple[bool, int]]:
    """
    Walk every index once, cycle by cycle.

    Starts at index 0 and follows p until the cycle closes, then resumes
    from the lowest index not visited yet. Yields (is_cycle_end, index).
    """
    assert is_permutation(p), f"not a permutation of 0..7: {p}"
    used = [False] * len(p)
    index = 0
    while index is not None:
        used[index] = True
        following = p[index]
        if used[following]:
            yield True, index
            index = next((i for i, u in enumerate(used) if not u), None)
        else:
            yield False, index
            index = following


def transpositions(p: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Split each cycle into swaps against the cycle's first index"""
    first = True
    swap_index = 0
    for last, index in cycles(p):
        starts_cycle = first
        first = last
        if starts_cycle:
            swap_index = index
        else:
            yield swap_index, index


def cycle_decomposition(p: Sequence[int]) -> List[List[int]]:
    result = []
    current: List[int] = []
    for last, index in cycles(p):
        current.append(index)
        if last:
            result.append(current)
            current = []
    return result
