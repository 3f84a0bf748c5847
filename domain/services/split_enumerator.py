"""
Enumeration of every equal-size two-team split of a roster.
"""

import itertools
import math
from collections.abc import Iterator


def count_splits(roster_size: int) -> int:
    """Number of labeled splits for an even roster: C(N, N/2)."""
    if roster_size < 0 or roster_size % 2:
        raise ValueError(f"Roster size must be even and non-negative, got {roster_size}")
    return math.comb(roster_size, roster_size // 2)


def iter_splits(roster_size: int) -> Iterator[tuple[tuple[int, ...], tuple[int, ...]]]:
    """
    Lazily yield every split of range(roster_size) into two labeled halves.

    Each item is (team1_indices, team2_indices), both ascending and disjoint,
    together covering every index. Team 1 and team 2 are distinct sides, so
    {A,B}|{C,D} and {C,D}|{A,B} are both emitted; no split is emitted twice.

    Order is lexicographic in the team 1 index tuple, which is the same as
    lexicographic order of the per-slot team assignment. The first split
    places the first half of the roster on team 1.

    Cost is C(N, N/2) splits, O(N) each: 184756 for N=20, 2704156 for N=24.
    """
    half = roster_size // 2
    if roster_size < 0 or roster_size % 2:
        raise ValueError(f"Roster size must be even and non-negative, got {roster_size}")
    indices = range(roster_size)
    for team1 in itertools.combinations(indices, half):
        chosen = set(team1)
        team2 = tuple(i for i in indices if i not in chosen)
        yield team1, team2
