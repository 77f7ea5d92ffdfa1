"""Assignment of forks to philosophers seated around the table."""

from __future__ import annotations


def _pair(start: int) -> list[tuple[int, int]]:
    return [(start, start + 1), (start + 1, start)]


def assign_forks(count: int) -> list[tuple[int, int]]:
    """Return the (left, right) fork indices for each philosopher.

    With an odd count the first three philosophers share three forks in a
    ring and the rest form pairs; with an even count everyone is paired.
    """
    if count < 2:
        raise ValueError("at least two philosophers are needed to share forks")
    if count % 2:
        forks = [(0, 1), (1, 2), (2, 0)]
        first_pair = 3
    else:
        forks = []
        first_pair = 0
    for start in range(first_pair, count, 2):
        forks.extend(_pair(start))
    return forks