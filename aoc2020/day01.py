"""Day 1: find entries of an expense report that add up to a target."""

from __future__ import annotations

from collections.abc import Sequence


def _search(entries: Sequence[int], start: int, target: int, n: int) -> list[int] | None:
    if n == 1:
        return [target] if target in entries[start:] else None
    for index in range(start, len(entries)):
        num = entries[index]
        rest = _search(entries, index + 1, target - num, n - 1)
        if rest is not None:
            return [num, *rest]
    return None


def n_sum(entries: Sequence[int], target: int, n: int) -> list[int] | None:
    """Return the first ``n`` entries, in order, that sum to ``target``, or None."""
    return _search(list(entries), 0, target, n)