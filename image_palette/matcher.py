"""Nearest reference color lookup."""

from __future__ import annotations

from typing import Sequence

from .color import RGB, int_to_rgb


def closest(r: int, g: int, b: int, table: Sequence[int]) -> int:
    """Return the reference color with the smallest squared RGB distance.

    Ties go to the entry that comes first in ``table``.
    """

    if not table:
        raise ValueError("Reference table is empty.")
    best = table[0]
    best_diff: int | None = None
    for color in table:
        wr, wg, wb = int_to_rgb(color)
        diff = (r - wr) ** 2 + (g - wg) ** 2 + (b - wb) ** 2
        if best_diff is None or diff < best_diff:
            best_diff = diff
            best = color
    return best


class NearestColorMatcher:
    def __init__(self, table: Sequence[int]) -> None:
        if not table:
            raise ValueError("Reference table is empty.")
        self.table = tuple(table)
        self._cache: dict[RGB, int] = {}

    def match(self, r: int, g: int, b: int) -> int:
        key = (r, g, b)
        color = self._cache.get(key)
        if color is None:
            color = closest(r, g, b, self.table)
            self._cache[key] = color
        return color

    def cache_size(self) -> int:
        return len(self._cache)
