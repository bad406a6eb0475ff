"""Ranking of reference colors by hit count."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

from .config import DEFAULT_PALETTE_LENGTH


def resolve_length(n: object, default: int = DEFAULT_PALETTE_LENGTH) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        return default
    return n


@dataclass(frozen=True)
class RankedPalette:
    entries: tuple[tuple[int, int], ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.entries)

    def colors(self) -> list[int]:
        return [color for color, _ in self.entries]

    def counts(self) -> list[int]:
        return [count for _, count in self.entries]

    def top_n(self, n: object = None, default: int = DEFAULT_PALETTE_LENGTH) -> list[int]:
        length = resolve_length(n, default)
        return [color for color, _ in self.entries[:length]]


def rank(hit_counts: Mapping[int, int]) -> RankedPalette:
    # sorted() is stable, so equal counts keep reference-table order
    ordered = sorted(hit_counts.items(), key=lambda item: item[1], reverse=True)
    return RankedPalette(entries=tuple(ordered))


def top_n(ranked: RankedPalette, n: object = None, default: int = DEFAULT_PALETTE_LENGTH) -> list[int]:
    return ranked.top_n(n, default)
