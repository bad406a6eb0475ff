"""Strided pixel sampling into per-reference-color hit counts."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, Sequence

from .accessors.base import ImageAccessor
from .color import is_transparent
from .matcher import NearestColorMatcher


@dataclass
class ScanStats:
    sampled: int = 0
    skipped: int = 0

    @property
    def matched(self) -> int:
        return self.sampled - self.skipped

    def merge(self, other: "ScanStats") -> None:
        self.sampled += other.sampled
        self.skipped += other.skipped


def validate_precision(precision: object) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
        raise ValueError(f"precision must be an integer >= 1, got {precision!r}.")
    return precision


def new_hit_counts(table: Sequence[int]) -> dict[int, int]:
    return dict.fromkeys(table, 0)


def sample_points(width: int, height: int, precision: int) -> Iterator[tuple[int, int]]:
    for x in range(0, width, precision):
        for y in range(0, height, precision):
            yield x, y


def _scan_columns(
    accessor: ImageAccessor,
    columns: Sequence[int],
    height: int,
    precision: int,
    matcher: NearestColorMatcher,
) -> tuple[Counter[int], ScanStats]:
    hits: Counter[int] = Counter()
    stats = ScanStats()
    for x in columns:
        for y in range(0, height, precision):
            raw, r, g, b = accessor.pixel_at(x, y)
            stats.sampled += 1
            # transparent pixels don't have a color worth counting
            if is_transparent(raw):
                stats.skipped += 1
                continue
            hits[matcher.match(r, g, b)] += 1
    return hits, stats


def _shards(columns: Sequence[int], workers: int) -> list[Sequence[int]]:
    size = -(-len(columns) // workers)
    return [columns[start : start + size] for start in range(0, len(columns), size)]


def scan(
    accessor: ImageAccessor,
    width: int,
    height: int,
    precision: int,
    table: Sequence[int],
    workers: int = 1,
    stats: ScanStats | None = None,
) -> dict[int, int]:
    """Count the nearest reference color of every ``precision``-th pixel.

    With ``workers > 1`` the sampled columns are split into contiguous shards,
    each counted separately and merged afterwards; the result is the same as
    a single-threaded scan.
    """

    validate_precision(precision)
    hit_counts = new_hit_counts(table)
    matcher = NearestColorMatcher(table)
    columns = range(0, width, precision)
    if workers > 1 and len(columns) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(_scan_columns, accessor, shard, height, precision, matcher)
                for shard in _shards(columns, workers)
            ]
            results = [future.result() for future in futures]
    else:
        results = [_scan_columns(accessor, columns, height, precision, matcher)]

    for hits, shard_stats in results:
        for color, count in hits.items():
            hit_counts[color] += count
        if stats is not None:
            stats.merge(shard_stats)
    return hit_counts
