"""Dominant-color palette of an image.

Every sampled pixel is matched against a fixed set of reference colors, so
the palette is made of "common" colors (web-safe plus a few extras) rather
than the exact pixel values found in the image.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator

from .accessors import open_accessor
from .accessors.base import AccessorRegistry
from .color import RGB, int_to_hex_string, int_to_rgb, rgb_to_string
from .config import Settings, get_settings
from .errors import ImagePaletteError
from .events import EventWriter
from .ranker import RankedPalette, rank, resolve_length
from .reference import reference_table
from .sampler import ScanStats, scan, validate_precision
from .utils import describe_source


class ImagePalette:
    def __init__(
        self,
        source: Any,
        precision: int | None = None,
        palette_length: int | None = None,
        backend: str | None = None,
        *,
        settings: Settings | None = None,
        events: EventWriter | None = None,
        registry: AccessorRegistry | None = None,
        workers: int | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.source = source
        self.precision = validate_precision(precision if precision is not None else settings.precision)
        self.palette_length = resolve_length(palette_length, settings.palette_length)
        self.workers = workers if workers is not None else settings.workers
        if events is None and settings.events_path is not None:
            events = EventWriter(settings.events_path)
        self.events = events
        self.stats = ScanStats()

        accessor = open_accessor(source, backend or settings.backend, registry)
        try:
            self.backend = accessor.name
            self.width, self.height = accessor.dimensions()
            if self.events is not None:
                self.events.scan_started(describe_source(source), self.backend, self.width, self.height, self.precision)
            hit_counts = scan(
                accessor,
                self.width,
                self.height,
                self.precision,
                reference_table(),
                workers=self.workers,
                stats=self.stats,
            )
        finally:
            accessor.close()

        self._hit_counts = hit_counts
        self.ranked: RankedPalette = rank(hit_counts)
        if self.events is not None:
            self.events.ranked(self.stats, self.hex_colors())

    def hit_counts(self) -> dict[int, int]:
        return dict(self._hit_counts)

    def int_colors(self, n: int | None = None) -> list[int]:
        return self.ranked.top_n(n, self.palette_length)

    def rgb_colors(self, n: int | None = None) -> list[RGB]:
        return [int_to_rgb(color) for color in self.int_colors(n)]

    def hex_colors(self, n: int | None = None) -> list[str]:
        return [int_to_hex_string(color) for color in self.int_colors(n)]

    def rgb_string_colors(self, n: int | None = None) -> list[str]:
        return [rgb_to_string(rgb) for rgb in self.rgb_colors(n)]

    def colors(self, n: int | None = None) -> list[str]:
        """Legacy alias for :meth:`hex_colors`."""

        return self.hex_colors(n)

    def to_json(self, n: int | None = None) -> str:
        return json.dumps(self.hex_colors(n))

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors())

    def __len__(self) -> int:
        return min(self.palette_length, len(self.ranked))

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return (
            f"ImagePalette(source={describe_source(self.source)!r}, backend={self.backend!r}, "
            f"precision={self.precision}, colors={self.hex_colors()!r})"
        )


@dataclass(frozen=True)
class PaletteResult:
    palette: ImagePalette | None
    error: ImagePaletteError | None = None

    @property
    def ok(self) -> bool:
        return self.palette is not None

    def unwrap(self) -> ImagePalette:
        if self.error is not None:
            raise self.error
        if self.palette is None:
            raise ImagePaletteError("No palette was built.")
        return self.palette


def extract_palette(source: Any, *args: Any, **kwargs: Any) -> PaletteResult:
    """Build an :class:`ImagePalette`, returning decode failures instead of raising."""

    try:
        return PaletteResult(palette=ImagePalette(source, *args, **kwargs))
    except ImagePaletteError as exc:
        return PaletteResult(palette=None, error=exc)

