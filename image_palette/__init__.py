"""Dominant-color palettes snapped to a fixed reference palette."""

from __future__ import annotations

from .errors import (
    ImagePaletteError,
    ImageReadError,
    InvalidAccessorError,
    NoBackendAvailableError,
    UnsupportedBackendError,
    UnsupportedFormatError,
)
from .palette import ImagePalette, PaletteResult, extract_palette
from .ranker import RankedPalette, rank, top_n
from .reference import reference_table

__all__ = [
    "ImagePalette",
    "ImagePaletteError",
    "ImageReadError",
    "InvalidAccessorError",
    "NoBackendAvailableError",
    "PaletteResult",
    "RankedPalette",
    "UnsupportedBackendError",
    "UnsupportedFormatError",
    "extract_palette",
    "rank",
    "reference_table",
    "top_n",
]
