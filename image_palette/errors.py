"""Errors raised while loading an image or building its palette."""

from __future__ import annotations


class ImagePaletteError(RuntimeError):
    pass


class UnsupportedFormatError(ImagePaletteError):
    """The source exists but no decoder understands its format."""


class ImageReadError(ImagePaletteError):
    """The source could not be read at all."""


class NoBackendAvailableError(ImagePaletteError):
    pass


class UnsupportedBackendError(ImagePaletteError):
    pass


class InvalidAccessorError(ImagePaletteError):
    """A pixel was requested outside the image bounds."""
