"""Pillow-backed image accessor (files, bytes, file objects, PIL images)."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from ..color import pack_pixel
from ..errors import ImageReadError, UnsupportedFormatError
from ..utils import describe_source
from .base import BaseAccessor, Pixel


class PillowAccessor(BaseAccessor):
    name = "pillow"

    def __init__(self, source: Any) -> None:
        super().__init__()
        self.source = source
        self._image: Image.Image | None = None
        self._pixels: Any = None

    @staticmethod
    def accepts(source: Any) -> bool:
        if isinstance(source, (str, Path, bytes, bytearray, Image.Image)):
            return True
        return callable(getattr(source, "read", None))

    def open(self) -> None:
        if self._opened:
            return
        decoded = self._decode()
        try:
            rgba = decoded.convert("RGBA")
        except OSError as exc:
            raise ImageReadError(f"Could not read image data from {describe_source(self.source)}: {exc}") from exc
        finally:
            if decoded is not self.source:
                decoded.close()
        self._image = rgba
        self._pixels = rgba.load()
        self.width, self.height = rgba.size
        self._opened = True

    def _decode(self) -> Image.Image:
        source = self.source
        if isinstance(source, Image.Image):
            return source
        try:
            if isinstance(source, (bytes, bytearray)):
                return Image.open(BytesIO(bytes(source)))
            return Image.open(source)
        except UnidentifiedImageError as exc:
            raise UnsupportedFormatError(f"The image format of {describe_source(source)} is not supported.") from exc
        except OSError as exc:
            raise ImageReadError(f"Could not read {describe_source(source)}: {exc}") from exc

    def pixel_at(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b, a = self._pixels[x, y]
        return pack_pixel(r, g, b, a), r, g, b

    def close(self) -> None:
        if self._image is not None:
            self._image.close()
        self._image = None
        self._pixels = None
        super().close()

