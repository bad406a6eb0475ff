"""numpy-backed accessor for images that are already decoded in memory."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..color import pack_pixel
from ..errors import UnsupportedFormatError
from .base import BaseAccessor, Pixel


class ArrayAccessor(BaseAccessor):
    """Reads ``H x W`` (gray), ``H x W x 3`` (RGB) or ``H x W x 4`` (RGBA) arrays.

    Float arrays are taken to hold channels in 0-1.
    """

    name = "numpy"

    def __init__(self, source: Any) -> None:
        super().__init__()
        self.source = source
        self._array: Any = None

    @staticmethod
    def accepts(source: Any) -> bool:
        return isinstance(source, np.ndarray)

    def open(self) -> None:
        if self._opened:
            return
        array = np.asarray(self.source)
        if array.ndim == 2:
            array = np.repeat(array[:, :, None], 3, axis=2)
        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise UnsupportedFormatError(f"Unsupported pixel array shape {array.shape}.")
        if array.dtype.kind == "f":
            array = np.rint(array * 255.0)
        array = np.clip(array, 0, 255)
        self._array = array.astype(np.uint8, copy=False)
        self.height, self.width = self._array.shape[:2]
        self._opened = True

    def pixel_at(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        values = self._array[y, x]
        r, g, b = int(values[0]), int(values[1]), int(values[2])
        alpha = int(values[3]) if values.shape[0] == 4 else 255
        return pack_pixel(r, g, b, alpha), r, g, b

    def close(self) -> None:
        self._array = None
        super().close()
