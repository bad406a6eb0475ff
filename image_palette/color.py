"""Integer color encoding helpers.

Colors are plain ints laid out as ``0xRRGGBB``. Raw pixel values produced by
the image accessors carry an extra transparency byte on top
(``0xTTRRGGBB``, where ``TT = 255 - alpha``), so a fully opaque pixel's raw
value is just its color and a fully transparent one has ``TT == 0xFF``.
"""

from __future__ import annotations

RGB = tuple[int, int, int]

TRANSPARENT = 0xFF
_HEX_DIGITS = set("0123456789abcdefABCDEF")


def expand(color: int | str) -> int:
    """Return the 24-bit form of ``color``.

    Shorthand colors are three hex digits (``"0c3"`` or ``"#0c3"``), each
    nibble doubled into a byte. Six-digit strings are parsed as-is.

    Ints are always 24-bit and returned unchanged; integer shorthand is not
    accepted, so ``expand(0xF00)`` is ``0x000F00``. Write ``"f00"`` for red.
    """

    if isinstance(color, bool):
        raise TypeError("color must be an int or a hex string")
    if isinstance(color, int):
        return color
    digits = color.strip().lstrip("#")
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"Invalid color {color!r}.")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid color {color!r}.")
    return int(digits, 16)


def int_to_rgb(color: int) -> RGB:
    if color < 0 or color > 0xFFFFFF:
        raise ValueError(f"Color {color} is outside the 24-bit range.")
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def rgb_to_color(r: int, g: int, b: int) -> int:
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            raise ValueError(f"Channel value {channel} is outside 0-255.")
    return (r << 16) | (g << 8) | b


def pack_pixel(r: int, g: int, b: int, alpha: int = 255) -> int:
    return ((255 - alpha) << 24) | rgb_to_color(r, g, b)


def is_transparent(raw: int) -> bool:
    return (raw >> 24) & 0xFF == TRANSPARENT


def int_to_hex_string(color: int) -> str:
    r, g, b = int_to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_string(rgb: RGB) -> str:
    r, g, b = rgb
    return f"rgb({r},{g},{b})"
