"""Reference ("whitelist") colors that sampled pixels are snapped to."""

from __future__ import annotations

from functools import lru_cache

from .color import expand

WEB_SAFE_STEPS = "0369cf"

SUPPLEMENTARY_COLORS: tuple[int, ...] = (
    0xEA4C88,
    0x77CC33,
    0xE7D8B1,
    0xFDADC7,
    0x424153,
    0xABBCDA,
    0xF5DD01,
)


def web_safe_shorthand() -> list[str]:
    # Red outermost, then blue, green varies fastest: 000, 030, 060, ... 003, 033, ...
    return [f"{r}{g}{b}" for r in WEB_SAFE_STEPS for b in WEB_SAFE_STEPS for g in WEB_SAFE_STEPS]


def build_reference_table() -> tuple[int, ...]:
    entries: list[int | str] = [*web_safe_shorthand(), *SUPPLEMENTARY_COLORS]
    return tuple(expand(entry) for entry in entries)


@lru_cache(maxsize=1)
def reference_table() -> tuple[int, ...]:
    """Shared, process-wide reference table (216 web-safe + 7 extra colors)."""

    return build_reference_table()
