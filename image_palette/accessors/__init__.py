"""Image accessor registry and backend selection."""

from __future__ import annotations

from typing import Any

from ..errors import NoBackendAvailableError, UnsupportedBackendError, UnsupportedFormatError
from .array import ArrayAccessor
from .base import AccessorRegistry, BackendSelection, BaseAccessor, ImageAccessor, Pixel
from .pillow import PillowAccessor

__all__ = [
    "AccessorRegistry",
    "ArrayAccessor",
    "BackendSelection",
    "BaseAccessor",
    "ImageAccessor",
    "PillowAccessor",
    "Pixel",
    "default_registry",
    "open_accessor",
    "select_backend",
]


def default_registry() -> AccessorRegistry:
    return AccessorRegistry([ArrayAccessor, PillowAccessor])


def select_backend(
    source: Any,
    requested: str | None = None,
    registry: AccessorRegistry | None = None,
) -> BackendSelection:
    registry = registry or default_registry()
    if requested:
        name = requested.strip().lower()
        backend = registry.get(name)
        if backend is None:
            available = ", ".join(registry.list()) or "none"
            raise UnsupportedBackendError(f"Backend '{requested}' is not supported (available: {available}).")
        if not backend.accepts(source):
            raise UnsupportedFormatError(
                f"Backend '{backend.name}' cannot decode a {type(source).__name__} source."
            )
        return BackendSelection(backend=backend, requested=requested)

    candidates = registry.accepting(source)
    if not candidates:
        raise NoBackendAvailableError(
            f"No image backend can decode a {type(source).__name__} source."
        )
    return BackendSelection(backend=candidates[0], requested=None, reason="No backend specified; auto-detected.")


def open_accessor(
    source: Any,
    backend: str | None = None,
    registry: AccessorRegistry | None = None,
) -> ImageAccessor:
    """Build and open the accessor for ``source``; the caller must close it."""

    selection = select_backend(source, backend, registry)
    accessor = selection.backend(source)
    accessor.open()
    return accessor
