"""Image accessor base classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol

from ..errors import InvalidAccessorError

Pixel = tuple[int, int, int, int]


class ImageAccessor(Protocol):
    name: str

    def open(self) -> None:
        ...

    def dimensions(self) -> tuple[int, int]:
        ...

    def pixel_at(self, x: int, y: int) -> Pixel:
        ...

    def close(self) -> None:
        ...


class AccessorBackend(Protocol):
    name: str

    def accepts(self, source: Any) -> bool:
        ...

    def __call__(self, source: Any) -> ImageAccessor:
        ...


class BaseAccessor:
    """Context-manager plumbing and bounds checking shared by accessors."""

    name = "base"

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self._opened = False

    def open(self) -> None:
        raise NotImplementedError

    def close(self) -> None:
        self._opened = False

    def dimensions(self) -> tuple[int, int]:
        self._require_open()
        return self.width, self.height

    def _require_open(self) -> None:
        if not self._opened:
            raise InvalidAccessorError(f"{self.name} accessor used before open().")

    def _check_bounds(self, x: int, y: int) -> None:
        self._require_open()
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidAccessorError(
                f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} image."
            )

    def __enter__(self) -> "BaseAccessor":
        self.open()
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


@dataclass(frozen=True)
class BackendSelection:
    backend: AccessorBackend
    requested: str | None
    reason: str | None = None


class AccessorRegistry:
    def __init__(self, backends: Iterable[AccessorBackend]) -> None:
        self._backends = {backend.name: backend for backend in backends}

    def get(self, name: str) -> AccessorBackend | None:
        return self._backends.get(name)

    def list(self) -> list[str]:
        return sorted(self._backends.keys())

    def backends(self) -> list[AccessorBackend]:
        return list(self._backends.values())

    def accepting(self, source: Any) -> list[AccessorBackend]:
        return [backend for backend in self._backends.values() if backend.accepts(source)]
