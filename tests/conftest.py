from __future__ import annotations

from pathlib import Path

import pytest

from image_palette.config import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in (
        "IMAGE_PALETTE_PRECISION",
        "IMAGE_PALETTE_LENGTH",
        "IMAGE_PALETTE_BACKEND",
        "IMAGE_PALETTE_WORKERS",
        "IMAGE_PALETTE_EVENTS",
        "IMAGE_PALETTE_ENV_FILE",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
