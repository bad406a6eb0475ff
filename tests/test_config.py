from __future__ import annotations

import os
from pathlib import Path

import pytest

from image_palette.config import Settings, get_settings, settings_from_env
from image_palette.utils import read_env_file


def test_settings_defaults() -> None:
    assert settings_from_env() == Settings()
    assert Settings().precision == 10
    assert Settings().palette_length == 5


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("IMAGE_PALETTE_PRECISION", "3")
    monkeypatch.setenv("IMAGE_PALETTE_LENGTH", "8")
    monkeypatch.setenv("IMAGE_PALETTE_BACKEND", " Pillow ")
    monkeypatch.setenv("IMAGE_PALETTE_WORKERS", "2")
    monkeypatch.setenv("IMAGE_PALETTE_EVENTS", str(tmp_path / "events.jsonl"))

    settings = settings_from_env()
    assert settings.precision == 3
    assert settings.palette_length == 8
    assert settings.backend == "pillow"
    assert settings.workers == 2
    assert settings.events_path == tmp_path / "events.jsonl"


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMAGE_PALETTE_PRECISION", "0")
    monkeypatch.setenv("IMAGE_PALETTE_LENGTH", "many")
    settings = settings_from_env()
    assert settings.precision == 10
    assert settings.palette_length == 5


def test_settings_from_mapping() -> None:
    settings = settings_from_env({"IMAGE_PALETTE_PRECISION": "2", "IMAGE_PALETTE_BACKEND": "NUMPY"})
    assert settings.precision == 2
    assert settings.backend == "numpy"
    assert settings.palette_length == 5


def test_get_settings_reads_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# defaults\nexport IMAGE_PALETTE_LENGTH='7'\nIMAGE_PALETTE_PRECISION=4\nOTHER_KEY=1\n",
        encoding="utf-8",
    )

    settings = get_settings()
    assert settings.palette_length == 7
    assert settings.precision == 4
    assert get_settings() is settings
    assert "IMAGE_PALETTE_LENGTH" not in os.environ
    assert "OTHER_KEY" not in os.environ


def test_process_env_wins_over_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / "palette.env"
    env_file.write_text("IMAGE_PALETTE_LENGTH=7\nIMAGE_PALETTE_WORKERS=3\n", encoding="utf-8")
    monkeypatch.setenv("IMAGE_PALETTE_ENV_FILE", str(env_file))
    monkeypatch.setenv("IMAGE_PALETTE_LENGTH", "2")

    settings = get_settings()
    assert settings.palette_length == 2
    assert settings.workers == 3


def test_read_env_file_filters_prefix(tmp_path: Path) -> None:
    path = tmp_path / ".env"
    path.write_text('IMAGE_PALETTE_BACKEND="pillow"\nNOT_OURS=x\nbroken line\n', encoding="utf-8")
    assert read_env_file(path, "IMAGE_PALETTE_") == {"IMAGE_PALETTE_BACKEND": "pillow"}
    assert read_env_file(tmp_path / "missing.env", "IMAGE_PALETTE_") == {}
