"""Palette defaults loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from .utils import env_int, env_str, read_env_file

ENV_PREFIX = "IMAGE_PALETTE_"
ENV_FILE_VAR = "IMAGE_PALETTE_ENV_FILE"

DEFAULT_PRECISION = 10
DEFAULT_PALETTE_LENGTH = 5
DEFAULT_WORKERS = 1


@dataclass(frozen=True)
class Settings:
    precision: int = DEFAULT_PRECISION
    palette_length: int = DEFAULT_PALETTE_LENGTH
    backend: str | None = None
    workers: int = DEFAULT_WORKERS
    events_path: Path | None = None


def settings_from_env(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    backend = env_str(env, "IMAGE_PALETTE_BACKEND").lower()
    events = env_str(env, "IMAGE_PALETTE_EVENTS")
    return Settings(
        precision=env_int(env, "IMAGE_PALETTE_PRECISION", DEFAULT_PRECISION, minimum=1),
        palette_length=env_int(env, "IMAGE_PALETTE_LENGTH", DEFAULT_PALETTE_LENGTH, minimum=1),
        backend=backend or None,
        workers=env_int(env, "IMAGE_PALETTE_WORKERS", DEFAULT_WORKERS, minimum=1),
        events_path=Path(events) if events else None,
    )


def env_file_path() -> Path:
    override = os.getenv(ENV_FILE_VAR, "").strip()
    return Path(override) if override else Path.cwd() / ".env"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings; process variables win over the `.env` file."""

    env = read_env_file(env_file_path(), ENV_PREFIX)
    env.update({key: value for key, value in os.environ.items() if key.startswith(ENV_PREFIX)})
    return settings_from_env(env)
