from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from lifegame.errors import ConfigError

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class GameSettings:
    seed: int | None
    log_level: str


def _parse_seed(raw: str | None) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"LIFEGAME_SEED must be an integer, got {raw!r}") from e


def _parse_log_level(raw: str | None) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown LIFEGAME_LOG_LEVEL: {raw!r}")
    return level


def settings_from_env() -> GameSettings:
    return GameSettings(
        seed=_parse_seed(os.environ.get("LIFEGAME_SEED")),
        log_level=_parse_log_level(os.environ.get("LIFEGAME_LOG_LEVEL")),
    )


def load_settings(*, env_file: Path | None = None) -> GameSettings:
    """Read settings from the environment, after loading a `.env` file if one exists.

    Values already present in the environment win over the file.
    """

    path = env_file if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)
    return settings_from_env()
