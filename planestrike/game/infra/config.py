"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from planestrike.game.infra.app_data import resolve_game_root


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable runtime configuration sourced from environment."""

    seed: int | None = None
    fleet_max_attempts: int = 10_000
    autoplay_max_turns: int = 400


def load_game_config() -> GameConfig:
    """Load game configuration from ``PLANESTRIKE_*`` env vars."""
    return GameConfig(
        seed=_optional_int("PLANESTRIKE_SEED"),
        fleet_max_attempts=max(1, _int("PLANESTRIKE_FLEET_MAX_ATTEMPTS", 10_000)),
        autoplay_max_turns=max(1, _int("PLANESTRIKE_AUTOPLAY_MAX_TURNS", 400)),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order: ``appdata/config/.env``,
    ``appdata/config/.env.local``, ``.env``, ``.env.local``.
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env",
            "appdata/config/.env.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for IDE run configs with different working directory.
    return resolve_game_root() / path
