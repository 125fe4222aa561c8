"""Checks and helpers for the game and workshop directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_log = logging.getLogger(__name__)

_WORKSHOP_SUFFIX = "/../../workshop/content/221100"


def default_workshop_path(game_path: str | os.PathLike[str]) -> Path | None:
    """Return the canonical workshop directory next to the game, or None if absent."""
    candidate = Path(f"{os.fspath(game_path)}{_WORKSHOP_SUFFIX}")
    try:
        return candidate.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        _log.warning("%s", exc)
        return None


def is_workshop_path_valid(path: str | os.PathLike[str]) -> bool:
    return os.path.isdir(path)


def executable_directory(executable_path: str | os.PathLike[str]) -> str:
    """Return the directory holding the selected executable."""
    return os.path.dirname(os.fspath(executable_path))