"""Launch-time helpers: path shortening, parameter checks and status texts."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .ui_mod import UiMod

GAME_PATH_PLACEHOLDER = "~dayz"
STYLESHEET_SUFFIX = ".stylesheet"
WORKSHOP_ITEM_URL = "https://steamcommunity.com/sharedfiles/filedetails/?id="

# DLC switches in the parameters section and the game sub-directories they add.
DLC_DIRECTORIES: tuple[tuple[str, str], ...] = (
    ("dlcContact", "Contact"),
    ("dlcGlobalMobilization", "GM"),
    ("dlcSogPrairieFire", "vn"),
    ("dlcCSLA", "CSLA"),
    ("dlcWesternSahara", "WS"),
)

_UNSIGNED_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")
_UINT64_LIMIT = 2**64
_MOD_NAME_WIDTH = 40


def ui_path_to_full_path(ui_path: str, game_path: str | os.PathLike[str]) -> str:
    """Expand the game directory placeholder in a path shown in the mod list."""
    return ui_path.replace(GAME_PATH_PLACEHOLDER, os.fspath(game_path))


def full_path_to_ui_path(path: str, game_path: str | os.PathLike[str]) -> str:
    """Shorten the game directory in ``path`` to its placeholder."""
    game = os.fspath(game_path)
    if not game:
        return path
    return path.replace(game, GAME_PATH_PLACEHOLDER)


def is_workshop_mod(path_or_workshop_id: str) -> bool:
    """A workshop mod is named by a positive number; anything else is a path."""
    match = _UNSIGNED_PREFIX.match(path_or_workshop_id)
    if match is None:
        return False
    sign, digits = match.groups()
    value = int(digits)
    if value >= _UINT64_LIMIT:
        return False
    if sign == "-":
        value = -value % _UINT64_LIMIT
    return value > 0


def validate_parameters(parameters: Mapping[str, Any]) -> None:
    """Raise ValueError when an enabled text parameter is left blank."""
    profile = parameters.get("name")
    if isinstance(profile, str) and not profile.strip():
        raise ValueError("Parameters -> Profile cannot be empty")
    parameter_file = parameters.get("par")
    if isinstance(parameter_file, str) and not parameter_file.strip():
        raise ValueError("Parameters -> Parameter file cannot be empty")


def dlc_mod_paths(
    parameters: Mapping[str, Any], game_path: str | os.PathLike[str]
) -> list[Path]:
    """Return the directories of the enabled DLCs, in load order."""
    game = Path(game_path)
    return [game / directory for key, directory in DLC_DIRECTORIES if parameters.get(key)]


def selection_counter_text(workshop_mod_count: int, custom_mod_count: int) -> str:
    total = workshop_mod_count + custom_mod_count
    return (
        f"Selected {total} mods ({workshop_mod_count} from workshop, "
        f"{custom_mod_count} custom)"
    )


def running_status_text(pid: int | None) -> str:
    """Status line for the game process; ``None`` or -1 means not running."""
    if pid is None or pid == -1:
        return "Status: DayZ is not running"
    return f"Status: DayZ is running, PID: {pid}"


def download_status_text(mod_name: str, bytes_downloaded: int, bytes_total: int) -> str:
    """Status line for a workshop download in progress."""
    percentage = int(bytes_downloaded / bytes_total * 100) if bytes_total > 0 else 0
    return (
        f"Steam Workshop - downloading {mod_name[:_MOD_NAME_WIDTH]} - {percentage}%"
    )


def mods_to_settings(mods: Iterable[UiMod]) -> list[dict[str, Any]]:
    """Represent mod list rows as entries of the configuration's ``mods`` list."""
    return [
        {"enabled": mod.enabled, "name": mod.name, "path": mod.path_or_workshop_id}
        for mod in mods
    ]


def workshop_mods_to_txt(mods: Iterable[UiMod]) -> str:
    """List enabled workshop mods with their workshop page, one per line."""
    return "".join(
        f"{mod.name} - {WORKSHOP_ITEM_URL}{mod.path_or_workshop_id}\n"
        for mod in mods
        if mod.enabled and mod.is_workshop_mod
    )


def ensure_extension(filename: str, extension: str) -> str:
    """Append ``extension`` unless ``filename`` already ends with it."""
    return filename if filename.endswith(extension) else filename + extension


def theme_name(entry: str) -> str:
    """Theme name shown for a stylesheet resource file name."""
    return entry.replace(STYLESHEET_SUFFIX, "")