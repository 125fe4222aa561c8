"""Launcher configuration file and the game's launch parameters."""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

_NAME_PLACEHOLDER = "mod_imported_from_old_preset"

_DEFAULT_CONFIG: dict[str, Any] = {
    "mods": [],
    "parameters": {
        "checkSignatures": False,
        "connect": None,
        "cpuCount": -1,
        "customParameters": None,
        "dlcContact": False,
        "dlcGlobalMobilization": False,
        "dlcSogPrairieFire": False,
        "dlcCSLA": False,
        "dlcWesternSahara": False,
        "enableHT": False,
        "environmentVariables": None,
        "exThreads": -1,
        "filePatching": False,
        "host": False,
        "hugepages": False,
        "name": None,
        "noLogs": False,
        "noPause": False,
        "noSplash": False,
        "par": None,
        "password": None,
        "port": None,
        "skipIntro": False,
        "window": False,
        "world": None,
    },
    "settings": {"theme": "System"},
}


def default_config() -> dict[str, Any]:
    """Return a fresh copy of the configuration written for a new install."""
    return copy.deepcopy(_DEFAULT_CONFIG)


def _dump(data: Any) -> str:
    return json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)


def convert_old_mod_format_to_new_format(mods: dict[str, Any]) -> list[dict[str, Any]]:
    """Turn the old ``{"workshop": [...], "custom": [...]}`` layout into a flat list."""
    converted = [
        {"path": mod["id"], "name": _NAME_PLACEHOLDER, "enabled": True}
        for mod in mods["workshop"]
    ]
    converted.extend(
        {"path": mod["path"], "name": _NAME_PLACEHOLDER, "enabled": mod["enabled"]}
        for mod in mods["custom"]
    )
    return converted


def is_old_mod_format(mods: Any) -> bool:
    """The old format stored mods in an object instead of a list."""
    return not isinstance(mods, list)


def _create_default_config(config_file: Path) -> None:
    if config_file.exists():
        return
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(_dump(default_config()), encoding="utf-8")


class Settings:
    """The launcher's JSON configuration, created with defaults when missing."""

    def __init__(self, config_file_path: str | os.PathLike[str]) -> None:
        self.config_file = Path(config_file_path)
        self.settings: dict[str, Any] = {}
        _create_default_config(self.config_file)
        try:
            loaded = json.loads(self.config_file.read_text(encoding="utf-8"))
            if not isinstance(loaded, dict):
                raise TypeError("configuration is not a JSON object")
            self.settings = loaded
            if is_old_mod_format(self.settings["mods"]):
                self.settings["mods"] = convert_old_mod_format_to_new_format(
                    self.settings["mods"]
                )
        except (OSError, ValueError, KeyError, TypeError) as exc:
            _log.warning("Error loading settings from %s:\n%s", self.config_file, exc)

    def get_launch_parameters(self) -> str:
        """Build the command-line arguments from the ``parameters`` section."""
        parameters = self.settings.get("parameters") or {}
        parts = []
        for key, value in sorted(parameters.items()):
            if key.startswith(("dlc", "proton")):
                continue
            if key == "customParameters" and isinstance(value, str):
                parts.append(f" {value}")
            elif isinstance(value, bool):
                if value:
                    parts.append(f" -{key}")
            elif isinstance(value, str):
                parts.append(f" -{key}={value}")
            elif isinstance(value, int) and value != -1:
                parts.append(f" -{key}={value}")
        return "".join(parts)

    def save_settings_to_disk(self) -> None:
        self.config_file.write_text(_dump(self.settings), encoding="utf-8")