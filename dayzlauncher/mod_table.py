"""The ordered, selectable list of mods."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import replace

from .ui_mod import UiMod

CounterCallback = Callable[[int, int], None]


class ModTable:
    """Ordered mods with enabled flags, row moves and selection counters."""

    def __init__(self) -> None:
        self._rows: list[UiMod] = []
        self._counter_callback: CounterCallback | None = None

    def __len__(self) -> int:
        return len(self._rows)

    def _check_row(self, index: int) -> None:
        if not 0 <= index < len(self._rows):
            raise IndexError(f"row {index} out of range")

    def add_mod(self, mod: UiMod, index: int = -1) -> None:
        """Insert a copy of ``mod`` at ``index``; -1 appends."""
        if index == -1:
            index = len(self._rows)
        if not 0 <= index <= len(self._rows):
            raise IndexError(f"row {index} out of range")
        self._rows.insert(index, replace(mod))

    def remove_row(self, index: int) -> None:
        self._check_row(index)
        del self._rows[index]

    def contains_mod(self, path_or_workshop_id: str) -> bool:
        return any(mod.path_or_workshop_id == path_or_workshop_id for mod in self._rows)

    def set_enabled(self, index: int, enabled: bool) -> None:
        """Check or uncheck a row; counters are refreshed when the state changes."""
        self._check_row(index)
        mod = self._rows[index]
        if mod.enabled == bool(enabled):
            return
        mod.enabled = bool(enabled)
        self.update_mod_selection_counters()

    def disable_all_mods(self) -> None:
        for index in range(len(self._rows)):
            self.set_enabled(index, False)

    def get_mod_at(self, index: int) -> UiMod:
        self._check_row(index)
        return replace(self._rows[index])

    def get_mods(self) -> list[UiMod]:
        return [replace(mod) for mod in self._rows]

    def move_rows(self, rows: Iterable[int], drop_row: int) -> list[int]:
        """Move the given rows, in their order, to ``drop_row``; return their new indices."""
        selected = sorted(set(rows))
        for row in selected:
            self._check_row(row)
        if not 0 <= drop_row <= len(self._rows):
            raise IndexError(f"row {drop_row} out of range")

        moving = [self._rows[row] for row in selected]
        for row in reversed(selected):
            del self._rows[row]
            if row < drop_row:
                drop_row -= 1
        self._rows[drop_row:drop_row] = moving
        return list(range(drop_row, drop_row + len(moving)))

    def sort_by_enabled(self, descending: bool = False) -> None:
        """Stable sort on the enabled flag."""
        self._rows.sort(key=lambda mod: mod.enabled, reverse=descending)

    def set_mod_counter_callback(self, callback: CounterCallback | None) -> None:
        self._counter_callback = callback

    def update_mod_selection_counters(self) -> None:
        """Report (workshop, custom) counts of enabled mods to the callback."""
        if self._counter_callback is None:
            return
        enabled = [mod for mod in self._rows if mod.enabled]
        workshop = sum(1 for mod in enabled if mod.is_workshop_mod)
        self._counter_callback(workshop, len(enabled) - workshop)