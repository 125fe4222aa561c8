"""A mod as shown in the mod list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UiMod:
    """One row of the mod list."""

    enabled: bool = False
    name: str = ""
    path_or_workshop_id: str = ""
    is_workshop_mod: bool = False

    def type_label(self) -> str:
        """Return the label shown in the type column."""
        return "workshop" if self.is_workshop_mod else "custom"