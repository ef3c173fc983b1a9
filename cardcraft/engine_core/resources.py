"""
Resource Kinds - Enumerations shared by stickers, cards and the resource pool.
"""

from __future__ import annotations
from enum import Enum


class ResourceKind(Enum):
    """The three resource tracks a card or sticker contributes to."""
    POWER = "Power"
    CONSTRUCTION = "Construction"
    INVENTION = "Invention"


class StickerCategory(Enum):
    """Sticker categories (display/shop grouping)."""
    POWER = "Power"
    CONSTRUCTION = "Construction"
    INVENTION = "Invention"
    WILD = "Wild"


class Race(Enum):
    """Card races."""
    ELF = "Elf"
    DWARF = "Dwarf"
    HUMAN = "Human"
    GNOME = "Gnome"

    @classmethod
    def from_config(cls, name: str | None) -> Race:
        """Map a config string to a race, defaulting to HUMAN."""
        if name:
            for race in cls:
                if race.value.lower() == name.lower():
                    return race
        return cls.HUMAN
