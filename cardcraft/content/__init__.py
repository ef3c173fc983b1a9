"""
Starter Content - Built-in stickers, cards and game settings.

Used when no config directory is given (CLI quick start, tests).
Entries use the same JSON shape as the config files.

Card structure:
- Race (Elf, Dwarf, Human, Gnome)
- Slot count (maxSlotCount)
- Starting stickers filling the first slots
"""

from __future__ import annotations

from ..catalog import Catalog, GameConfig


def _resource_sticker(sticker_id: str, name: str, kind: str, value: int, category: str | None = None) -> dict:
    return {
        "id": sticker_id,
        "name": name,
        "description": f"+{value} {kind}",
        "image": f"stickers/{sticker_id}.png",
        "type": category or kind,
        "effects": [{"type": "Resource", "resourceType": kind, "value": value}],
    }


STARTER_STICKERS: list[dict] = [
    _resource_sticker("power_1", "Sword", "Power", 1),
    _resource_sticker("power_2", "Greatsword", "Power", 2),
    _resource_sticker("construction_1", "Hammer", "Construction", 1),
    _resource_sticker("construction_2", "Anvil", "Construction", 2),
    _resource_sticker("invention_1", "Scroll", "Invention", 1),
    _resource_sticker("invention_2", "Tome", "Invention", 2),
    {
        "id": "wild_1",
        "name": "Gem",
        "description": "+1 to every resource",
        "image": "stickers/wild_1.png",
        "type": "Wild",
        "effects": [
            {"type": "Resource", "resourceType": "Power", "value": 1},
            {"type": "Resource", "resourceType": "Construction", "value": 1},
            {"type": "Resource", "resourceType": "Invention", "value": 1},
        ],
    },
]


STARTER_CARDS: list[dict] = [
    {
        "id": "human_peasant",
        "name": "Peasant",
        "race": "Human",
        "image": "cards/human_peasant.png",
        "startingStickers": ["construction_1"],
        "maxSlotCount": 3,
    },
    {
        "id": "dwarf_smith",
        "name": "Smith",
        "race": "Dwarf",
        "image": "cards/dwarf_smith.png",
        "startingStickers": ["construction_1", "power_1"],
        "maxSlotCount": 3,
    },
    {
        "id": "elf_scout",
        "name": "Scout",
        "race": "Elf",
        "image": "cards/elf_scout.png",
        "startingStickers": ["power_1"],
        "maxSlotCount": 2,
    },
    {
        "id": "gnome_tinkerer",
        "name": "Tinkerer",
        "race": "Gnome",
        "image": "cards/gnome_tinkerer.png",
        "startingStickers": ["invention_1"],
        "maxSlotCount": 4,
    },
]


STARTER_GAME: dict = {
    "player_hand_size": 5,
    "deck_limit": 20,
    "starting_cards": [
        {"human_peasant": 4},
        {"dwarf_smith": 2},
        {"elf_scout": 3},
        {"gnome_tinkerer": 3},
    ],
}


def starter_game_config() -> GameConfig:
    return GameConfig.model_validate(STARTER_GAME)


def starter_catalog() -> Catalog:
    """Catalog built from the starter content."""
    return Catalog.from_config(STARTER_STICKERS, STARTER_CARDS, starter_game_config())


__all__ = [
    "STARTER_STICKERS",
    "STARTER_CARDS",
    "STARTER_GAME",
    "starter_game_config",
    "starter_catalog",
]
