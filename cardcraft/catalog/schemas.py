"""
Pydantic Schemas for configuration - the JSON contract for game data.

These models define the exact shape of:
- stickers.json: list of StickerConfig
- cards.json: list of CardConfig
- game.json: GameConfig

Field names follow the JSON files (camelCase aliases); Python code uses
the snake_case attribute names.
"""

from typing import Any, Literal, Optional
from pydantic import BaseModel, Field, NonNegativeInt, model_validator

from ..engine_core.resources import ResourceKind, StickerCategory


_TRACK_KEYS = ("power", "construction", "invention")


class StickerEffectConfig(BaseModel):
    """One sticker effect. Only resource effects are recognized."""
    type: Literal["Resource"]
    resource_type: ResourceKind = Field(alias="resourceType")
    value: int

    model_config = {"populate_by_name": True, "frozen": True}


class StickerConfig(BaseModel):
    """Sticker configuration entry."""
    id: str = Field(min_length=1)
    name: str
    description: str = ""
    image: str = ""
    type: StickerCategory
    effects: list[StickerEffectConfig] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class CardConfig(BaseModel):
    """
    Card configuration entry.

    Accepts the flat layout (startingStickers list + maxSlotCount) and the
    older per-track layout (startingStickers/maxSlots keyed by
    power/construction/invention). Each track is cut or padded to its own
    slot count before the tracks are joined, so an empty slot is a null
    entry in starting_stickers.
    """
    id: str = Field(min_length=1)
    name: str
    description: str = ""
    image: str = ""
    race: str = "Human"
    starting_stickers: list[Optional[str]] = Field(default_factory=list, alias="startingStickers")
    max_slot_count: int = Field(0, ge=0, alias="maxSlotCount")

    model_config = {"populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def _flatten_tracks(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        stickers = data.get("startingStickers")
        max_slots = data.pop("maxSlots", None)

        if isinstance(stickers, dict) and isinstance(max_slots, dict):
            flat: list[Optional[str]] = []
            for key in _TRACK_KEYS:
                size = max(max_slots.get(key) or 0, 0)
                track = list(stickers.get(key) or [])[:size]
                flat.extend(track + [None] * (size - len(track)))
            data["startingStickers"] = flat
            data["maxSlotCount"] = len(flat)
        elif isinstance(stickers, dict):
            data["startingStickers"] = [
                sticker_id for key in _TRACK_KEYS for sticker_id in stickers.get(key) or []
            ]
        elif isinstance(max_slots, dict):
            data.setdefault("maxSlotCount", sum(max_slots.get(key) or 0 for key in _TRACK_KEYS))
        return data


class GameConfig(BaseModel):
    """Game/level settings used to build a session."""
    player_hand_size: int = Field(5, ge=0)
    deck_limit: Optional[int] = Field(None, ge=0)
    starting_cards: list[dict[str, NonNegativeInt]] = Field(
        default_factory=list,
        description="Entries of {card_id: copies}, in deck-building order",
    )

    def starting_card_ids(self) -> list[str]:
        """Expand starting_cards into one id per copy."""
        ids: list[str] = []
        for entry in self.starting_cards:
            for card_id, count in entry.items():
                ids.extend([card_id] * count)
        return ids
