"""
Engine Core - Card, sticker and deck-zone state.

The engine is the runtime that:
1. Models stickers and cards and derives resource values
2. Holds card instances in deck zones (draw pile, discard pile)
3. Moves cards between the deck and a bounded hand
4. Broadcasts lifecycle events to observers
"""

from .resources import ResourceKind, StickerCategory, Race
from .events import (
    EventEmitter,
    CardsChanged,
    HandDiscarded,
    StickerApplied,
    ResourceChanged,
)
from .sticker import Sticker, ResourceEffect
from .card import Card, CardSlot, new_instance_id
from .deck import Deck, DeckPosition
from .hand import PlayerHand
from .resource_pool import ResourcePool

__all__ = [
    "ResourceKind",
    "StickerCategory",
    "Race",
    "EventEmitter",
    "CardsChanged",
    "HandDiscarded",
    "StickerApplied",
    "ResourceChanged",
    "Sticker",
    "ResourceEffect",
    "Card",
    "CardSlot",
    "new_instance_id",
    "Deck",
    "DeckPosition",
    "PlayerHand",
    "ResourcePool",
]
