"""
Card Model - Card instances with a fixed row of sticker slots.

Design principles:
- Two-tier identity: card_id (configuration) + instance_id (physical card)
- Slot count is fixed at construction
- Resource values are derived from the slot occupants
- The only mutation is replacing a slot occupant via apply_sticker()
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence
import logging
import uuid

from .events import EventEmitter, StickerApplied
from .resources import ResourceKind, Race
from .sticker import Sticker

logger = logging.getLogger(__name__)


def new_instance_id() -> str:
    """Generate a globally unique physical-card identity."""
    return str(uuid.uuid4())


@dataclass
class CardSlot:
    """
    One sticker position on a card.

    `replaceable` is carried from the data model but is not checked by
    apply_sticker().
    """
    index: int
    occupant: Sticker | None = None
    replaceable: bool = False

    @property
    def is_empty(self) -> bool:
        return self.occupant is None


@dataclass(eq=False)
class Card:
    """
    A card instance in the game.

    Note: several instances may share a card_id (two copies of the same
    card). Equality and hashing use instance_id only.
    """
    card_id: str  # References CardConfig.id
    instance_id: str  # Unique per physical card
    name: str
    race: Race = Race.HUMAN
    image: str = ""
    slots: tuple[CardSlot, ...] = ()
    events: EventEmitter = field(default_factory=EventEmitter, repr=False)

    def __hash__(self):
        return hash(self.instance_id)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.instance_id == other.instance_id

    @classmethod
    def build(
        cls,
        card_id: str,
        name: str,
        slot_count: int,
        starting_stickers: Sequence[Sticker | None] = (),
        race: Race = Race.HUMAN,
        image: str = "",
        instance_id: str | None = None,
    ) -> Card:
        """
        Create a card with `slot_count` slots.

        Slot i gets starting_stickers[i] if present, else stays empty. A None
        entry leaves its slot empty.
        Starting stickers beyond slot_count are dropped.
        """
        if len(starting_stickers) > slot_count:
            logger.warning(
                "Card %s has %d starting stickers but only %d slots; extra stickers dropped",
                card_id, len(starting_stickers), slot_count,
            )
        slots = tuple(
            CardSlot(
                index=i,
                occupant=starting_stickers[i] if i < len(starting_stickers) else None,
            )
            for i in range(slot_count)
        )
        return cls(
            card_id=card_id,
            instance_id=instance_id or new_instance_id(),
            name=name,
            race=race,
            image=image,
            slots=slots,
        )

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    @property
    def stickers(self) -> list[Sticker]:
        """Stickers currently attached, in slot order."""
        return [slot.occupant for slot in self.slots if slot.occupant is not None]

    def apply_sticker(self, slot_index: int, sticker: Sticker) -> bool:
        """
        Place a sticker into a slot, replacing any current occupant.

        Returns False (no mutation, no event) if slot_index is out of range.
        """
        if slot_index < 0 or slot_index >= len(self.slots):
            return False

        slot = self.slots[slot_index]
        previous = slot.occupant
        slot.occupant = sticker
        logger.debug(
            "Applied sticker %s to card %s slot %d (replaced %s)",
            sticker.sticker_id, self.instance_id, slot_index,
            previous.sticker_id if previous else None,
        )
        self.events.emit(StickerApplied(card=self, sticker=sticker, slot_index=slot_index))
        return True

    def resource_value(self, kind: ResourceKind) -> int:
        """Sum of `kind` contributions over occupied slots."""
        return sum(
            slot.occupant.compute_value(kind)
            for slot in self.slots
            if slot.occupant is not None
        )

    def power_value(self) -> int:
        return self.resource_value(ResourceKind.POWER)

    def construction_value(self) -> int:
        return self.resource_value(ResourceKind.CONSTRUCTION)

    def invention_value(self) -> int:
        return self.resource_value(ResourceKind.INVENTION)

    def best_resource(self) -> tuple[ResourceKind, int]:
        """The track this card contributes most to (ties go to enum order)."""
        best_kind = ResourceKind.POWER
        best_value = self.resource_value(best_kind)
        for kind in ResourceKind:
            value = self.resource_value(kind)
            if value > best_value:
                best_kind, best_value = kind, value
        return best_kind, best_value
