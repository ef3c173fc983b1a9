"""
Game Session - Wires configuration, deck, hand and resources together.

LIFECYCLE:
1. Load configuration → Catalog + GameConfig (startup, may raise)
2. Create session → deck built from starting cards, shuffled, hand drawn
3. During a day:
   - Play selected cards for one resource (cards go to discard)
   - Optionally discard the hand and draw a fresh one
   - Apply stickers to cards in hand
4. End the day → hand discarded (resources reset), discard recycled,
   new hand drawn

The session is in-memory only. Nothing is persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable
import logging
import random
import time
import uuid

from ..catalog import Catalog, GameConfig
from ..engine_core.card import Card
from ..engine_core.deck import Deck, DeckPosition
from ..engine_core.hand import PlayerHand
from ..engine_core.resource_pool import ResourcePool
from ..engine_core.resources import ResourceKind
from .schemas import CardInfo, ResourcesInfo, SessionSnapshot, SlotInfo, ZoneInfo

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """
    A single-player game in progress.

    Contains:
    - The catalog the session was built from
    - The player's deck, hand and resource pool
    - Day counter and metadata
    """
    session_id: str
    catalog: Catalog
    deck: Deck[Card]
    hand: PlayerHand
    resources: ResourcePool
    created_at: float
    day: int = 1
    metadata: dict = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        catalog: Catalog,
        game_config: GameConfig,
        seed: int | None = None,
    ) -> GameSession:
        """
        Build a new session and draw the opening hand.

        Raises UnknownCardError if game_config references a card the
        catalog does not know.
        """
        rng = random.Random(seed)
        card_ids = game_config.starting_card_ids()
        deck_limit = game_config.deck_limit if game_config.deck_limit is not None else len(card_ids)

        deck: Deck[Card] = Deck(shuffle=False, deck_limit=deck_limit, rng=rng)
        for card_id in card_ids:
            deck.add_to_deck(catalog.cards.create_card(card_id), DeckPosition.BOTTOM)
        deck.shuffle()

        resources = ResourcePool()
        hand = PlayerHand(deck, game_config.player_hand_size, resources=resources)

        session = cls(
            session_id=str(uuid.uuid4()),
            catalog=catalog,
            deck=deck,
            hand=hand,
            resources=resources,
            created_at=time.time(),
            metadata={"seed": seed},
        )
        hand.draw_up_to_limit()
        logger.info(
            "Session %s created with %d card(s), hand of %d",
            session.session_id, len(card_ids), hand.size,
        )
        return session

    def play_cards_for_resource(self, instance_ids: Iterable[str], kind: ResourceKind) -> int:
        """
        Play cards from hand for one resource.

        Each card's `kind` value is added to the pool and the card is
        discarded. Ids not in hand are skipped. Returns the amount gained.
        """
        gained = 0
        for instance_id in instance_ids:
            card = self.hand.discard_by_unique_id(instance_id)
            if card is None:
                logger.debug("Card %s not in hand; skipped", instance_id)
                continue
            gained += card.resource_value(kind)

        if gained:
            self.resources.add(kind, gained)
        return gained

    def discard_and_draw(self) -> int:
        return self.hand.discard_and_draw()

    def end_day(self) -> int:
        """
        Close the day: discard the hand, recycle the discard pile and draw.

        Returns the number of cards drawn for the new day.
        """
        self.hand.discard_hand()
        self.hand.shuffle_discard_into_deck()
        drawn = self.hand.draw_up_to_limit()
        self.day += 1
        logger.info("Day %d begins with %d card(s) in hand", self.day, self.hand.size)
        return drawn

    def apply_sticker(self, instance_id: str, slot_index: int, sticker_id: str) -> bool:
        """
        Put a sticker on a card in hand.

        Returns False if the card is not in hand or the slot is out of
        range. Raises UnknownStickerError for an unknown sticker id.
        """
        sticker = self.catalog.stickers.get(sticker_id)
        card = self.hand.find(instance_id)
        if card is None:
            return False
        return card.apply_sticker(slot_index, sticker)

    def add_card(self, card_id: str, position: DeckPosition = DeckPosition.TOP) -> Card:
        """Create a new card instance and add it to the draw pile."""
        card = self.catalog.cards.create_card(card_id)
        self.deck.add_to_deck(card, position)
        return card

    def snapshot(self) -> SessionSnapshot:
        """Read-only view of the whole session."""
        pool = self.resources
        return SessionSnapshot(
            session_id=self.session_id,
            day=self.day,
            hand_limit=self.hand.hand_limit,
            deck_limit=self.deck.deck_limit,
            total_cards=self.hand.total_card_count,
            hand=_zone_info("hand", self.hand.cards),
            draw_pile=_zone_info("draw_pile", self.deck.draw_pile),
            discard_pile=_zone_info("discard_pile", self.deck.discard_pile),
            resources=ResourcesInfo(
                power=pool.amount(ResourceKind.POWER),
                construction=pool.amount(ResourceKind.CONSTRUCTION),
                invention=pool.amount(ResourceKind.INVENTION),
            ),
        )


def card_info(card: Card) -> CardInfo:
    """Convert a card to its display schema."""
    return CardInfo(
        card_id=card.card_id,
        instance_id=card.instance_id,
        name=card.name,
        race=card.race.value,
        image=card.image or None,
        power=card.power_value(),
        construction=card.construction_value(),
        invention=card.invention_value(),
        slots=[
            SlotInfo(
                index=slot.index,
                sticker_id=slot.occupant.sticker_id if slot.occupant else None,
                sticker_name=slot.occupant.name if slot.occupant else None,
                replaceable=slot.replaceable,
            )
            for slot in card.slots
        ],
    )


def _zone_info(zone_type: str, cards: list[Card]) -> ZoneInfo:
    return ZoneInfo(
        zone_id=zone_type,
        zone_type=zone_type,
        card_count=len(cards),
        cards=[card_info(c) for c in cards],
    )
