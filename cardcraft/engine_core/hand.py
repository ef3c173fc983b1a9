"""
Player Hand - Bounded hand backed by a Deck.

The hand is the third card zone. Together with the deck's draw and
discard piles it satisfies:
- Every tracked card is in exactly one zone
- Draw/discard/recycle conserve the total card count
- play_card() hands ownership to the caller (card leaves the system)

Lifecycle events (CardsChanged, HandDiscarded) are emitted on `events`.
The resource collaborator is notified on every discard_hand(), even an
empty one: that call is the round boundary.
"""

from __future__ import annotations
from typing import Protocol
import logging

from .card import Card
from .deck import Deck
from .events import CardsChanged, EventEmitter, HandDiscarded

logger = logging.getLogger(__name__)


class ResourceResetListener(Protocol):
    """Collaborator told to clear per-hand resource state."""

    def reset_resources(self) -> None:
        ...


class PlayerHand:
    """
    A player's hand of cards.

    Usage:
        hand = PlayerHand(deck, hand_limit=5, resources=pool)
        hand.events.subscribe(CardsChanged, renderer.refresh)
        hand.draw_up_to_limit()
    """

    def __init__(
        self,
        deck: Deck[Card],
        hand_limit: int,
        resources: ResourceResetListener | None = None,
    ):
        self._deck = deck
        self._hand_limit = hand_limit
        self._resources = resources
        self._cards: list[Card] = []
        self.events = EventEmitter()

    @property
    def deck(self) -> Deck[Card]:
        return self._deck

    def draw_up_to_limit(self) -> int:
        """
        Draw from the deck until the hand reaches its limit.

        Returns the number of cards drawn (may be short if the draw pile
        runs out; the discard pile is not recycled).
        """
        deficit = self._hand_limit - len(self._cards)
        if deficit <= 0:
            return 0

        drawn = self._deck.draw_from_deck(deficit)
        self._cards.extend(drawn)
        if drawn:
            self._emit_cards_changed()
        return len(drawn)

    def discard_hand(self) -> None:
        """Discard every card in hand order, then signal the round boundary."""
        had_cards = bool(self._cards)
        for card in self._cards:
            self._deck.discard(card)
        self._cards = []

        if had_cards:
            self._emit_cards_changed()
            self.events.emit(HandDiscarded())

        if self._resources is not None:
            self._resources.reset_resources()

    def discard_and_draw(self) -> int:
        """Discard the hand and refill it from the current draw pile."""
        self.discard_hand()
        return self.draw_up_to_limit()

    def shuffle_discard_into_deck(self) -> None:
        """Recycle the discard pile into the draw pile."""
        self._deck.shuffle_discard_into_deck()

    def discard_card(self, index: int) -> Card | None:
        """Discard the card at `index`. None if the index is out of range."""
        if not self._valid_index(index):
            return None
        card = self._cards.pop(index)
        self._deck.discard(card)
        self._emit_cards_changed()
        return card

    def discard_by_unique_id(self, instance_id: str) -> Card | None:
        """Discard the card with `instance_id`. None if it is not in hand."""
        index = self.index_of(instance_id)
        if index is None:
            return None
        return self.discard_card(index)

    def play_card(self, index: int) -> Card | None:
        """
        Remove the card at `index` without discarding it.

        The caller owns the returned card from here on.
        """
        if not self._valid_index(index):
            return None
        card = self._cards.pop(index)
        self._emit_cards_changed()
        return card

    def index_of(self, instance_id: str) -> int | None:
        for i, card in enumerate(self._cards):
            if card.instance_id == instance_id:
                return i
        return None

    def find(self, instance_id: str) -> Card | None:
        index = self.index_of(instance_id)
        return self._cards[index] if index is not None else None

    def set_hand_limit(self, limit: int) -> None:
        """Change the limit. An over-limit hand is left as is."""
        self._hand_limit = limit

    @property
    def hand_limit(self) -> int:
        return self._hand_limit

    @property
    def cards(self) -> list[Card]:
        return list(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def total_card_count(self) -> int:
        """Cards across draw pile, discard pile and hand."""
        return self._deck.deck_size + self._deck.discard_size + len(self._cards)

    def _valid_index(self, index: int) -> bool:
        # Negative indices are rejected rather than wrapped
        return 0 <= index < len(self._cards)

    def _emit_cards_changed(self) -> None:
        logger.debug("Hand changed: %d card(s)", len(self._cards))
        self.events.emit(CardsChanged(cards=tuple(self._cards)))
