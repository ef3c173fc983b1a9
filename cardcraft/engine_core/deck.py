"""
Deck Engine - Generic draw pile / discard pile container.

The deck is written once and reused for any card-like item that exposes
a stable `instance_id`. It owns two ordered zones:
- Draw pile: index 0 is the next card drawn
- Discard pile: appended to, emptied only by shuffle_discard_into_deck()

Drawing never recycles the discard pile implicitly. Recycling is a
separate, caller-invoked operation.
"""

from __future__ import annotations
from enum import Enum
from typing import Generic, Iterable, Protocol, TypeVar
import logging
import random

logger = logging.getLogger(__name__)


class Identifiable(Protocol):
    """Anything with a stable per-instance identity."""
    instance_id: str


T = TypeVar("T", bound=Identifiable)


class DeckPosition(Enum):
    """Where add_to_deck() inserts."""
    TOP = "top"
    BOTTOM = "bottom"


class Deck(Generic[T]):
    """
    Draw pile and discard pile for one player.

    Usage:
        deck = Deck(cards, shuffle=True, rng=random.Random(42))
        drawn = deck.draw_from_deck(5)
        for card in drawn:
            deck.discard(card)
        deck.shuffle_discard_into_deck()
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        shuffle: bool = True,
        deck_limit: int | None = None,
        rng: random.Random | None = None,
    ):
        self._rng = rng or random.Random()
        self._draw_pile: list[T] = list(items)
        self._discard_pile: list[T] = []
        self._deck_limit = deck_limit if deck_limit is not None else len(self._draw_pile)

        if shuffle and self._draw_pile:
            self.shuffle()

    # ------------------------------------------------------------------
    # Zone transitions
    # ------------------------------------------------------------------

    def add_to_deck(self, item: T, position: DeckPosition = DeckPosition.TOP) -> None:
        """Insert an item at the top or bottom of the draw pile."""
        if position == DeckPosition.TOP:
            self._draw_pile.insert(0, item)
        else:
            self._draw_pile.append(item)

    def add_cards_to_deck(
        self, items: Iterable[T], position: DeckPosition = DeckPosition.TOP
    ) -> None:
        """Add items one at a time (TOP therefore reverses their order)."""
        for item in items:
            self.add_to_deck(item, position)

    def remove_from_deck(self, instance_id: str) -> T | None:
        """Remove an item from the draw pile by identity."""
        for i, item in enumerate(self._draw_pile):
            if item.instance_id == instance_id:
                return self._draw_pile.pop(i)
        return None

    def draw_from_deck(self, count: int = 1) -> list[T]:
        """
        Remove up to `count` items from the front of the draw pile.

        Returns fewer (possibly none) when the draw pile runs out.
        """
        if count <= 0:
            return []
        drawn = self._draw_pile[:count]
        del self._draw_pile[:count]
        logger.debug("Drew %d of %d requested (%d left)", len(drawn), count, len(self._draw_pile))
        return drawn

    def discard(self, item: T) -> None:
        """Put an item on top of the discard pile."""
        self._discard_pile.append(item)

    def shuffle(self) -> None:
        """Uniformly permute the draw pile in place."""
        self._rng.shuffle(self._draw_pile)

    def shuffle_discard_into_deck(self) -> None:
        """Move the whole discard pile into the draw pile, then shuffle."""
        moved = len(self._discard_pile)
        self._draw_pile.extend(self._discard_pile)
        self._discard_pile.clear()
        self.shuffle()
        logger.debug("Recycled %d discarded card(s) into deck of %d", moved, len(self._draw_pile))

    # ------------------------------------------------------------------
    # Deck limit
    # ------------------------------------------------------------------

    @property
    def deck_limit(self) -> int:
        return self._deck_limit

    def increase_deck_limit(self, amount: int) -> None:
        self._deck_limit += amount

    @property
    def deck_free_space(self) -> int:
        """Slots left under the deck limit (draw pile only)."""
        return max(0, self._deck_limit - len(self._draw_pile))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return len(self._draw_pile) == 0

    @property
    def deck_size(self) -> int:
        return len(self._draw_pile)

    @property
    def discard_size(self) -> int:
        return len(self._discard_pile)

    @property
    def draw_pile(self) -> list[T]:
        return list(self._draw_pile)

    @property
    def discard_pile(self) -> list[T]:
        return list(self._discard_pile)
