"""
Events - Synchronous observer registration for engine state changes.

Observers (renderers, economy services, achievement tracking) subscribe
to an event class on an EventEmitter. Emission is:
- Synchronous: handlers run inside the mutating call
- Ordered: handlers run in registration order
- Unbuffered: nothing is queued or replayed

Handlers must not re-enter the emitter's owner to trigger the same
transition from inside their callback; ordering is undefined if they do.
"""

from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .card import Card
    from .resources import ResourceKind
    from .sticker import Sticker


Handler = Callable[[Any], None]


@dataclass(frozen=True)
class CardsChanged:
    """Hand contents changed (draw, discard, play)."""
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class HandDiscarded:
    """A non-empty hand was discarded."""


@dataclass(frozen=True)
class StickerApplied:
    """A sticker was placed into a card slot."""
    card: Card
    sticker: Sticker
    slot_index: int


@dataclass(frozen=True)
class ResourceChanged:
    """A resource amount in the pool changed."""
    kind: ResourceKind
    amount: int
    previous_amount: int


class EventEmitter:
    """
    Fan-out of events to handlers keyed by event class.

    Usage:
        emitter = EventEmitter()
        emitter.subscribe(CardsChanged, renderer.on_cards_changed)
        emitter.emit(CardsChanged(cards=(...)))
    """

    def __init__(self):
        self._handlers: dict[type, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: type, handler: Handler) -> None:
        """Register a handler for an event class."""
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Handler) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        handlers = self._handlers.get(event_type, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def emit(self, event: Any) -> None:
        """Deliver an event to every handler of its class, in order."""
        # Copy so a handler may unsubscribe itself during delivery
        for handler in list(self._handlers.get(type(event), [])):
            handler(event)

    def handler_count(self, event_type: type) -> int:
        return len(self._handlers.get(event_type, []))
