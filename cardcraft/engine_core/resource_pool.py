"""
Resource Pool - Per-round totals of Power, Construction and Invention.

Cards played for a resource add to the pool; buildings, recruits and
other consumers spend from it. The pool is reset at every round
boundary (PlayerHand.discard_hand()).
"""

from __future__ import annotations
import logging

from .events import EventEmitter, ResourceChanged
from .resources import ResourceKind

logger = logging.getLogger(__name__)

_RESET_ORDER = (ResourceKind.INVENTION, ResourceKind.CONSTRUCTION, ResourceKind.POWER)


class ResourcePool:
    """Tracks the current amount of each resource kind."""

    def __init__(self):
        self._amounts: dict[ResourceKind, int] = {kind: 0 for kind in ResourceKind}
        self.events = EventEmitter()

    def amount(self, kind: ResourceKind) -> int:
        return self._amounts[kind]

    def has_enough(self, kind: ResourceKind, amount: int) -> bool:
        return self._amounts[kind] >= amount

    def add(self, kind: ResourceKind, amount: int) -> None:
        """Add to a resource. Raises ValueError on a negative amount."""
        if amount < 0:
            raise ValueError(f"Amount of {kind.value} to add must be positive")
        previous = self._amounts[kind]
        self._amounts[kind] = previous + amount
        logger.debug("Added %d %s (now %d)", amount, kind.value, self._amounts[kind])
        self.events.emit(ResourceChanged(kind=kind, amount=self._amounts[kind], previous_amount=previous))

    def consume(self, kind: ResourceKind, amount: int) -> bool:
        """
        Spend from a resource.

        Returns False without changing anything if there is not enough.
        Raises ValueError on a negative amount.
        """
        if amount < 0:
            raise ValueError(f"Amount of {kind.value} to consume must be positive")
        previous = self._amounts[kind]
        if amount > previous:
            return False
        self._amounts[kind] = previous - amount
        self.events.emit(ResourceChanged(kind=kind, amount=self._amounts[kind], previous_amount=previous))
        return True

    def reset_resources(self) -> None:
        """
        Zero every resource, emitting only for those that changed.

        All amounts are zeroed before any event fires. Events go out in
        Invention, Construction, Power order.
        """
        previous = dict(self._amounts)
        for kind in self._amounts:
            self._amounts[kind] = 0
        for kind in _RESET_ORDER:
            if previous[kind] != 0:
                self.events.emit(ResourceChanged(kind=kind, amount=0, previous_amount=previous[kind]))

    def snapshot(self) -> dict[ResourceKind, int]:
        return dict(self._amounts)
