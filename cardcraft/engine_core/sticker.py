"""
Sticker Model - Immutable modifiers attached to card slots.

A sticker is a pure value:
- Identity and display data come from configuration
- Effects are typed; today only resource contributions exist
- Values are derived, never stored

The same Sticker instance can safely sit in several slots at once.
"""

from __future__ import annotations
from dataclasses import dataclass

from .resources import ResourceKind, StickerCategory


@dataclass(frozen=True)
class ResourceEffect:
    """Contributes `magnitude` to one resource track."""
    resource_kind: ResourceKind
    magnitude: int

    effect_type = "Resource"


@dataclass(frozen=True)
class Sticker:
    """
    A sticker definition resolved from configuration.

    Note: stickers are shared values, not per-card instances.
    """
    sticker_id: str
    name: str
    category: StickerCategory
    effects: tuple[ResourceEffect, ...] = ()
    description: str = ""
    image: str = ""

    def compute_value(self, kind: ResourceKind) -> int:
        """Sum of effect magnitudes contributing to `kind`."""
        return sum(
            effect.magnitude
            for effect in self.effects
            if effect.resource_kind == kind
        )

    @property
    def power_value(self) -> int:
        return self.compute_value(ResourceKind.POWER)

    @property
    def construction_value(self) -> int:
        return self.compute_value(ResourceKind.CONSTRUCTION)

    @property
    def invention_value(self) -> int:
        return self.compute_value(ResourceKind.INVENTION)
