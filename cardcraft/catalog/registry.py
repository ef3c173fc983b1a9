"""
Registries - Read-only lookup of stickers and cards by configuration id.

Registries are plain objects, constructed once at startup and passed to
whatever builds cards and hands. They are never mutated after load().

The Catalog bundles both registries; it is the configuration store the
rest of the game receives.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable
import logging

from pydantic import ValidationError

from ..engine_core.card import Card
from ..engine_core.resources import Race
from ..engine_core.sticker import ResourceEffect, Sticker
from .errors import ConfigurationError, UnknownCardError, UnknownStickerError
from .schemas import CardConfig, GameConfig, StickerConfig
from .validation import validate_catalog

logger = logging.getLogger(__name__)


def _parse(model: type, entries: Iterable[Any], label: str) -> list:
    """Parse raw dicts into config models, collecting every failure."""
    parsed = []
    errors: list[str] = []
    for i, entry in enumerate(entries):
        if isinstance(entry, model):
            parsed.append(entry)
            continue
        try:
            parsed.append(model.model_validate(entry))
        except ValidationError as e:
            entry_id = entry.get("id", f"#{i}") if isinstance(entry, dict) else f"#{i}"
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"])
                errors.append(f"{label} '{entry_id}': {loc}: {err['msg']}")
    if errors:
        raise ConfigurationError(errors)
    return parsed


def sticker_from_config(config: StickerConfig) -> Sticker:
    """Convert a sticker config entry into the immutable Sticker value."""
    return Sticker(
        sticker_id=config.id,
        name=config.name,
        description=config.description,
        image=config.image,
        category=config.type,
        effects=tuple(
            ResourceEffect(resource_kind=effect.resource_type, magnitude=effect.value)
            for effect in config.effects
        ),
    )


class StickerRegistry:
    """Sticker configuration by id."""

    def __init__(self):
        self._configs: dict[str, StickerConfig] = {}
        self._stickers: dict[str, Sticker] = {}

    def load(self, entries: Iterable[Any]) -> None:
        """
        Load sticker configuration.

        Raises ConfigurationError on any malformed entry, including an
        unrecognized effect type.
        """
        for config in _parse(StickerConfig, entries, "Sticker"):
            self._configs[config.id] = config
            self._stickers[config.id] = sticker_from_config(config)
        logger.info("Loaded %d sticker(s)", len(self._stickers))

    def get(self, sticker_id: str) -> Sticker:
        """Resolve a sticker. Raises UnknownStickerError if absent."""
        sticker = self._stickers.get(sticker_id)
        if sticker is None:
            raise UnknownStickerError(sticker_id)
        return sticker

    def find(self, sticker_id: str) -> Sticker | None:
        return self._stickers.get(sticker_id)

    def get_config(self, sticker_id: str) -> StickerConfig | None:
        return self._configs.get(sticker_id)

    @property
    def configs(self) -> list[StickerConfig]:
        return list(self._configs.values())

    def __contains__(self, sticker_id: str) -> bool:
        return sticker_id in self._stickers

    def __len__(self) -> int:
        return len(self._stickers)


class CardRegistry:
    """Card configuration by id, and the factory for card instances."""

    def __init__(self, stickers: StickerRegistry):
        self._stickers = stickers
        self._configs: dict[str, CardConfig] = {}

    def load(self, entries: Iterable[Any]) -> None:
        for config in _parse(CardConfig, entries, "Card"):
            self._configs[config.id] = config
        logger.info("Loaded %d card(s)", len(self._configs))

    def get_config(self, card_id: str) -> CardConfig | None:
        return self._configs.get(card_id)

    @property
    def configs(self) -> list[CardConfig]:
        return list(self._configs.values())

    def create_card(self, card_id: str) -> Card:
        """
        Create a new physical card instance.

        Raises UnknownCardError / UnknownStickerError if the configuration
        is inconsistent.
        """
        config = self._configs.get(card_id)
        if config is None:
            raise UnknownCardError(card_id)

        starting = [
            self._stickers.get(sticker_id) if sticker_id is not None else None
            for sticker_id in config.starting_stickers
        ]
        return Card.build(
            card_id=config.id,
            name=config.name,
            race=Race.from_config(config.race),
            image=config.image,
            slot_count=config.max_slot_count,
            starting_stickers=starting,
        )

    def __contains__(self, card_id: str) -> bool:
        return card_id in self._configs

    def __len__(self) -> int:
        return len(self._configs)


@dataclass
class Catalog:
    """
    Configuration store passed down to sessions.

    Usage:
        catalog = Catalog.from_config(stickers_json, cards_json)
        card = catalog.cards.create_card("elf_scout")
    """
    stickers: StickerRegistry
    cards: CardRegistry
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_config(
        cls,
        stickers: Iterable[Any],
        cards: Iterable[Any],
        game: GameConfig | None = None,
    ) -> Catalog:
        """
        Build and cross-check both registries.

        Raises ConfigurationError if any reference is dangling.
        """
        sticker_configs = _parse(StickerConfig, stickers, "Sticker")
        card_configs = _parse(CardConfig, cards, "Card")

        result = validate_catalog(sticker_configs, card_configs, game)
        if not result.valid:
            raise ConfigurationError(result.errors)
        for warning in result.warnings:
            logger.warning("%s", warning)

        sticker_registry = StickerRegistry()
        sticker_registry.load(sticker_configs)
        card_registry = CardRegistry(sticker_registry)
        card_registry.load(card_configs)
        return cls(stickers=sticker_registry, cards=card_registry, warnings=result.warnings)
