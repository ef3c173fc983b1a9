"""
Pytest fixtures for Cardcraft tests.
"""

import random

import pytest

from ..catalog import Catalog
from ..content import STARTER_CARDS, STARTER_STICKERS, starter_game_config
from ..engine_core.card import Card
from ..engine_core.deck import Deck
from ..engine_core.hand import PlayerHand
from ..engine_core.resource_pool import ResourcePool
from ..engine_core.resources import ResourceKind, StickerCategory
from ..engine_core.sticker import ResourceEffect, Sticker


def make_sticker(sticker_id: str, power: int = 0, construction: int = 0, invention: int = 0) -> Sticker:
    """Build a sticker with one effect per non-zero track."""
    effects = []
    for kind, value in (
        (ResourceKind.POWER, power),
        (ResourceKind.CONSTRUCTION, construction),
        (ResourceKind.INVENTION, invention),
    ):
        if value:
            effects.append(ResourceEffect(resource_kind=kind, magnitude=value))
    return Sticker(
        sticker_id=sticker_id,
        name=sticker_id.title(),
        category=StickerCategory.WILD,
        effects=tuple(effects),
    )


def make_cards(count: int, card_id: str = "peasant") -> list[Card]:
    """Plain cards with stable, readable instance ids."""
    return [
        Card.build(card_id=card_id, name="Peasant", slot_count=2, instance_id=f"{card_id}_{i}")
        for i in range(count)
    ]


class RecordingResources:
    """Resource collaborator that counts reset notifications."""

    def __init__(self):
        self.resets = 0

    def reset_resources(self) -> None:
        self.resets += 1


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def ten_cards() -> list[Card]:
    return make_cards(10)


@pytest.fixture
def deck(ten_cards, rng) -> Deck:
    """Unshuffled deck: peasant_0 is on top."""
    return Deck(ten_cards, shuffle=False, rng=rng)


@pytest.fixture
def recording_resources() -> RecordingResources:
    return RecordingResources()


@pytest.fixture
def hand(deck, recording_resources) -> PlayerHand:
    return PlayerHand(deck, hand_limit=5, resources=recording_resources)


@pytest.fixture
def resource_pool() -> ResourcePool:
    return ResourcePool()


@pytest.fixture
def starter_catalog() -> Catalog:
    return Catalog.from_config(STARTER_STICKERS, STARTER_CARDS)


@pytest.fixture
def game_config():
    return starter_game_config()
