"""
Catalog Validation - Cross-reference checks for parsed configuration.

Validates that:
1. Ids are unique within stickers and within cards
2. Every starting sticker references a known sticker
3. Starting stickers fit the card's slots (warning only)
4. Game config only references known cards
"""

from __future__ import annotations
from dataclasses import dataclass

from .schemas import CardConfig, GameConfig, StickerConfig


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_catalog(
    stickers: list[StickerConfig],
    cards: list[CardConfig],
    game: GameConfig | None = None,
) -> ValidationResult:
    """
    Validate parsed sticker and card configuration.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    errors.extend(_duplicate_ids("Sticker", [s.id for s in stickers]))
    errors.extend(_duplicate_ids("Card", [c.id for c in cards]))

    sticker_ids = {s.id for s in stickers}
    card_ids = {c.id for c in cards}

    for card in cards:
        errors.extend(_validate_card(card, sticker_ids))
        if len(card.starting_stickers) > card.max_slot_count:
            warnings.append(
                f"Card '{card.id}' has {len(card.starting_stickers)} starting stickers "
                f"but {card.max_slot_count} slot(s); extras will be dropped"
            )

    for sticker in stickers:
        if not sticker.effects:
            warnings.append(f"Sticker '{sticker.id}' has no effects")

    if game is not None:
        for card_id in game.starting_card_ids():
            if card_id not in card_ids:
                errors.append(f"Game config references unknown card '{card_id}'")
        if not game.starting_cards:
            warnings.append("No starting cards defined - deck will be empty")

    if not cards:
        warnings.append("No cards defined")

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_card(card: CardConfig, sticker_ids: set[str]) -> list[str]:
    """Validate a single card's sticker references."""
    errors = []
    if not card.name:
        errors.append(f"Card '{card.id}' has empty name")
    for sticker_id in card.starting_stickers:
        if sticker_id is not None and sticker_id not in sticker_ids:
            errors.append(f"Card '{card.id}' references unknown sticker '{sticker_id}'")
    return errors


def _duplicate_ids(kind: str, ids: list[str]) -> list[str]:
    seen: set[str] = set()
    errors = []
    for item_id in ids:
        if item_id in seen:
            errors.append(f"Duplicate {kind.lower()} id '{item_id}'")
        seen.add(item_id)
    return errors
