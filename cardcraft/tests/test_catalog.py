"""
Tests for configuration schemas, registries, validation and loading.

Validates that:
- Config entries parse into stickers and cards
- Unknown effect types and dangling references are fatal
- Card instances get fresh identities
- Config files load from a directory
"""

import json

import pytest
from pydantic import ValidationError

from ..catalog import (
    CardConfig,
    CardRegistry,
    Catalog,
    ConfigurationError,
    GameConfig,
    StickerConfig,
    StickerRegistry,
    UnknownCardError,
    UnknownStickerError,
    load_catalog,
    load_game_config,
    validate_catalog,
)
from ..catalog import loader
from ..content import STARTER_CARDS, STARTER_GAME, STARTER_STICKERS
from ..engine_core.resources import ResourceKind, Race, StickerCategory


POWER_2 = {
    "id": "power_2",
    "name": "Greatsword",
    "description": "+2 Power",
    "image": "stickers/power_2.png",
    "type": "Power",
    "effects": [{"type": "Resource", "resourceType": "Power", "value": 2}],
}


class TestStickerRegistry:
    """Tests for sticker loading."""

    def test_load_and_get(self):
        registry = StickerRegistry()
        registry.load([POWER_2])

        sticker = registry.get("power_2")
        assert sticker.category == StickerCategory.POWER
        assert sticker.power_value == 2
        assert "power_2" in registry
        assert len(registry) == 1

    def test_unknown_effect_type_is_fatal(self):
        bad = {**POWER_2, "effects": [{"type": "Teleport", "resourceType": "Power", "value": 1}]}
        with pytest.raises(ConfigurationError) as exc_info:
            StickerRegistry().load([bad])
        assert any("power_2" in error for error in exc_info.value.errors)

    def test_unknown_sticker_category_is_fatal(self):
        with pytest.raises(ConfigurationError):
            StickerRegistry().load([{**POWER_2, "type": "Magic"}])

    def test_get_missing_raises(self):
        with pytest.raises(UnknownStickerError) as exc_info:
            StickerRegistry().get("nope")
        assert exc_info.value.sticker_id == "nope"

    def test_find_missing_returns_none(self):
        assert StickerRegistry().find("nope") is None

    def test_same_instance_shared(self):
        registry = StickerRegistry()
        registry.load([POWER_2])
        assert registry.get("power_2") is registry.get("power_2")


class TestCardConfig:
    """Tests for the card schema."""

    def test_flat_layout(self):
        config = CardConfig.model_validate({
            "id": "elf",
            "name": "Elf",
            "race": "Elf",
            "startingStickers": ["a", "b"],
            "maxSlotCount": 3,
        })
        assert config.starting_stickers == ["a", "b"]
        assert config.max_slot_count == 3

    def test_per_track_layout_flattened(self):
        config = CardConfig.model_validate({
            "id": "dwarf",
            "name": "Dwarf",
            "startingStickers": {"power": ["p"], "invention": ["i"]},
            "maxSlots": {"power": 1, "construction": 2, "invention": 1},
        })
        assert config.starting_stickers == ["p", None, None, "i"]
        assert config.max_slot_count == 4

    def test_per_track_extras_stay_in_their_track(self):
        config = CardConfig.model_validate({
            "id": "dwarf",
            "name": "Dwarf",
            "startingStickers": {"power": ["p", "p", "p"]},
            "maxSlots": {"power": 1, "construction": 2},
        })
        assert config.starting_stickers == ["p", None, None]
        assert config.max_slot_count == 3

    def test_per_track_slot_counts_without_stickers(self):
        config = CardConfig.model_validate({
            "id": "x",
            "name": "X",
            "maxSlots": {"power": 1, "construction": 1, "invention": 1},
        })
        assert config.starting_stickers == []
        assert config.max_slot_count == 3

    def test_negative_slot_count_rejected(self):
        with pytest.raises(Exception):
            CardConfig.model_validate({"id": "x", "name": "X", "maxSlotCount": -1})


class TestCardRegistry:
    """Tests for creating card instances."""

    def _registry(self, cards):
        stickers = StickerRegistry()
        stickers.load([POWER_2])
        registry = CardRegistry(stickers)
        registry.load(cards)
        return registry

    def test_create_card(self):
        registry = self._registry([{
            "id": "elf_scout",
            "name": "Scout",
            "race": "elf",
            "image": "scout.png",
            "startingStickers": ["power_2"],
            "maxSlotCount": 3,
        }])

        card = registry.create_card("elf_scout")

        assert card.card_id == "elf_scout"
        assert card.race == Race.ELF
        assert card.slot_count == 3
        assert card.power_value() == 2
        assert card.slots[1].is_empty

    def test_each_create_is_new_instance(self):
        registry = self._registry([{"id": "a", "name": "A", "maxSlotCount": 1}])
        first = registry.create_card("a")
        second = registry.create_card("a")
        assert first.instance_id != second.instance_id

    def test_unknown_card_raises(self):
        with pytest.raises(UnknownCardError):
            self._registry([]).create_card("missing")

    def test_unknown_starting_sticker_raises(self):
        registry = self._registry([
            {"id": "a", "name": "A", "startingStickers": ["ghost"], "maxSlotCount": 1}
        ])
        with pytest.raises(UnknownStickerError):
            registry.create_card("a")

    def test_per_track_card_keeps_track_positions(self):
        registry = self._registry([{
            "id": "dwarf",
            "name": "Dwarf",
            "startingStickers": {"power": ["power_2", "power_2", "power_2"]},
            "maxSlots": {"power": 1, "construction": 2},
        }])

        card = registry.create_card("dwarf")

        assert card.slot_count == 3
        assert card.power_value() == 2
        assert card.slots[1].is_empty
        assert card.slots[2].is_empty

    def test_per_track_sticker_lands_in_its_track(self):
        registry = self._registry([{
            "id": "gnome",
            "name": "Gnome",
            "startingStickers": {"invention": ["power_2"]},
            "maxSlots": {"power": 1, "construction": 1, "invention": 1},
        }])

        card = registry.create_card("gnome")

        assert card.slots[0].is_empty
        assert card.slots[1].is_empty
        assert card.slots[2].occupant.sticker_id == "power_2"

    def test_unknown_race_defaults_to_human(self):
        registry = self._registry([{"id": "a", "name": "A", "race": "Orc", "maxSlotCount": 0}])
        assert registry.create_card("a").race == Race.HUMAN


class TestValidation:
    """Tests for validate_catalog() and Catalog.from_config()."""

    def test_starter_content_is_valid(self):
        catalog = Catalog.from_config(STARTER_STICKERS, STARTER_CARDS, GameConfig.model_validate(STARTER_GAME))
        assert len(catalog.stickers) == len(STARTER_STICKERS)
        assert len(catalog.cards) == len(STARTER_CARDS)

    def test_dangling_sticker_reference(self):
        cards = [{"id": "a", "name": "A", "startingStickers": ["ghost"], "maxSlotCount": 1}]
        with pytest.raises(ConfigurationError) as exc_info:
            Catalog.from_config([POWER_2], cards)
        assert "ghost" in str(exc_info.value)

    def test_duplicate_ids(self):
        result = validate_catalog(
            [_sticker(POWER_2), _sticker(POWER_2)],
            [],
        )
        assert not result.valid
        assert any("Duplicate" in e for e in result.errors)

    def test_too_many_starting_stickers_is_warning(self):
        cards = [CardConfig.model_validate(
            {"id": "a", "name": "A", "startingStickers": ["power_2", "power_2"], "maxSlotCount": 1}
        )]
        result = validate_catalog([_sticker(POWER_2)], cards)
        assert result.valid
        assert any("extras will be dropped" in w for w in result.warnings)

    def test_game_config_unknown_card(self):
        game = GameConfig(starting_cards=[{"ghost": 2}])
        result = validate_catalog([], [], game)
        assert not result.valid

    def test_empty_track_slots_pass_validation(self):
        cards = [CardConfig.model_validate({
            "id": "a",
            "name": "A",
            "startingStickers": {"construction": ["power_2"]},
            "maxSlots": {"power": 2, "construction": 1},
        })]
        result = validate_catalog([_sticker(POWER_2)], cards)
        assert result.valid
        assert result.warnings == []

    def test_negative_copy_count_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig.model_validate({"starting_cards": [{"human_peasant": -2}]})

    def test_negative_copy_count_in_game_file(self, tmp_path):
        (tmp_path / "game.json").write_text(json.dumps({"starting_cards": [{"human_peasant": -2}]}))
        with pytest.raises(ConfigurationError):
            load_game_config(tmp_path)

    def test_starting_card_ids_expanded(self):
        game = GameConfig(starting_cards=[{"a": 2}, {"b": 1}])
        assert game.starting_card_ids() == ["a", "a", "b"]


def _sticker(data):
    return StickerConfig.model_validate(data)


class TestLoader:
    """Tests for loading a config directory."""

    def _write(self, path, stickers=STARTER_STICKERS, cards=STARTER_CARDS, game=STARTER_GAME):
        (path / "stickers.json").write_text(json.dumps(stickers))
        (path / "cards.json").write_text(json.dumps(cards))
        if game is not None:
            (path / "game.json").write_text(json.dumps(game))

    def test_load_directory(self, tmp_path):
        self._write(tmp_path)

        catalog = load_catalog(tmp_path)
        game = load_game_config(tmp_path)

        assert len(catalog.cards) == len(STARTER_CARDS)
        assert game.player_hand_size == STARTER_GAME["player_hand_size"]

    def test_missing_game_file_uses_defaults(self, tmp_path):
        self._write(tmp_path, game=None)
        assert load_game_config(tmp_path) == GameConfig()

    def test_missing_cards_file(self, tmp_path):
        (tmp_path / "stickers.json").write_text("[]")
        with pytest.raises(ConfigurationError, match="not found"):
            load_catalog(tmp_path)

    def test_invalid_json(self, tmp_path):
        self._write(tmp_path)
        (tmp_path / "cards.json").write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_catalog(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        self._write(tmp_path)
        (tmp_path / "stickers.json").write_bytes(b'[{"id": "caf\xe9"}]')
        with pytest.raises(ConfigurationError, match="not valid UTF-8"):
            load_catalog(tmp_path)

    def test_unreadable_file(self, tmp_path):
        self._write(tmp_path)
        (tmp_path / "cards.json").unlink()
        (tmp_path / "cards.json").mkdir()
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_catalog(tmp_path)

    def test_not_a_list(self, tmp_path):
        self._write(tmp_path, cards={"id": "a"})
        with pytest.raises(ConfigurationError, match="must contain a JSON list"):
            load_catalog(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_catalog(tmp_path / "absent")

    def test_env_directory(self, tmp_path, monkeypatch):
        self._write(tmp_path)
        monkeypatch.setattr(loader, "CARDCRAFT_CONFIG_DIR", str(tmp_path))
        assert len(load_catalog().stickers) == len(STARTER_STICKERS)

    def test_no_directory_configured(self, monkeypatch):
        monkeypatch.setattr(loader, "CARDCRAFT_CONFIG_DIR", None)
        with pytest.raises(ConfigurationError):
            load_catalog()

    def test_resource_kinds_parsed(self, tmp_path):
        self._write(tmp_path)
        wild = load_catalog(tmp_path).stickers.get("wild_1")
        assert [wild.compute_value(kind) for kind in ResourceKind] == [1, 1, 1]
