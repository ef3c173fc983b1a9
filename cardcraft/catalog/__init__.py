"""Game configuration - schemas, registries and loading."""

from .errors import ConfigurationError, UnknownStickerError, UnknownCardError
from .schemas import StickerConfig, StickerEffectConfig, CardConfig, GameConfig
from .validation import validate_catalog, ValidationResult
from .registry import StickerRegistry, CardRegistry, Catalog, sticker_from_config
from .loader import load_catalog, load_game_config

__all__ = [
    "ConfigurationError",
    "UnknownStickerError",
    "UnknownCardError",
    "StickerConfig",
    "StickerEffectConfig",
    "CardConfig",
    "GameConfig",
    "validate_catalog",
    "ValidationResult",
    "StickerRegistry",
    "CardRegistry",
    "Catalog",
    "sticker_from_config",
    "load_catalog",
    "load_game_config",
]
