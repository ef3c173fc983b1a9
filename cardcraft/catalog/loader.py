"""
Config Loader - Reads game data from a configuration directory.

Expected layout:
    <config_dir>/stickers.json   list of sticker entries
    <config_dir>/cards.json      list of card entries
    <config_dir>/game.json       game settings (optional)

The directory defaults to $CARDCRAFT_CONFIG_DIR. Loading is the only
I/O in the package; everything downstream assumes it completed.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any
import json
import logging
import os

from pydantic import ValidationError

from .errors import ConfigurationError
from .registry import Catalog
from .schemas import GameConfig

logger = logging.getLogger(__name__)

CARDCRAFT_CONFIG_DIR = os.getenv("CARDCRAFT_CONFIG_DIR", None)

STICKERS_FILE = "stickers.json"
CARDS_FILE = "cards.json"
GAME_FILE = "game.json"


def resolve_config_dir(config_dir: str | Path | None = None) -> Path:
    """Pick the explicit directory, else $CARDCRAFT_CONFIG_DIR."""
    chosen = config_dir or CARDCRAFT_CONFIG_DIR
    if not chosen:
        raise ConfigurationError("No config directory given and CARDCRAFT_CONFIG_DIR is not set")
    path = Path(chosen).expanduser()
    if not path.is_dir():
        raise ConfigurationError(f"Config directory not found: {path}")
    return path


def read_json(path: Path) -> Any:
    """Read a JSON file, converting I/O and parse failures to ConfigurationError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Config file not found: {path}")
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Config file is not valid UTF-8: {path}: {e}")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}")


def load_game_config(config_dir: str | Path | None = None) -> GameConfig:
    """Load game.json, falling back to defaults when the file is absent."""
    path = resolve_config_dir(config_dir) / GAME_FILE
    if not path.exists():
        logger.info("No %s in %s; using default game settings", GAME_FILE, path.parent)
        return GameConfig()
    try:
        return GameConfig.model_validate(read_json(path))
    except ValidationError as e:
        raise ConfigurationError([f"{GAME_FILE}: {err['msg']}" for err in e.errors()])


def load_catalog(config_dir: str | Path | None = None) -> Catalog:
    """Load and cross-check stickers.json and cards.json."""
    base = resolve_config_dir(config_dir)
    stickers = read_json(base / STICKERS_FILE)
    cards = read_json(base / CARDS_FILE)
    for name, data in ((STICKERS_FILE, stickers), (CARDS_FILE, cards)):
        if not isinstance(data, list):
            raise ConfigurationError(f"{name} must contain a JSON list")

    game = load_game_config(base)
    catalog = Catalog.from_config(stickers, cards, game)
    logger.info("Loaded catalog from %s", base)
    return catalog
