"""
Cardcraft CLI - Command-line interface for the engine.

Usage:
    cardcraft validate [config_dir]              Validate stickers/cards/game config
    cardcraft simulate [--config-dir DIR] [--days N] [--seed S]
                                                 Play N days automatically

Without a config directory ($CARDCRAFT_CONFIG_DIR or argument) the
built-in starter content is used.
"""

import argparse
import logging
import os
import sys

CARDCRAFT_LOG_LEVEL = os.getenv("CARDCRAFT_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Cardcraft - card economy game engine",
        prog="cardcraft",
    )
    parser.add_argument("--log-level", default=CARDCRAFT_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate configuration")
    validate_parser.add_argument("config_dir", nargs="?", help="Directory with stickers.json/cards.json")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play days automatically")
    simulate_parser.add_argument("--config-dir", help="Directory with stickers.json/cards.json")
    simulate_parser.add_argument("--days", type=int, default=3, help="Number of days to play")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        return cmd_validate(args)
    elif args.command == "simulate":
        return cmd_simulate(args)
    else:
        parser.print_help()
        return 1


def _load(config_dir):
    """Load (catalog, game config) from a directory or the starter content."""
    from .catalog import load_catalog, load_game_config
    from .catalog.loader import CARDCRAFT_CONFIG_DIR
    from .content import starter_catalog, starter_game_config

    if config_dir or CARDCRAFT_CONFIG_DIR:
        return load_catalog(config_dir), load_game_config(config_dir)
    return starter_catalog(), starter_game_config()


def cmd_validate(args) -> int:
    """Validate configuration and report warnings."""
    from .catalog import ConfigurationError

    try:
        catalog, game = _load(args.config_dir)
    except ConfigurationError as e:
        print("Configuration invalid:")
        for error in e.errors:
            print(f"  - {error}")
        return 1

    print(f"Stickers: {len(catalog.stickers)}")
    print(f"Cards: {len(catalog.cards)}")
    print(f"Starting deck: {len(game.starting_card_ids())} card(s), hand size {game.player_hand_size}")
    if catalog.warnings:
        print("\nWarnings:")
        for w in catalog.warnings:
            print(f"  - {w}")
    return 0


def cmd_simulate(args) -> int:
    """Play each day by spending every card on its strongest resource."""
    from .catalog import ConfigurationError
    from .session import GameSession

    try:
        catalog, game = _load(args.config_dir)
        session = GameSession.create(catalog, game, seed=args.seed)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1

    for _ in range(args.days):
        gained = {}
        for card in session.hand.cards:
            kind, value = card.best_resource()
            session.play_cards_for_resource([card.instance_id], kind)
            gained[kind.value] = gained.get(kind.value, 0) + value

        totals = ", ".join(f"{name} {amount}" for name, amount in sorted(gained.items())) or "nothing"
        print(f"Day {session.day}: gained {totals}")
        session.end_day()

    snapshot = session.snapshot()
    print(
        f"\nAfter {args.days} day(s): {snapshot.draw_pile.card_count} in deck, "
        f"{snapshot.discard_pile.card_count} discarded, {snapshot.hand.card_count} in hand"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
