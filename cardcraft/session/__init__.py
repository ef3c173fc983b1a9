"""
Session - Round flow over the engine core.

A session wires a Catalog and GameConfig into a deck, a hand and a
resource pool, and runs the day cycle.
"""

from .game_session import GameSession, card_info
from .schemas import SessionSnapshot, CardInfo, ZoneInfo, SlotInfo, ResourcesInfo

__all__ = [
    "GameSession",
    "card_info",
    "SessionSnapshot",
    "CardInfo",
    "ZoneInfo",
    "SlotInfo",
    "ResourcesInfo",
]
