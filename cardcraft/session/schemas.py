"""
Pydantic Schemas for session snapshots - read-only views for consumers.

Renderers and higher-level services (buildings, invasion, recruits) read
these instead of reaching into engine objects.
"""

from typing import Optional
from pydantic import BaseModel, Field


class SlotInfo(BaseModel):
    """One card slot."""
    index: int
    sticker_id: Optional[str] = None
    sticker_name: Optional[str] = None
    replaceable: bool = False

    model_config = {"from_attributes": True}


class CardInfo(BaseModel):
    """Card information for display."""
    card_id: str
    instance_id: str
    name: str
    race: str
    image: Optional[str] = None
    power: int = 0
    construction: int = 0
    invention: int = 0
    slots: list[SlotInfo] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ZoneInfo(BaseModel):
    """Zone information for display."""
    zone_id: str
    zone_type: str = Field(description="hand, draw_pile, discard_pile")
    card_count: int = 0
    cards: list[CardInfo] = Field(default_factory=list)


class ResourcesInfo(BaseModel):
    """Current resource pool."""
    power: int = 0
    construction: int = 0
    invention: int = 0


class SessionSnapshot(BaseModel):
    """Full read-only view of a session."""
    session_id: str
    day: int
    hand_limit: int
    deck_limit: int
    total_cards: int
    hand: ZoneInfo
    draw_pile: ZoneInfo
    discard_pile: ZoneInfo
    resources: ResourcesInfo
