"""
Cardcraft - Card Economy Game Core

A deterministic, single-player card engine for a deck-building economy game.
The core provides:
- Sticker and card models with resource aggregation
- A generic deck engine (draw pile / discard pile)
- A bounded player hand with lifecycle events
- Configuration registries and a round-flow session
"""

__version__ = "0.1.0"
