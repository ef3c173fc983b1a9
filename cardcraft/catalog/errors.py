"""
Configuration errors - fatal, startup-time integrity failures.

Runtime misuse (bad slot index, empty draw pile, ...) never raises; it is
reported through return values. Only inconsistent configuration raises.
"""


class ConfigurationError(Exception):
    """Raised when configuration cannot be loaded or is inconsistent."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        if len(errors) == 1:
            message = errors[0]
        else:
            message = f"Configuration invalid with {len(errors)} error(s): " + "; ".join(errors)
        super().__init__(message)


class UnknownStickerError(ConfigurationError):
    """A sticker id was referenced but is not in the sticker registry."""

    def __init__(self, sticker_id: str):
        self.sticker_id = sticker_id
        super().__init__(f"Sticker not found in registry: {sticker_id}")


class UnknownCardError(ConfigurationError):
    """A card id was referenced but is not in the card registry."""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card not found in registry: {card_id}")
