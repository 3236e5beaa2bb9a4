"""Moderation-layer exceptions. Typed, no persistence concerns."""


class ModerationError(Exception):
    """Base for all moderation-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ModerationConfigError(ModerationError):
    """Raised when moderation configuration is invalid or an unknown selection is used."""


class UnknownStatusError(ModerationConfigError):
    """Raised when a stored status value is outside the configured status domain."""
