"""Moderation domain: statuses, selections, configuration, errors. No ORM."""

from moderation.domain.config import ModerationConfig
from moderation.domain.exceptions import (
    ModerationConfigError,
    ModerationError,
    UnknownStatusError,
)
from moderation.domain.status import Status, StatusFilter

__all__ = [
    "ModerationConfig",
    "ModerationConfigError",
    "ModerationError",
    "UnknownStatusError",
    "Status",
    "StatusFilter",
]
