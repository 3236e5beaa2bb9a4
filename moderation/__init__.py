"""Record moderation for SQLAlchemy models: status filtering and approve/reject stamping."""

from moderation.domain import (
    ModerationConfig,
    ModerationConfigError,
    ModerationError,
    Status,
    StatusFilter,
    UnknownStatusError,
)
from moderation.infrastructure.database import Base, ModeratedRepository
from moderation.models import Moderatable, ModeratableMixin
from moderation.scope import (
    INCLUDE_ALL_STATUSES,
    STRICT_MODERATION,
    ModeratedQuery,
    status_criteria,
)
from moderation.scope import default_filter  # noqa: F401  registers the Session hook

__all__ = [
    "Base",
    "ModeratedRepository",
    "ModerationConfig",
    "ModerationConfigError",
    "ModerationError",
    "Status",
    "StatusFilter",
    "UnknownStatusError",
    "Moderatable",
    "ModeratableMixin",
    "INCLUDE_ALL_STATUSES",
    "STRICT_MODERATION",
    "ModeratedQuery",
    "status_criteria",
]
