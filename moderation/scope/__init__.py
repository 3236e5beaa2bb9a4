"""Status filtering: per-selection predicates and the generative moderated query."""

from moderation.scope.options import INCLUDE_ALL_STATUSES, STRICT_MODERATION
from moderation.scope.query import ModeratedQuery
from moderation.scope.status_filter import status_column, status_criteria

__all__ = [
    "INCLUDE_ALL_STATUSES",
    "STRICT_MODERATION",
    "ModeratedQuery",
    "status_column",
    "status_criteria",
]
