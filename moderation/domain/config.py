"""Per-model moderation configuration. Validated once, read-only afterwards."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Union

from moderation.core.context import get_current_actor
from moderation.domain.exceptions import ModerationConfigError, UnknownStatusError
from moderation.domain.status import Status

StatusValue = Union[int, str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ModerationConfig:
    """
    Column names, stored status values and collaborators for one moderated model.
    strict=True: default listing shows APPROVED only. strict=False: hides REJECTED only.
    moderated_by_column=None disables actor stamping.
    """

    strict: bool = False
    status_column: str = "status"
    moderated_at_column: str = "moderated_at"
    moderated_by_column: Optional[str] = "moderated_by"
    pending_value: StatusValue = 0
    approved_value: StatusValue = 1
    rejected_value: StatusValue = 2
    actor_resolver: Callable[[], Any] = field(default=get_current_actor, compare=False)
    clock: Callable[[], datetime] = field(default=utc_now, compare=False)

    def __post_init__(self) -> None:
        for name in ("status_column", "moderated_at_column"):
            if not getattr(self, name):
                raise ModerationConfigError(f"Moderation config: {name} must be non-empty")
        if self.moderated_by_column is not None and not self.moderated_by_column:
            raise ModerationConfigError(
                "Moderation config: moderated_by_column must be non-empty or None"
            )
        columns = [c for c in self.column_names() if c is not None]
        if len(set(columns)) != len(columns):
            raise ModerationConfigError(
                f"Moderation config: column names must be distinct, got {columns}"
            )
        values = [self.pending_value, self.approved_value, self.rejected_value]
        if len(set(values)) != len(values):
            raise ModerationConfigError(
                f"Moderation config: status values must be distinct, got {values}"
            )
        if len({type(v) for v in values}) != 1:
            raise ModerationConfigError(
                f"Moderation config: status values must share one type, got {values}"
            )

    @classmethod
    def from_settings(cls, settings, **overrides) -> "ModerationConfig":
        """Build config from ModerationSettings; keyword overrides win."""
        values = {
            "strict": settings.strict,
            "status_column": settings.status_column,
            "moderated_at_column": settings.moderated_at_column,
            "moderated_by_column": settings.moderated_by_column or None,
            "pending_value": settings.pending_value,
            "approved_value": settings.approved_value,
            "rejected_value": settings.rejected_value,
        }
        values.update(overrides)
        return cls(**values)

    def column_names(self):
        return (self.status_column, self.moderated_at_column, self.moderated_by_column)

    def _value_map(self) -> Dict[Status, StatusValue]:
        return {
            Status.PENDING: self.pending_value,
            Status.APPROVED: self.approved_value,
            Status.REJECTED: self.rejected_value,
        }

    def value_of(self, status: Status) -> StatusValue:
        """Stored representation of a status."""
        try:
            return self._value_map()[Status(status)]
        except (KeyError, ValueError):
            raise ModerationConfigError(f"Unknown moderation status: {status!r}") from None

    def status_of(self, value: StatusValue) -> Status:
        """Status for a stored value. Raises UnknownStatusError outside the domain."""
        for status, stored in self._value_map().items():
            if stored == value:
                return status
        raise UnknownStatusError(f"Stored status value {value!r} is not a configured status")

    def stamp_values(self, status: Status) -> Dict[str, Any]:
        """Attribute values written by a transition: status, moderated_at and, if enabled, moderated_by."""
        values = {
            self.status_column: self.value_of(status),
            self.moderated_at_column: self.clock(),
        }
        if self.moderated_by_column is not None:
            values[self.moderated_by_column] = self.actor_resolver()
        return values
