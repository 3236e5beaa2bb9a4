"""Status predicates per StatusFilter. Builds SQL criteria, executes nothing."""

from typing import Optional

from sqlalchemy import inspect

from moderation.domain.exceptions import ModerationConfigError
from moderation.domain.status import Status, StatusFilter


def mapped_attribute(model, name: str):
    """Mapped attribute `name` of model. Raises ModerationConfigError if it is not mapped."""
    mapper = inspect(model, raiseerr=False)
    if mapper is None or name not in mapper.attrs:
        raise ModerationConfigError(f"{model.__name__} has no mapped attribute '{name}'")
    return getattr(model, name)


def status_column(model):
    """Mapped status attribute of a moderated model, per its config."""
    return mapped_attribute(model, model.moderation_config().status_column)


def check_stamp_columns(model) -> None:
    """Every column a transition writes must be mapped; nothing is stamped otherwise."""
    for name in model.moderation_config().column_names():
        if name is not None:
            mapped_attribute(model, name)


def status_criteria(model, status_filter: StatusFilter, strict: Optional[bool] = None):
    """
    SQL predicate selecting the statuses of status_filter, or None for ANY.
    strict overrides the model's configured strictness for DEFAULT only.
    """
    try:
        status_filter = StatusFilter(status_filter)
    except ValueError:
        raise ModerationConfigError(f"Unknown status filter: {status_filter!r}") from None

    if status_filter is StatusFilter.ANY:
        return None

    config = model.moderation_config()
    column = status_column(model)
    approved = config.value_of(Status.APPROVED)
    pending = config.value_of(Status.PENDING)
    rejected = config.value_of(Status.REJECTED)

    if status_filter is StatusFilter.DEFAULT:
        if config.strict if strict is None else strict:
            return column == approved
        return column != rejected
    if status_filter is StatusFilter.PENDING:
        return column == pending
    if status_filter is StatusFilter.REJECTED:
        return column == rejected
    if status_filter is StatusFilter.WITH_PENDING:
        return column.in_([approved, pending])
    return column.in_([approved, rejected])
