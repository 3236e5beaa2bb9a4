"""Default status filter applied to every ORM SELECT against a moderated model."""

from sqlalchemy import event
from sqlalchemy.orm import ORMExecuteState, Session, with_loader_criteria

from moderation.domain.status import StatusFilter
from moderation.models.moderatable import ModeratableMixin
from moderation.scope.options import INCLUDE_ALL_STATUSES, STRICT_MODERATION
from moderation.scope.status_filter import status_criteria


@event.listens_for(Session, "do_orm_execute")
def _apply_default_status_filter(execute_state: ORMExecuteState) -> None:
    """
    Add the DEFAULT status criteria for each moderated entity in the statement.
    Skipped for column refreshes and for statements with INCLUDE_ALL_STATUSES.
    Relationship loads inherit the criteria.
    """
    if not execute_state.is_select or execute_state.is_column_load:
        return
    options = execute_state.execution_options
    if options.get(INCLUDE_ALL_STATUSES, False):
        return

    strict = options.get(STRICT_MODERATION)
    for mapper in execute_state.all_mappers:
        model = mapper.class_
        if not issubclass(model, ModeratableMixin):
            continue
        criteria = status_criteria(model, StatusFilter.DEFAULT, strict=strict)
        execute_state.statement = execute_state.statement.options(
            with_loader_criteria(model, criteria, include_aliases=True)
        )
