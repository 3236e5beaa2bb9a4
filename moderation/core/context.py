# moderation/core/context.py

import contextvars
from contextlib import contextmanager

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
current_actor_ctx = contextvars.ContextVar("current_actor", default=None)


def get_current_actor():
    """Identity reference of the caller, or None when unauthenticated."""
    return current_actor_ctx.get()


@contextmanager
def acting_as(actor):
    """Set the current actor for the enclosed block."""
    token = current_actor_ctx.set(actor)
    try:
        yield actor
    finally:
        current_actor_ctx.reset(token)
