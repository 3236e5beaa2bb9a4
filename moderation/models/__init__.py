"""Moderated ORM mixins."""

from moderation.models.moderatable import Moderatable, ModeratableMixin

__all__ = ["Moderatable", "ModeratableMixin"]
