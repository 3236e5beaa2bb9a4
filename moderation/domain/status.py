"""Moderation status and status selections. Pure domain, no ORM."""

from enum import Enum


class Status(str, Enum):
    """Moderation status of a record. Stored representation is configured separately."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class StatusFilter(str, Enum):
    """Which statuses a listing includes. DEFAULT follows the configured strictness."""

    DEFAULT = "default"
    PENDING = "pending"
    REJECTED = "rejected"
    WITH_PENDING = "with_pending"
    WITH_REJECTED = "with_rejected"
    ANY = "any"
