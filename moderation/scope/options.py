"""Execution option keys understood by the default status filter."""

# True: skip the default status filter for this statement.
INCLUDE_ALL_STATUSES = "include_all_statuses"

# bool: strictness of the default status filter for this statement.
STRICT_MODERATION = "moderation_strict"
