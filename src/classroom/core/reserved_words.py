"""Words that cannot be used as assignment titles.

Titles become URL segments next to the application's own routes, so any
word that names a route or action is off limits.
"""

from typing import Final

RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "admin",
        "api",
        "assignments",
        "create",
        "delete",
        "destroy",
        "edit",
        "group-assignments",
        "group_assignments",
        "index",
        "invitations",
        "new",
        "organizations",
        "settings",
        "show",
        "update",
    }
)


def is_reserved_word(value: str) -> bool:
    """Case-insensitive membership test against RESERVED_WORDS."""
    return value.strip().lower() in RESERVED_WORDS
