"""Format validators for assignment titles and slugs.

Pure functions: no database or network access, deterministic for a given input.
"""

import re
from typing import Final

from src.classroom.core.reserved_words import is_reserved_word
from src.classroom.core.violations import Violation, ViolationKind

MAX_TITLE_LENGTH: Final[int] = 60
MAX_SLUG_LENGTH: Final[int] = 60
SLUG_REGEX: Final[str] = r"^[-a-zA-Z0-9_]*$"

_SLUG_PATTERN: Final[re.Pattern[str]] = re.compile(SLUG_REGEX)
_SLUG_SEPARATOR_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9_-]+")


def slug_matches_charset(slug: str) -> bool:
    # fullmatch so a trailing newline cannot slip past `$`
    return _SLUG_PATTERN.fullmatch(slug) is not None


def validate_title(title: str | None) -> list[Violation]:
    """Check title presence, length and the reserved-word list."""
    if title is None or not title.strip():
        return [Violation("title", ViolationKind.BLANK_FIELD, "can't be blank")]

    violations: list[Violation] = []
    if len(title) > MAX_TITLE_LENGTH:
        violations.append(
            Violation(
                "title",
                ViolationKind.TOO_LONG,
                f"is too long (maximum is {MAX_TITLE_LENGTH} characters)",
            )
        )
    if is_reserved_word(title):
        violations.append(Violation("title", ViolationKind.RESERVED_WORD, "is a reserved word"))
    return violations


def validate_slug(slug: str | None) -> list[Violation]:
    """Check slug presence, length and charset."""
    if slug is None or not slug.strip():
        return [Violation("slug", ViolationKind.BLANK_FIELD, "can't be blank")]

    violations: list[Violation] = []
    if len(slug) > MAX_SLUG_LENGTH:
        violations.append(
            Violation(
                "slug",
                ViolationKind.TOO_LONG,
                f"is too long (maximum is {MAX_SLUG_LENGTH} characters)",
            )
        )
    if not slug_matches_charset(slug):
        violations.append(
            Violation(
                "slug",
                ViolationKind.INVALID_FORMAT,
                "should only contain letters, numbers, dashes and underscores",
            )
        )
    return violations


def slugify(title: str) -> str:
    """Derive a URL-safe slug from a title.

    E.g., 'Lab 1: Hello, World!' -> 'lab-1-hello-world'
    """
    slug = _SLUG_SEPARATOR_PATTERN.sub("-", title.strip().lower()).strip("-")
    return slug[:MAX_SLUG_LENGTH].rstrip("-")
