"""Property-based tests for title and slug validators using hypothesis."""

import re

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from src.classroom.core.reserved_words import RESERVED_WORDS, is_reserved_word
from src.classroom.core.validators import (
    MAX_SLUG_LENGTH,
    MAX_TITLE_LENGTH,
    SLUG_REGEX,
    slug_matches_charset,
    slugify,
    validate_slug,
    validate_title,
)
from src.classroom.core.violations import ViolationKind

pytestmark = pytest.mark.unit


# Letters, digits, dashes and underscores; 1-60 chars
valid_slug = st.from_regex(r"[-a-zA-Z0-9_]{1,60}", fullmatch=True)

# Titles with at least one visible character that are not reserved words
valid_title = (
    st.text(min_size=1, max_size=MAX_TITLE_LENGTH)
    .filter(lambda t: t.strip())
    .filter(lambda t: not is_reserved_word(t))
)


@given(slug=valid_slug)
@settings(max_examples=100)
def test_valid_slugs_accepted(slug: str):
    """Slugs in the allowed charset and length produce no violations."""
    assert validate_slug(slug) == []


@given(slug=st.text(min_size=1, max_size=MAX_SLUG_LENGTH).filter(lambda s: s.strip()))
def test_charset_check_matches_full_regex(slug: str):
    """INVALID_FORMAT is reported exactly when the whole slug fails the pattern."""
    kinds = [v.kind for v in validate_slug(slug)]
    fully_matches = re.fullmatch(SLUG_REGEX, slug) is not None
    assert (ViolationKind.INVALID_FORMAT not in kinds) == fully_matches


@given(slug=st.from_regex(r"[a-z0-9]{61,120}", fullmatch=True))
def test_long_slugs_rejected(slug: str):
    """Slugs longer than 60 characters report TOO_LONG and nothing else."""
    violations = validate_slug(slug)
    assert [v.kind for v in violations] == [ViolationKind.TOO_LONG]
    assert violations[0].message == "is too long (maximum is 60 characters)"


@given(slug=st.from_regex(r"[a-z]{61,80}[ !./]", fullmatch=True))
def test_long_slug_with_bad_chars_reports_both(slug: str):
    """Length and charset are independent checks."""
    kinds = [v.kind for v in validate_slug(slug)]
    assert kinds == [ViolationKind.TOO_LONG, ViolationKind.INVALID_FORMAT]


@pytest.mark.parametrize("slug", ["lab 1", "lab/1", "lab.1", "lab-1\n", "lab-ü", "../etc"])
def test_slug_charset_violations(slug: str):
    """Whitespace, punctuation, a trailing newline and non-ASCII letters are rejected."""
    assert not slug_matches_charset(slug)
    assert [v.kind for v in validate_slug(slug)] == [ViolationKind.INVALID_FORMAT]


@pytest.mark.parametrize("slug", [None, "", " ", "\t\n"])
def test_blank_slug_reports_only_blank(slug: str | None):
    violations = validate_slug(slug)
    assert [v.kind for v in violations] == [ViolationKind.BLANK_FIELD]
    assert violations[0].field == "slug"


@given(title=valid_title)
@settings(max_examples=100)
def test_valid_titles_accepted(title: str):
    assert validate_title(title) == []


@given(slug=st.text(alphabet=" \t\n\r", min_size=1, max_size=MAX_SLUG_LENGTH + 10))
def test_whitespace_slugs_are_blank(slug: str):
    """Whitespace-only slugs are blank, never a format or length failure."""
    assert [v.kind for v in validate_slug(slug)] == [ViolationKind.BLANK_FIELD]


@given(title=st.text(alphabet=" \t\n\r", max_size=10))
def test_blank_titles_rejected(title: str):
    """Missing or whitespace-only titles report BLANK_FIELD and nothing else."""
    violations = validate_title(title)
    assert [v.kind for v in violations] == [ViolationKind.BLANK_FIELD]
    assert violations[0].message == "can't be blank"


def test_none_title_is_blank():
    assert [v.kind for v in validate_title(None)] == [ViolationKind.BLANK_FIELD]


@given(title=st.text(min_size=MAX_TITLE_LENGTH + 1, max_size=200).filter(lambda t: t.strip()))
def test_long_titles_rejected(title: str):
    kinds = [v.kind for v in validate_title(title)]
    assert ViolationKind.TOO_LONG in kinds


def test_title_at_limit_accepted():
    assert validate_title("x" * MAX_TITLE_LENGTH) == []
    assert [v.kind for v in validate_title("x" * (MAX_TITLE_LENGTH + 1))] == [
        ViolationKind.TOO_LONG
    ]


@given(word=st.sampled_from(sorted(RESERVED_WORDS)), upper=st.booleans())
def test_reserved_titles_rejected(word: str, upper: bool):
    """Reserved words are rejected regardless of case."""
    title = word.upper() if upper else word
    violations = validate_title(title)
    assert [v.kind for v in violations] == [ViolationKind.RESERVED_WORD]
    assert violations[0].message == "is a reserved word"


def test_reserved_word_must_match_whole_title():
    assert validate_title("new lab") == []
    assert validate_title("Settings 101") == []


class TestSlugify:
    """Tests for deriving a slug from a title."""

    def test_simple_title(self):
        assert slugify("Lab 1: Hello, World!") == "lab-1-hello-world"

    def test_keeps_underscores_and_dashes(self):
        assert slugify("final_project - part-2") == "final_project-part-2"

    def test_truncates_without_trailing_dash(self):
        slug = slugify("a" * 59 + " b")
        assert len(slug) <= MAX_SLUG_LENGTH
        assert not slug.endswith("-")

    @given(title=st.text(max_size=200))
    def test_output_always_passes_charset(self, title: str):
        """Whatever the title, the derived slug is in charset and within length."""
        slug = slugify(title)
        assert slug_matches_charset(slug)
        assert len(slug) <= MAX_SLUG_LENGTH
        assert not slug.startswith("-")
        assert not slug.endswith("-")
