"""Book Validation: tests for pure create/update shape checks.

Tests cover:
    - validate_create accepts a complete payload
    - validate_create names every missing or mistyped field
    - validate_update rejects isbn before structural checks
    - validate_update applies the create rules minus isbn
    - violation ordering is stable
"""

import copy

import pytest

from bookshelf.core.book_shapes import NEW_BOOK_SHAPE, UPDATABLE_FIELDS
from bookshelf.core.validate_book import (
    ISBN_IMMUTABLE_MESSAGE,
    ValidationResult,
    validate_create,
    validate_update,
)


NEW_BOOK = {
    "isbn": "54321",
    "amazon_url": "http://amazon.com/grapes",
    "author": "Grape Man",
    "language": "English",
    "pages": 1,
    "publisher": "Fruity",
    "title": "Grapes",
    "year": 2000,
}

BOOK_UPDATE = {k: v for k, v in NEW_BOOK.items() if k != "isbn"}


# ─── validate_create ─────────────────────────────────────────────

def test_validate_create_accepts_complete_book():
    result = validate_create(NEW_BOOK)
    assert result == ValidationResult(valid=True, violations=[])


@pytest.mark.parametrize("missing", sorted(NEW_BOOK))
def test_validate_create_names_missing_field(missing):
    payload = {k: v for k, v in NEW_BOOK.items() if k != missing}
    result = validate_create(payload)
    assert result.valid is False
    assert any(f"'{missing}'" in v for v in result.violations)


def test_validate_create_missing_isbn_message():
    payload = dict(NEW_BOOK)
    del payload["isbn"]
    result = validate_create(payload)
    assert result.violations == ["instance: 'isbn' is a required property"]


def test_validate_create_rejects_string_pages():
    result = validate_create({**NEW_BOOK, "pages": "500"})
    assert result.valid is False
    assert result.violations == [
        "instance.pages: '500' is not of type 'integer'",
    ]


def test_validate_create_rejects_numeric_title():
    result = validate_create({**NEW_BOOK, "title": 42})
    assert result.violations == ["instance.title: 42 is not of type 'string'"]


def test_validate_create_rejects_negative_pages():
    result = validate_create({**NEW_BOOK, "pages": -1})
    assert result.valid is False
    assert result.violations[0].startswith("instance.pages:")


def test_validate_create_accepts_zero_pages():
    assert validate_create({**NEW_BOOK, "pages": 0}).valid is True


def test_validate_create_rejects_bool_year():
    result = validate_create({**NEW_BOOK, "year": True})
    assert result.valid is False
    assert result.violations[0].startswith("instance.year:")


def test_validate_create_rejects_unknown_property():
    result = validate_create({**NEW_BOOK, "rating": 5})
    assert result.valid is False
    assert "'rating'" in result.violations[0]


def test_validate_create_rejects_non_object():
    result = validate_create(["not", "a", "book"])
    assert result.valid is False
    assert len(result.violations) == 1
    assert "is not of type 'object'" in result.violations[0]


def test_validate_create_reports_one_violation_per_rule():
    result = validate_create({**NEW_BOOK, "pages": "many", "year": "1984"})
    assert result.violations == [
        "instance.pages: 'many' is not of type 'integer'",
        "instance.year: '1984' is not of type 'integer'",
    ]


def test_validate_create_empty_payload_lists_every_field():
    result = validate_create({})
    assert len(result.violations) == len(NEW_BOOK)


def test_validate_create_does_not_mutate_payload():
    payload = copy.deepcopy(NEW_BOOK)
    validate_create(payload)
    assert payload == NEW_BOOK


def test_validate_create_uses_given_shape():
    relaxed = {**NEW_BOOK_SHAPE, "required": ["isbn"]}
    assert validate_create({"isbn": "1"}, relaxed).valid is True


# ─── validate_update ─────────────────────────────────────────────

def test_validate_update_accepts_complete_update():
    assert validate_update(BOOK_UPDATE).valid is True


def test_validate_update_rejects_isbn_even_when_well_formed():
    result = validate_update({**BOOK_UPDATE, "isbn": "12345"})
    assert result.valid is False
    assert result.violations == [ISBN_IMMUTABLE_MESSAGE]


def test_validate_update_isbn_check_precedes_shape_checks():
    result = validate_update({"isbn": "12345", "pages": "bad"})
    assert result.violations == [ISBN_IMMUTABLE_MESSAGE]


@pytest.mark.parametrize("missing", UPDATABLE_FIELDS)
def test_validate_update_requires_every_non_isbn_field(missing):
    payload = {k: v for k, v in BOOK_UPDATE.items() if k != missing}
    result = validate_update(payload)
    assert result.valid is False
    assert any(f"'{missing}'" in v for v in result.violations)


def test_validate_update_rejects_mistyped_field():
    result = validate_update({**BOOK_UPDATE, "year": "nineteen"})
    assert result.violations == [
        "instance.year: 'nineteen' is not of type 'integer'",
    ]


def test_validate_update_rejects_non_object():
    result = validate_update("title")
    assert result.valid is False
    assert "is not of type 'object'" in result.violations[0]
