"""Book Shapes: JSON Schema documents declaring accepted book payloads.

Invariants:
    - NEW_BOOK_SHAPE requires every Book attribute, isbn included
    - UPDATE_BOOK_SHAPE requires every attribute except isbn, and never declares isbn
    - pages and year are integers; pages is non-negative; everything else is a string
    - Unknown properties are rejected by both shapes

Design Decisions:
    - Plain dicts in a core module: shapes are data, loaded without IO
    - isbn immutability is NOT expressed here; validate_update checks it first
"""

BOOK_FIELD_TYPES: dict[str, dict] = {
    "amazon_url": {"type": "string"},
    "author": {"type": "string"},
    "language": {"type": "string"},
    "pages": {"type": "integer", "minimum": 0},
    "publisher": {"type": "string"},
    "title": {"type": "string"},
    "year": {"type": "integer"},
}

UPDATABLE_FIELDS: tuple[str, ...] = tuple(sorted(BOOK_FIELD_TYPES))
BOOK_FIELDS: tuple[str, ...] = ("isbn", *UPDATABLE_FIELDS)


NEW_BOOK_SHAPE: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "New book",
    "type": "object",
    "properties": {
        "isbn": {"type": "string"},
        **BOOK_FIELD_TYPES,
    },
    "required": list(BOOK_FIELDS),
    "additionalProperties": False,
}

UPDATE_BOOK_SHAPE: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Book update",
    "type": "object",
    "properties": dict(BOOK_FIELD_TYPES),
    "required": list(UPDATABLE_FIELDS),
    "additionalProperties": False,
}
