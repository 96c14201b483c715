"""Book Schemas: Pydantic response models for the books API.

Invariants:
    - BookOut mirrors every Book column, isbn included
    - Response wrappers match the envelope keys: {book}, {books}, {message}

Design Decisions:
    - Request bodies are NOT modelled here: they are checked by core/validate_book
      against declared shapes so violations keep their JSON Schema wording
    - from_attributes: routes return ORM rows directly
"""

from pydantic import BaseModel, ConfigDict


class BookOut(BaseModel):
    """Public representation of a stored book."""
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookResponse(BaseModel):
    book: BookOut


class BookListResponse(BaseModel):
    books: list[BookOut]


class MessageResponse(BaseModel):
    message: str
