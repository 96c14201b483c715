"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Book persistence is accessed through the BookStore Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, a test fake needs no base class
    - Returned rows are typed as BookLike so core never imports the ORM model
"""

from typing import Protocol


class BookLike(Protocol):
    """Structural contract for a stored book row."""
    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookStore(Protocol):
    """Contract for book persistence: implemented by shell.

    find_one, update and remove raise NotFoundError for an unknown isbn.
    """
    async def find_all(self) -> list[BookLike]: ...
    async def find_one(self, isbn: str) -> BookLike: ...
    async def create(self, book_data: dict) -> BookLike: ...
    async def update(self, isbn: str, book_data: dict) -> BookLike: ...
    async def remove(self, isbn: str) -> None: ...
