"""Book Gateway: translates validated book payloads into store queries.

Invariants:
    - find_one / update / remove raise NotFoundError when no row matches the isbn
    - update never touches isbn, even if the payload carries one
    - Write failures roll back the session and surface as StoreError
    - Payloads are assumed validated; the gateway does not re-check shapes

Design Decisions:
    - AsyncSession injected at construction (no global session access)
    - remove is a single DELETE; rowcount decides not-found, no prior SELECT
    - find_all ordered by title for a stable listing
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.book_shapes import BOOK_FIELDS, UPDATABLE_FIELDS
from bookshelf.core.errors import NotFoundError
from bookshelf.infrastructure.database import to_store_error
from bookshelf.models.book import Book

logger = logging.getLogger(__name__)


class BookGateway:
    """SQLAlchemy implementation of the BookStore protocol."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[Book]:
        result = await self.db.execute(select(Book).order_by(Book.title))
        return list(result.scalars().all())

    async def find_one(self, isbn: str) -> Book:
        book = await self.db.get(Book, isbn)
        if book is None:
            raise NotFoundError(isbn)
        return book

    async def create(self, book_data: dict) -> Book:
        """Insert a new row. A duplicate isbn fails at commit."""
        book = Book(**{k: book_data[k] for k in BOOK_FIELDS})
        async with self._write("insert", book.isbn):
            self.db.add(book)
        await self.db.refresh(book)
        logger.info("Book created", extra={"isbn": book.isbn})
        return book

    async def update(self, isbn: str, book_data: dict) -> Book:
        """Replace every non-isbn field of the matching row."""
        book = await self.find_one(isbn)
        async with self._write("update", isbn):
            for name in UPDATABLE_FIELDS:
                if name in book_data:
                    setattr(book, name, book_data[name])
        await self.db.refresh(book)
        logger.info("Book updated", extra={"isbn": isbn})
        return book

    async def remove(self, isbn: str) -> None:
        async with self._write("delete", isbn):
            result = await self.db.execute(
                delete(Book).where(Book.isbn == isbn),
            )
            if result.rowcount == 0:
                raise NotFoundError(isbn)
        logger.info("Book deleted", extra={"isbn": isbn})

    @asynccontextmanager
    async def _write(self, operation: str, isbn: str) -> AsyncIterator[None]:
        """Commit on success; roll back on any failure."""
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Book {operation} failed: {e}",
                extra={"isbn": isbn, "operation": operation},
            )
            raise to_store_error(e) from e
        except Exception:
            await self.db.rollback()
            raise
