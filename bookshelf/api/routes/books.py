"""Books: CRUD routes over the book catalog.

Invariants:
    - POST and PUT bodies pass core/validate_book before the store is touched
    - Validation failures raise ValidationError (400) with the violation list
    - Unknown isbn surfaces as NotFoundError (404) from the store
    - Routes never build SQL; all persistence goes through a BookStore

Design Decisions:
    - get_book_store dependency returns the protocol type so tests can override
      it with an in-memory fake
    - Bodies taken as raw dicts: shape violations keep their JSON Schema wording
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.core.errors import ValidationError
from bookshelf.core.repository_protocols import BookStore
from bookshelf.core.validate_book import validate_create, validate_update
from bookshelf.infrastructure.database import get_db
from bookshelf.schemas.book import (
    BookListResponse, BookOut, BookResponse, MessageResponse,
)
from bookshelf.services.book_gateway import BookGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/books", tags=["books"])


def get_book_store(db: AsyncSession = Depends(get_db)) -> BookStore:
    """FastAPI dependency for the book store."""
    return BookGateway(db)


@router.get("", response_model=BookListResponse)
async def list_books(store: BookStore = Depends(get_book_store)):
    """GET /books => {books: [book, ...]}"""
    books = await store.find_all()
    return {"books": [BookOut.model_validate(b) for b in books]}


@router.get("/{isbn}", response_model=BookResponse)
async def get_book(isbn: str, store: BookStore = Depends(get_book_store)):
    """GET /books/{isbn} => {book: book}"""
    book = await store.find_one(isbn)
    return {"book": BookOut.model_validate(book)}


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    payload: Any = Body(...), store: BookStore = Depends(get_book_store),
):
    """POST /books bookData => {book: newBook}"""
    result = validate_create(payload)
    if not result.valid:
        logger.warning(f"Rejected new book: {result.violations}")
        raise ValidationError(result.violations)
    book = await store.create(payload)
    return {"book": BookOut.model_validate(book)}


@router.put("/{isbn}", response_model=BookResponse)
async def update_book(
    isbn: str,
    payload: Any = Body(...),
    store: BookStore = Depends(get_book_store),
):
    """PUT /books/{isbn} bookData => {book: updatedBook}"""
    result = validate_update(payload)
    if not result.valid:
        logger.warning(
            f"Rejected update: {result.violations}", extra={"isbn": isbn},
        )
        raise ValidationError(result.violations)
    book = await store.update(isbn, payload)
    return {"book": BookOut.model_validate(book)}


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(isbn: str, store: BookStore = Depends(get_book_store)):
    """DELETE /books/{isbn} => {message: "Book deleted"}"""
    await store.remove(isbn)
    return {"message": "Book deleted"}
