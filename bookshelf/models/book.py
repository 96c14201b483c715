"""Book ORM: the single persisted catalog entity.

Invariants:
    - isbn is the primary key, supplied by the caller, never updated
    - every column is non-nullable
    - pages is non-negative (CHECK constraint mirrors the update/create shapes)

Design Decisions:
    - Natural key (isbn) over surrogate id: the API addresses books by isbn
"""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.db.base import Base


class Book(Base):
    """A catalog book keyed by isbn."""
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("pages >= 0", name="ck_books_pages_non_negative"),
    )

    isbn: Mapped[str] = mapped_column(Text, primary_key=True)
    amazon_url: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(Text, nullable=False)
    pages: Mapped[int] = mapped_column(Integer, nullable=False)
    publisher: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Book isbn={self.isbn!r} title={self.title!r}>"
