"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete on package import
"""

from bookshelf.models.book import Book  # noqa: F401
