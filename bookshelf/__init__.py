"""Bookshelf: REST API over a validated book catalog.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
