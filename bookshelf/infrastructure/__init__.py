"""Infrastructure Layer: database sessions and logging.

Invariants:
    - Driver errors mapped to core StoreError before leaving this layer
"""
