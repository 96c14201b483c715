"""Services Layer: store gateways implementing core protocols.

Invariants:
    - Gateways receive their AsyncSession by injection
"""
