"""
Checkout Tool Package

An in-memory retail checkout: catalog, inventory, cart, orders, receipts and
sales reporting around a deterministic pricing and discount engine.
"""

__version__ = "1.0.0"
