"""
Inventory logger: an ordered record store with JSON (and optional SQL) persistence.
"""
