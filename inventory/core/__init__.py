"""
Core utilities shared across the inventory package.

This package hosts:
- configuration helpers (env vars, default file location, database URL)
- logging setup used by the scripts

Repositories and services should depend on these primitives instead of reading
os.environ directly.
"""
