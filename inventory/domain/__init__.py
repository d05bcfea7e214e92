"""Domain types: inventory items and the in-memory record store."""
