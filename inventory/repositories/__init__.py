"""
Persistence adapters.

These modules encapsulate how the inventory is stored/retrieved (a JSON file by
default, optionally a SQL table). Services depend on the save()/load() contract
rather than touching files or sessions directly.
"""
