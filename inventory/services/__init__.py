"""
High-level use cases for the inventory logger.

Services orchestrate the record store and a persistence adapter; scripts and
the demo app call these instead of touching files or sessions directly.
"""
