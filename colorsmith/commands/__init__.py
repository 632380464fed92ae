"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by colorsmith.registry.discover(). Modules whose names
start with '_' hold shared helpers and are skipped.
"""
