"""palette_checker.core: foundation layer.

Colour math, shared types, the fix interpreter, application cases,
scoring, history/draft stacks, reporting, configuration and persistence.
This package has NO dependencies on palette_checker.rules or
palette_checker.registry. Only stdlib and numpy are allowed here.
"""
