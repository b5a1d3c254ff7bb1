"""
Top-level package for the routine finder.

This package exposes the core query engine, the schedule source and the UI.
Most code should import from submodules such as:
    routine_finder.core
    routine_finder.services
    routine_finder.ui
"""

__all__: list[str] = []
