"""
Service layer: local storage and the schedule source that feeds the core.
"""
