"""
Core domain layer: row fields, filter state, ordering primitives,
domain extraction and the query engine
"""

from .domains import extract_domain, extract_domains
from .filter_state import FilterState
from .query import QueryResult, QueryStatus, query

__all__ = [
    "FilterState",
    "QueryResult",
    "QueryStatus",
    "extract_domain",
    "extract_domains",
    "query",
]
