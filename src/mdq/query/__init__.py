from .engine import QueryEngine, execute, render_value, run_queries
from .models import FrontmatterQuery, Projection, Query, QueryResult, SectionQuery
from .parser import compile_query, format_query, split_queries

__all__ = [
    # Compilation
    "compile_query",
    "format_query",
    "split_queries",
    # Execution
    "QueryEngine",
    "execute",
    "render_value",
    "run_queries",
    # Types
    "FrontmatterQuery",
    "Projection",
    "Query",
    "QueryResult",
    "SectionQuery",
]
