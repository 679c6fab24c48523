# Documents
from .documents import (
    Document,
    DocumentParser,
    FieldValue,
    FrontmatterError,
    MarkdownParser,
    Section,
    parse_document,
    strip_code_blocks,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Output
from .output import OutputOptions, format_output

# Query
from .query import (
    FrontmatterQuery,
    Projection,
    Query,
    QueryEngine,
    QueryResult,
    SectionQuery,
    compile_query,
    execute,
    format_query,
    run_queries,
    split_queries,
)

__all__ = [
    # Documents
    "Document",
    "DocumentParser",
    "FieldValue",
    "FrontmatterError",
    "MarkdownParser",
    "Section",
    "parse_document",
    "strip_code_blocks",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Output
    "OutputOptions",
    "format_output",
    # Query
    "FrontmatterQuery",
    "Projection",
    "Query",
    "QueryEngine",
    "QueryResult",
    "SectionQuery",
    "compile_query",
    "execute",
    "format_query",
    "run_queries",
    "split_queries",
]
