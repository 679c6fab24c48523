# src/mdq/observability/names.py

"""Standard metric names for mdq observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Parsing Metrics
# ============================================================================

# Duration
DOCUMENT_PARSE_DURATION = "document_parse_duration"

# Counters
DOCUMENTS_PARSED_TOTAL = "documents_parsed_total"
SECTIONS_PARSED_TOTAL = "sections_parsed_total"
FRONTMATTER_ERRORS_TOTAL = "frontmatter_errors_total"

# Gauges
FRONTMATTER_FIELDS = "frontmatter_fields"


# ============================================================================
# Query Metrics
# ============================================================================

# Duration
QUERY_EXECUTE_DURATION = "query_execute_duration"

# Counters
QUERIES_EXECUTED_TOTAL = "queries_executed_total"
QUERY_RESULTS_TOTAL = "query_results_total"
# Lookups that found nothing (placeholder record or empty result list)
QUERY_MISSES_TOTAL = "query_misses_total"
