# src/mdq/query/engine.py

import json
import logging
from collections.abc import Iterable
from datetime import date
from time import monotonic
from typing import Any

from mdq.documents.models import Document, Section
from mdq.observability import names
from mdq.observability.base import MetricsHook, NoOpMetricsHook

from .models import FrontmatterQuery, Projection, Query, QueryResult, SectionQuery
from .parser import format_query

logger = logging.getLogger(__name__)


class QueryEngine:
    """Resolves compiled queries against parsed documents.

    Stateless apart from the metrics hook; safe to share between documents.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def execute(
        self,
        document: Document,
        query: Query,
        projection: Projection = Projection(),
    ) -> list[QueryResult]:
        start = monotonic()
        if isinstance(query, FrontmatterQuery):
            kind = "frontmatter"
            results, missed = self._execute_frontmatter(document, query, projection)
        else:
            kind = "section"
            results, missed = self._execute_section(document, query, projection)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.QUERY_EXECUTE_DURATION, elapsed_ms)
        labels = {"kind": kind}
        self.metrics_hook.increment(names.QUERIES_EXECUTED_TOTAL, labels=labels)
        self.metrics_hook.increment(names.QUERY_RESULTS_TOTAL, len(results))
        if missed:
            self.metrics_hook.increment(names.QUERY_MISSES_TOTAL, labels=labels)

        logger.debug(
            "Query %r on %s: %d result(s)",
            format_query(query),
            document.source,
            len(results),
        )
        return results

    def run(
        self,
        documents: Iterable[Document],
        queries: list[Query],
        projection: Projection = Projection(),
    ) -> list[QueryResult]:
        """Execute every query against every document.

        Results are ordered by document, then by query, in the order given.
        """
        results: list[QueryResult] = []
        for document in documents:
            for query in queries:
                results.extend(self.execute(document, query, projection))
        return results

    def _execute_frontmatter(
        self, document: Document, query: FrontmatterQuery, projection: Projection
    ) -> tuple[list[QueryResult], bool]:
        label = format_query(query)
        found = document.lookup(query.field)
        if found is None:
            return [QueryResult(source=document.source, query=label)], True

        heading = None
        if not projection.body_only and not projection.raw:
            heading = query.field
        body = None if projection.head_only else render_value(found.value)

        result = QueryResult(
            source=document.source, query=label, heading=heading, body=body
        )
        return [result], False

    def _execute_section(
        self, document: Document, query: SectionQuery, projection: Projection
    ) -> tuple[list[QueryResult], bool]:
        label = format_query(query)
        matches = [
            section
            for section in document.sections_at(query.level)
            if not query.title or section.title == query.title
        ]

        if query.index is None:
            results = [
                _section_result(document.source, label, section, projection)
                for section in matches
            ]
            return results, not results

        # Rank is counted within the level/title matches, not Section.index.
        if query.index < len(matches):
            section = matches[query.index]
            result = _section_result(document.source, label, section, projection)
            return [result], False
        return [QueryResult(source=document.source, query=label)], True


def _section_result(
    source: str, label: str, section: Section, projection: Projection
) -> QueryResult:
    return QueryResult(
        source=source,
        query=label,
        heading=None if projection.body_only else section.heading,
        body=None if projection.head_only else section.body,
    )


def render_value(value: Any) -> str:
    """Render a frontmatter value as text; ``None`` becomes ``""``."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str, ensure_ascii=False)
    return str(value)


def execute(
    document: Document, query: Query, projection: Projection = Projection()
) -> list[QueryResult]:
    return QueryEngine().execute(document, query, projection)


def run_queries(
    documents: Iterable[Document],
    queries: list[Query],
    projection: Projection = Projection(),
) -> list[QueryResult]:
    return QueryEngine().run(documents, queries, projection)
