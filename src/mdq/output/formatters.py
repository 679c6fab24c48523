# src/mdq/output/formatters.py

"""Rendering of query results for the command line.

Every formatter treats an absent part and an empty part the same way:
there is simply nothing to print.
"""

import csv
import io
import json
from collections.abc import Iterable
from itertools import groupby
from typing import Any

from mdq.query.models import QueryResult
from mdq.query.parser import SECTION_MARKER

from .config import OutputOptions


def format_output(results: list[QueryResult], options: OutputOptions) -> str:
    if options.csv:
        return format_csv(results)
    if options.json:
        if options.json_object:
            return format_json_object(results)
        return format_json(results)
    if options.markdown:
        return format_markdown(results, options)
    if options.raw:
        return format_raw(results, options)
    return format_text(results, options)


def group_by_source(
    results: Iterable[QueryResult],
) -> list[tuple[str, list[QueryResult]]]:
    """Group consecutive results that share a source."""
    return [
        (source, list(group))
        for source, group in groupby(results, key=lambda result: result.source)
    ]


def _render_match(result: QueryResult, options: OutputOptions, gap: str) -> str:
    parts = []
    if result.heading and not options.body_only:
        parts.append(result.heading)
    if result.body and not options.head_only:
        parts.append(result.body)
    return gap.join(parts) + "\n"


def format_raw(results: list[QueryResult], options: OutputOptions) -> str:
    output = "".join(
        _render_match(result, options, "\n")
        for result in results
        if not result.is_empty
    )
    return output.rstrip("\n")


def format_text(results: list[QueryResult], options: OutputOptions) -> str:
    groups = group_by_source(results)
    output: list[str] = []

    for position, (source, group) in enumerate(groups):
        if len(groups) > 1:
            if position > 0:
                output.append("\n")
            output.append(f"==> {source} <==\n")

        matches = [result for result in group if not result.is_empty]
        output.append("\n".join(_render_match(m, options, "\n") for m in matches))

    return "".join(output).rstrip("\n")


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _json_record(result: QueryResult) -> dict[str, str]:
    record = {"file": result.source}
    if result.heading:
        record["heading"] = result.heading
    if result.body:
        record["body"] = result.body
    return record


def format_json(results: list[QueryResult]) -> str:
    """A single result as an object, anything else as an array."""
    if len(results) == 1:
        return _to_json(_json_record(results[0]))
    return _to_json([_json_record(result) for result in results])


def _values_by_source(results: Iterable[QueryResult]) -> dict[str, dict[str, str]]:
    """Body text per query, per source, both in first-seen order."""
    table: dict[str, dict[str, str]] = {}
    for result in results:
        row = table.setdefault(result.source, {})
        if result.query:
            row[result.query] = result.body or ""
    return table


def format_json_object(results: list[QueryResult]) -> str:
    """One object per source, keyed by query text."""
    objects = [
        {"file": source, **values}
        for source, values in _values_by_source(results).items()
    ]
    if len(objects) == 1:
        return _to_json(objects[0])
    return _to_json(objects)


def _flatten_cell(value: str) -> str:
    return " ".join(value.split())


def format_csv(results: list[QueryResult]) -> str:
    """Header ``file`` plus one column per distinct query; one row per source."""
    if not results:
        return ""

    columns = list(dict.fromkeys(result.query for result in results if result.query))
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["file", *columns])
    for source, values in _values_by_source(results).items():
        writer.writerow(
            [source, *(_flatten_cell(values.get(column, "")) for column in columns)]
        )
    return buffer.getvalue().rstrip("\n")


def _is_frontmatter(result: QueryResult) -> bool:
    return not result.query.startswith(SECTION_MARKER)


def format_markdown(results: list[QueryResult], options: OutputOptions) -> str:
    """Re-emit the selected fields and sections as a Markdown document."""
    groups = group_by_source(results)
    output: list[str] = []

    for position, (source, group) in enumerate(groups):
        if len(groups) > 1:
            if position > 0:
                output.append("\n")
            output.append(f"<!-- File: {source} -->\n\n")

        fields = [result for result in group if _is_frontmatter(result)]
        if any(result.body for result in fields):
            output.append("---\n")
            for result in fields:
                name = result.heading or result.query
                value = result.body if result.body else '""'
                output.append(f"{name}: {value}\n")
            output.append("---\n\n")

        sections = [
            result
            for result in group
            if not _is_frontmatter(result) and not result.is_empty
        ]
        output.append("\n".join(_render_match(s, options, "\n\n") for s in sections))

    return "".join(output).rstrip("\n")
