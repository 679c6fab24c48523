# src/mdq/query/parser.py

"""Query language.

    #            every h1 section
    #[0]         first h1 section
    ##Notes      every h2 section titled "Notes"
    ##Notes[1]   second h2 section titled "Notes"
    ##[3]        fourth h2 section in the document
    date         "date" field from the frontmatter

Every string compiles to some query; nothing is rejected.
"""

import re

from .models import FrontmatterQuery, Query, SectionQuery

SECTION_MARKER = "#"
QUERY_SEPARATOR = ","

_INDEX_SUFFIX = re.compile(r"(.*?)\[([0-9]+)\]")


def compile_query(text: str) -> Query:
    if not text.startswith(SECTION_MARKER):
        return FrontmatterQuery(field=text)

    level = len(text) - len(text.lstrip(SECTION_MARKER))
    rest = text[level:]

    match = _INDEX_SUFFIX.fullmatch(rest)
    if match:
        return SectionQuery(
            level=level, title=match.group(1).strip(), index=int(match.group(2))
        )
    return SectionQuery(level=level, title=rest.strip())


def format_query(query: Query) -> str:
    """Canonical text for ``query``; ``[N]`` only when the index was explicit."""
    if isinstance(query, FrontmatterQuery):
        return query.field

    rendered = SECTION_MARKER * query.level + query.title
    if query.index is not None:
        rendered += f"[{query.index}]"
    return rendered


def split_queries(text: str) -> list[str]:
    """Split a comma-separated query list, dropping blank entries."""
    parts = (part.strip() for part in text.split(QUERY_SEPARATOR))
    return [part for part in parts if part]
