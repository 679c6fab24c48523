# documents/markdown_parser.py

import dataclasses
import logging
from pathlib import Path
from time import monotonic

from mdq.observability import names
from mdq.observability.base import MetricsHook, NoOpMetricsHook

from . import code_fences
from .base import DocumentParser
from .frontmatter import decode_frontmatter, split_frontmatter
from .models import Document, Section

logger = logging.getLogger(__name__)

HEADING_MARKER = "#"


class MarkdownParser(DocumentParser):
    """
    Markdown parser for frontmatter plus heading-delimited sections.
    - Frontmatter is optional and decoded best-effort
    - Any line starting with ``#`` (after trimming) opens a section
    - Text before the first heading is dropped
    """

    def __init__(
        self,
        strip_code_blocks: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.strip_code_blocks = strip_code_blocks
        self.metrics_hook = metrics_hook

    def parse(self, text: str, source: str) -> Document:
        start = monotonic()
        lines = text.split("\n")

        block, body_lines = split_frontmatter(lines)
        metadata = decode_frontmatter(
            "\n".join(block), source=source, metrics_hook=self.metrics_hook
        )
        sections = split_sections(body_lines)

        if self.strip_code_blocks:
            sections = [
                dataclasses.replace(
                    section, body=code_fences.strip_code_blocks(section.body)
                )
                for section in sections
            ]

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCUMENT_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.DOCUMENTS_PARSED_TOTAL)
        self.metrics_hook.increment(names.SECTIONS_PARSED_TOTAL, len(sections))
        self.metrics_hook.record_gauge(names.FRONTMATTER_FIELDS, len(metadata))
        logger.debug(
            "Parsed %s: %d metadata fields, %d sections",
            source,
            len(metadata),
            len(sections),
        )
        return Document(source=source, metadata=metadata, sections=sections)

    def parse_file(self, path: str | Path) -> Document:
        """Read ``path`` as UTF-8 and parse it, labelled with the path as given."""
        text = Path(path).read_text(encoding="utf-8")
        return self.parse(text, str(path))


def parse_heading(line: str) -> tuple[int, str] | None:
    """Return (level, title) for a heading line, or ``None`` for body text."""
    trimmed = line.strip()
    if not trimmed.startswith(HEADING_MARKER):
        return None
    level = len(trimmed) - len(trimmed.lstrip(HEADING_MARKER))
    return level, trimmed[level:].strip()


def split_sections(lines: list[str]) -> list[Section]:
    sections: list[Section] = []
    level_counts: dict[int, int] = {}

    current: tuple[int, str, str] | None = None
    body: list[str] = []

    def close() -> None:
        if current is None:
            return
        level, title, heading = current
        index = level_counts.get(level, 0)
        level_counts[level] = index + 1
        sections.append(
            Section(
                level=level,
                title=title,
                heading=heading,
                body="\n".join(body).rstrip("\n"),
                index=index,
            )
        )

    for line in lines:
        parsed = parse_heading(line)
        if parsed is None:
            if current is not None:
                body.append(line)
            continue

        close()
        current = (parsed[0], parsed[1], line)
        body = []

    close()
    return sections


def parse_document(
    text: str, source: str, strip_code_blocks: bool = False
) -> Document:
    return MarkdownParser(strip_code_blocks=strip_code_blocks).parse(text, source)
