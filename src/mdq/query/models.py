# src/mdq/query/models.py

from dataclasses import dataclass
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class FrontmatterQuery:
    """Look up a single frontmatter field by name."""

    field: str


@dataclass(frozen=True)
class SectionQuery:
    """Match sections by heading level and, optionally, title and rank.

    An empty ``title`` matches any title. ``index`` is ``None`` unless the
    query spelled out ``[N]``: without it every match is returned, with it
    only the N-th match among the level/title matches.
    """

    level: int
    title: str = ""
    index: int | None = None


Query: TypeAlias = FrontmatterQuery | SectionQuery


@dataclass(frozen=True)
class Projection:
    """Which parts of a match end up in the result.

    ``head_only`` and ``body_only`` are mutually exclusive; callers validate
    that before executing. ``raw`` drops the field-name label of frontmatter
    results.
    """

    head_only: bool = False
    body_only: bool = False
    raw: bool = False


class QueryResult(BaseModel):
    """One match (or placeholder) for one query against one document.

    ``None`` means the part is absent; ``""`` means it is present but empty.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str
    query: str
    heading: str | None = None
    body: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.heading and not self.body
