# documents/models.py

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Section:
    """A heading line and the text that follows it up to the next heading.

    ``index`` is the 0-based rank of the section among all sections of the
    same level, in document order. It ignores titles.
    """

    level: int
    title: str
    heading: str
    body: str
    index: int


@dataclass(frozen=True)
class FieldValue:
    """A metadata field that exists in the document.

    ``value`` may be ``None`` when the field is declared without a value,
    which is different from the field not being there at all.
    """

    value: Any


@dataclass(frozen=True)
class Document:
    source: str
    metadata: dict[str, Any] = field(default_factory=dict)
    sections: list[Section] = field(default_factory=list)

    def lookup(self, name: str) -> FieldValue | None:
        """Return the metadata field ``name``, or ``None`` if it is absent."""
        if name not in self.metadata:
            return None
        return FieldValue(self.metadata[name])

    def sections_at(self, level: int) -> list[Section]:
        return [s for s in self.sections if s.level == level]
