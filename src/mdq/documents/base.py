# documents/base.py

from abc import ABC, abstractmethod

from .models import Document


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, text: str, source: str) -> Document:
        """
        Parse a document and return its metadata and ordered sections.

        Requirements:
        - Deterministic output for same input
        - Never raises on malformed input
        - Sections kept in source order
        """
        raise NotImplementedError
