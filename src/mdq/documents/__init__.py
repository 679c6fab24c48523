from .base import DocumentParser
from .code_fences import strip_code_blocks
from .frontmatter import FrontmatterError, load_frontmatter
from .markdown_parser import MarkdownParser, parse_document
from .models import Document, FieldValue, Section

__all__ = [
    "Document",
    "DocumentParser",
    "FieldValue",
    "FrontmatterError",
    "MarkdownParser",
    "Section",
    "load_frontmatter",
    "parse_document",
    "strip_code_blocks",
]
