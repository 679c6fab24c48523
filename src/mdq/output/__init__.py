from .config import OutputOptions
from .formatters import (
    format_csv,
    format_json,
    format_json_object,
    format_markdown,
    format_output,
    format_raw,
    format_text,
)

__all__ = [
    "OutputOptions",
    "format_csv",
    "format_json",
    "format_json_object",
    "format_markdown",
    "format_output",
    "format_raw",
    "format_text",
]
