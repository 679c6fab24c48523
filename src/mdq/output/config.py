# src/mdq/output/config.py

from dataclasses import dataclass

from mdq.query.models import Projection


@dataclass(frozen=True)
class OutputOptions:
    """Output switches for a query run.

    Immutable. Explicit. Validated on construction.
    """

    head_only: bool = False
    body_only: bool = False
    json: bool = False
    json_object: bool = False  # One object per file; only with json
    csv: bool = False
    markdown: bool = False
    raw: bool = False
    strip_code_blocks: bool = False

    def __post_init__(self) -> None:
        if self.head_only and self.body_only:
            raise ValueError("head_only and body_only are mutually exclusive")

    @property
    def projection(self) -> Projection:
        return Projection(
            head_only=self.head_only, body_only=self.body_only, raw=self.raw
        )
