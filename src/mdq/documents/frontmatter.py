# documents/frontmatter.py

"""YAML frontmatter extraction.

The frontmatter block is optional and best-effort: a broken block never
stops the rest of the document from being parsed.
"""

import logging
import re
from typing import Any

import yaml

from mdq.observability import names
from mdq.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

DELIMITER = "---"


# YAML 1.2 core schema scalars; PyYAML's defaults follow YAML 1.1.
_CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_CORE_INT = re.compile(r"^(?:[-+]?(?:0|[1-9][0-9]*)|0x[0-9a-fA-F]+)$")
_CORE_FLOAT = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+\.[0-9]*)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?[0-9]+[eE][-+]?[0-9]+"
    r"|[-+]?\.(?:inf|Inf|INF)"
    r"|\.(?:nan|NaN|NAN))$"
)
_REPLACED_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:value",
}


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader with core-schema scalars and mapping keys kept as written.

    ``yes``, ``NO``, ``12:30`` and ``2024-03-01`` stay strings; only
    ``true``/``false``, plain decimal or hex integers, floats and ``null``
    are typed.
    """

    def construct_mapping(self, node, deep=False):
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found a non-scalar key",
                    key_node.start_mark,
                )
            mapping[key_node.value] = self.construct_object(value_node, deep=deep)
        return mapping


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED_TAGS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool", _CORE_BOOL, list("tTfF")
)
FrontmatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int", _CORE_INT, list("-+0123456789")
)
FrontmatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float", _CORE_FLOAT, list("-+.0123456789")
)


class FrontmatterError(ValueError):
    """Raised by ``load_frontmatter`` when a block cannot be decoded."""


def split_frontmatter(lines: list[str]) -> tuple[list[str], list[str]]:
    """Split ``lines`` into (frontmatter lines, remaining lines).

    The block opens only when the first line is the delimiter. It runs up to
    and including the next delimiter line; if that never comes, every
    remaining line belongs to the block and nothing is left for the body.
    """
    if not lines or lines[0].strip() != DELIMITER:
        return [], lines

    for position in range(1, len(lines)):
        if lines[position].strip() == DELIMITER:
            return lines[1:position], lines[position + 1 :]

    logger.debug("Frontmatter block is not closed; no body left")
    return lines[1:], []


def load_frontmatter(block: str) -> dict[str, Any]:
    """Decode a frontmatter block strictly.

    Raises:
        FrontmatterError: If the YAML is malformed or is not a mapping.
    """
    try:
        data = yaml.load(block, Loader=FrontmatterLoader)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(
            f"Frontmatter must be a mapping, got {type(data).__name__}"
        )
    return data


def decode_frontmatter(
    block: str,
    source: str | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> dict[str, Any]:
    """Decode a frontmatter block, falling back to an empty mapping."""
    if not block.strip():
        return {}
    try:
        return load_frontmatter(block)
    except FrontmatterError as exc:
        source_desc = f" ({source})" if source else ""
        logger.warning("Ignoring frontmatter%s: %s", source_desc, exc)
        metrics_hook.increment(names.FRONTMATTER_ERRORS_TOTAL)
        return {}
