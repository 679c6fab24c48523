"""Command line entry point: ``mdq QUERY [FILES...]``."""

import argparse
import logging
import sys

from mdq.documents.markdown_parser import MarkdownParser
from mdq.documents.models import Document
from mdq.output.config import OutputOptions
from mdq.output.formatters import format_output
from mdq.query.engine import QueryEngine
from mdq.query.parser import compile_query, split_queries

STDIN_LABEL = "stdin"

QUERY_HELP = """\
query syntax:
  #           every h1 section
  #[0]        first h1 section (explicit index)
  ##Notes     every h2 section titled "Notes"
  ##Notes[1]  second h2 section titled "Notes"
  ##[3]       fourth h2 section in the document (0-indexed)
  date        "date" field from the YAML frontmatter

Several queries can be combined with commas: "title,##Summary".
If no FILES are given, the document is read from stdin.
"""

logger = logging.getLogger("mdq.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(
        prog="mdq",
        description=(
            "Query markdown files and extract information like 'jq' does for JSON."
        ),
        epilog=QUERY_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser_obj.add_argument(
        "query", nargs="?", help="Query, or comma-separated queries"
    )
    parser_obj.add_argument("files", nargs="*", help="Markdown files (default: stdin)")
    parser_obj.add_argument(
        "-h", "--head", action="store_true", help="Return only the heading"
    )
    parser_obj.add_argument(
        "-b",
        "--body",
        action="store_true",
        help="Return only the body (content before next section)",
    )
    parser_obj.add_argument(
        "-j", "--json", action="store_true", help="Return results in JSON format"
    )
    parser_obj.add_argument(
        "-o",
        "--object",
        action="store_true",
        help="JSON object output for multiple queries (use with -j)",
    )
    parser_obj.add_argument("--csv", action="store_true", help="CSV output format")
    parser_obj.add_argument(
        "-m", "--markdown", action="store_true", help="Markdown output format"
    )
    parser_obj.add_argument(
        "-r",
        "--raw",
        action="store_true",
        help="Raw output (only the found text, no filename or query)",
    )
    parser_obj.add_argument(
        "--no-blocks",
        action="store_true",
        help="Omit text blocks within triple backticks",
    )
    parser_obj.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser_obj.add_argument("--help", action="help", help="Show this help and exit")
    return parser_obj


def load_documents(files: list[str], parser: MarkdownParser) -> list[Document]:
    """Parse each file in order, or stdin when no files are given.

    Unreadable files are logged and skipped.
    """
    if not files:
        return [parser.parse(sys.stdin.read(), STDIN_LABEL)]

    documents = []
    for file_path in files:
        try:
            documents.append(parser.parse_file(file_path))
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading %s: %s", file_path, exc)
    return documents


def main(argv: list[str] | None = None) -> int:
    parser_obj = build_parser()
    args = parser_obj.parse_intermixed_args(argv)
    configure_logging(args.verbose)

    try:
        options = OutputOptions(
            head_only=args.head,
            body_only=args.body,
            json=args.json,
            json_object=args.object,
            csv=args.csv,
            markdown=args.markdown,
            raw=args.raw,
            strip_code_blocks=args.no_blocks,
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.query:
        parser_obj.print_usage(sys.stderr)
        return 1

    queries = [compile_query(text) for text in split_queries(args.query)]
    documents = load_documents(
        args.files, MarkdownParser(strip_code_blocks=options.strip_code_blocks)
    )
    results = QueryEngine().run(documents, queries, options.projection)

    output = format_output(results, options)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
