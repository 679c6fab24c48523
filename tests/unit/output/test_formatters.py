import csv
import io
import json

import pytest

from mdq.output.config import OutputOptions
from mdq.output.formatters import (
    format_csv,
    format_json,
    format_json_object,
    format_markdown,
    format_output,
    format_raw,
    format_text,
    group_by_source,
)
from mdq.query.models import QueryResult


def result(
    source: str, query: str, heading: str | None = None, body: str | None = None
) -> QueryResult:
    return QueryResult(source=source, query=query, heading=heading, body=body)


@pytest.fixture
def single_file() -> list[QueryResult]:
    return [
        result("a.md", "title", "title", "Report"),
        result("a.md", "##Notes", "## Notes", "First"),
        result("a.md", "##Notes", "## Notes", "Second"),
    ]


@pytest.fixture
def two_files() -> list[QueryResult]:
    return [
        result("a.md", "title", "title", "Report A"),
        result("a.md", "#[0]", "# Intro", "Hello\nworld"),
        result("b.md", "title"),
        result("b.md", "#[0]", "# Start", "Hi"),
    ]


class TestGroupBySource:
    def test_groups_consecutive_results(self, two_files) -> None:
        groups = group_by_source(two_files)

        assert [(source, len(group)) for source, group in groups] == [
            ("a.md", 2),
            ("b.md", 2),
        ]


class TestTextFormat:
    def test_single_result(self) -> None:
        output = format_text([result("a.md", "#", "# Title", "body")], OutputOptions())

        assert output == "# Title\nbody"

    def test_results_separated_by_blank_line(self, single_file) -> None:
        output = format_text(single_file, OutputOptions())

        assert output == "title\nReport\n\n## Notes\nFirst\n\n## Notes\nSecond"

    def test_multiple_files_get_headers(self, two_files) -> None:
        output = format_text(two_files, OutputOptions())

        assert output == (
            "==> a.md <==\n"
            "title\nReport A\n"
            "\n"
            "# Intro\nHello\nworld\n"
            "\n"
            "==> b.md <==\n"
            "# Start\nHi"
        )

    def test_empty_results_are_skipped(self) -> None:
        output = format_text([result("a.md", "missing")], OutputOptions())

        assert output == ""

    def test_head_only(self) -> None:
        output = format_text(
            [result("a.md", "#", "# Title", None)], OutputOptions(head_only=True)
        )

        assert output == "# Title"

    def test_body_only(self) -> None:
        output = format_text(
            [result("a.md", "#", None, "body")], OutputOptions(body_only=True)
        )

        assert output == "body"

    def test_heading_without_body(self) -> None:
        output = format_text([result("a.md", "#", "# Title", "")], OutputOptions())

        assert output == "# Title"


class TestRawFormat:
    def test_no_labels_or_separators(self, two_files) -> None:
        output = format_raw(two_files, OutputOptions(raw=True))

        assert output == "title\nReport A\n# Intro\nHello\nworld\n# Start\nHi"

    def test_selected_by_format_output(self, single_file) -> None:
        options = OutputOptions(raw=True)

        assert format_output(single_file, options) == format_raw(single_file, options)


class TestJsonFormat:
    def test_single_result_is_an_object(self) -> None:
        output = format_json([result("a.md", "#", "# Title", "body")])

        assert json.loads(output) == {
            "file": "a.md",
            "heading": "# Title",
            "body": "body",
        }

    def test_multiple_results_are_an_array(self, single_file) -> None:
        data = json.loads(format_json(single_file))

        assert isinstance(data, list)
        assert [item["body"] for item in data] == ["Report", "First", "Second"]

    def test_empty_parts_are_omitted(self) -> None:
        data = json.loads(format_json([result("a.md", "draft", "draft", "")]))

        assert data == {"file": "a.md", "heading": "draft"}

    def test_no_results_is_an_empty_array(self) -> None:
        assert json.loads(format_json([])) == []

    def test_indented_output(self) -> None:
        output = format_json([result("a.md", "#", None, "x")])

        assert output == '{\n  "file": "a.md",\n  "body": "x"\n}'

    def test_non_ascii_is_kept(self) -> None:
        output = format_json([result("a.md", "#", None, "café")])

        assert "café" in output


class TestJsonObjectFormat:
    def test_single_file_is_one_object(self) -> None:
        results = [
            result("a.md", "title", "title", "Report"),
            result("a.md", "#Summary", "# Summary", "All good"),
        ]

        data = json.loads(format_json_object(results))

        assert data == {"file": "a.md", "title": "Report", "#Summary": "All good"}

    def test_missing_values_are_empty_strings(self, two_files) -> None:
        data = json.loads(format_json_object(two_files))

        assert data == [
            {"file": "a.md", "title": "Report A", "#[0]": "Hello\nworld"},
            {"file": "b.md", "title": "", "#[0]": "Hi"},
        ]

    def test_selected_with_json_flag(self, two_files) -> None:
        options = OutputOptions(json=True, json_object=True)

        assert format_output(two_files, options) == format_json_object(two_files)


class TestCsvFormat:
    def test_one_row_per_file(self, two_files) -> None:
        rows = list(csv.reader(io.StringIO(format_csv(two_files))))

        assert rows == [
            ["file", "title", "#[0]"],
            ["a.md", "Report A", "Hello world"],
            ["b.md", "", "Hi"],
        ]

    def test_whitespace_is_collapsed(self) -> None:
        output = format_csv([result("a.md", "#", "# T", "one\n\n  two\r\nthree")])

        assert output == "file,#\na.md,one two three"

    def test_values_with_commas_are_quoted(self) -> None:
        output = format_csv([result("a.md", "title", "title", "a, b")])

        assert output == 'file,title\na.md,"a, b"'

    def test_no_results(self) -> None:
        assert format_csv([]) == ""

    def test_csv_takes_precedence(self, two_files) -> None:
        options = OutputOptions(csv=True, json=True)

        assert format_output(two_files, options) == format_csv(two_files)


class TestMarkdownFormat:
    def test_frontmatter_and_sections(self) -> None:
        results = [
            result("a.md", "title", "title", "Report"),
            result("a.md", "draft", "draft", ""),
            result("a.md", "##Notes", "## Notes", "First"),
            result("a.md", "##Notes", "## Notes", "Second"),
        ]

        output = format_markdown(results, OutputOptions(markdown=True))

        assert output == (
            "---\n"
            "title: Report\n"
            'draft: ""\n'
            "---\n"
            "\n"
            "## Notes\n\nFirst\n"
            "\n"
            "## Notes\n\nSecond"
        )

    def test_frontmatter_block_needs_a_value(self) -> None:
        results = [
            result("a.md", "missing"),
            result("a.md", "#", "# Title", "body"),
        ]

        output = format_markdown(results, OutputOptions(markdown=True))

        assert output == "# Title\n\nbody"

    def test_body_only_uses_query_as_field_name(self) -> None:
        results = [result("a.md", "title", None, "Report")]

        output = format_markdown(results, OutputOptions(markdown=True, body_only=True))

        assert output == "---\ntitle: Report\n---"

    def test_multiple_files_get_comments(self, two_files) -> None:
        output = format_markdown(two_files, OutputOptions(markdown=True))

        assert output.startswith("<!-- File: a.md -->\n\n---\ntitle: Report A\n---\n")
        assert "\n\n<!-- File: b.md -->\n\n" in output
        assert output.endswith("# Start\n\nHi")
