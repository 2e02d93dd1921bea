"""tests for markdown parsing."""

from unittest.mock import patch

import pytest

from md2wechat.core.markdown_ast import MarkdownParseError, parse_markdown


def test_parses_heading() -> None:
    """parses ATX heading into a heading node."""
    tree = parse_markdown("# Title")

    heading = tree.children[0]
    assert heading.type == "heading"
    assert heading.tag == "h1"


def test_soft_breaks_are_kept_as_break_nodes() -> None:
    """single newlines inside a paragraph produce break nodes."""
    tree = parse_markdown("line one\nline two")

    inline = tree.children[0].children[0]
    assert [child.type for child in inline.children] == ["text", "softbreak", "text"]


def test_parses_gfm_table() -> None:
    """tables are enabled."""
    tree = parse_markdown("| a | b |\n| - | - |\n| 1 | 2 |")

    assert tree.children[0].type == "table"


def test_raw_html_is_not_parsed_as_html() -> None:
    """raw HTML blocks are disabled."""
    tree = parse_markdown("<div>hi</div>")

    assert all(node.type != "html_block" for node in tree.children)


def test_unterminated_fence_runs_to_end() -> None:
    """an unterminated fence is closed at the end of the document."""
    tree = parse_markdown("```python\nprint(1)")

    fence = tree.children[0]
    assert fence.type == "fence"
    assert fence.content.rstrip("\n") == "print(1)"


def test_parse_failure_raises_markdown_parse_error() -> None:
    """tokenizer failures are wrapped in MarkdownParseError."""
    with patch("md2wechat.core.markdown_ast._make_parser") as mock_make_parser:
        mock_make_parser.return_value.parse.side_effect = RuntimeError("boom")

        with pytest.raises(MarkdownParseError, match="boom"):
            parse_markdown("# Title")
