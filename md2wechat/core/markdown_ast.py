"""Markdown tokenization into a syntax tree."""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode


class MarkdownParseError(ValueError):
    """raised when the tokenizer cannot process the input."""


def _make_parser() -> MarkdownIt:
    """builds a GFM-like parser that treats soft line breaks as hard breaks."""
    md = MarkdownIt(
        "gfm-like",
        options_update={"breaks": True, "linkify": False, "html": False},
    )
    # disables HTML to prevent injection into the pasted article
    md.disable("html_inline")
    md.disable("html_block")
    return md


def parse_markdown(text: str) -> SyntaxTreeNode:
    """
    Parse markdown into a syntax tree.

    Args:
        text: Input markdown text

    Returns:
        Root SyntaxTreeNode of the document

    Raises:
        MarkdownParseError: if the tokenizer fails on the input
    """
    try:
        tokens = _make_parser().parse(text)
        return SyntaxTreeNode(tokens)
    except Exception as e:
        raise MarkdownParseError(f"Failed to parse markdown: {e}") from e
