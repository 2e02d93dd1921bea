"""Markdown to inline-styled HTML for the WeChat article editor."""

import html
import logging
from typing import Callable, Optional

from markdown_it.tree import SyntaxTreeNode

from md2wechat.core.markdown_ast import parse_markdown
from md2wechat.core.models import (
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    Image,
    InlineCode,
    Link,
    ListBlock,
    ListItem,
    Node,
    Paragraph,
    Strong,
)
from md2wechat.core.settings import Settings

# importing the rule modules registers them with the global table
from md2wechat.exporters.rules import RuleTable, blocks, inline, rules  # noqa: F401

logger = logging.getLogger(__name__)

WRAPPER_ID = "wechat-typeset"
WRAPPER_STYLE = (
    "font-family:-apple-system,BlinkMacSystemFont,'Helvetica Neue',Arial,sans-serif; "
    "font-size:16px;"
)
WRAPPER_OPEN = f'<section id="{WRAPPER_ID}" style="{WRAPPER_STYLE}">'
WRAPPER_CLOSE = "</section>"


def _optional_attr(node: SyntaxTreeNode, name: str) -> Optional[str]:
    value = node.attrs.get(name)
    return str(value) if value else None


def _plain_text(node: SyntaxTreeNode) -> str:
    """flattens a subtree to its text content (used for image alt text)."""
    if node.type in ("text", "code_inline"):
        return node.content
    if node.type in ("softbreak", "hardbreak"):
        return "\n"
    return "".join(_plain_text(child) for child in node.children)


def _language(info: str) -> Optional[str]:
    """first word of a fence info string."""
    parts = info.strip().split()
    return parts[0] if parts else None


NodeBuilder = Callable[[SyntaxTreeNode, str], Node]

# maps markdown-it node types to typed nodes; the str argument is the
# already-rendered HTML of the node's children
NODE_BUILDERS: dict[str, NodeBuilder] = {
    "heading": lambda n, inner: Heading(level=int(n.tag[1:]), content=inner),
    "paragraph": lambda n, inner: Paragraph(content=inner, hidden=n.hidden),
    "blockquote": lambda n, inner: Blockquote(content=inner),
    "fence": lambda n, _: CodeBlock(code=n.content, language=_language(n.info)),
    "code_block": lambda n, _: CodeBlock(code=n.content),
    "code_inline": lambda n, _: InlineCode(text=n.content),
    "strong": lambda n, inner: Strong(content=inner),
    "bullet_list": lambda n, inner: ListBlock(ordered=False, items=inner),
    "ordered_list": lambda n, inner: ListBlock(
        ordered=True, items=inner, start=int(n.attrs.get("start", 1))
    ),
    "list_item": lambda n, inner: ListItem(content=inner),
    "image": lambda n, _: Image(
        url=str(n.attrs.get("src", "")),
        alt=_plain_text(n),
        title=_optional_attr(n, "title"),
    ),
    "link": lambda n, inner: Link(
        url=str(n.attrs.get("href", "")),
        content=inner,
        title=_optional_attr(n, "title"),
    ),
    "hr": lambda n, _: HorizontalRule(),
}


def _render_plain(node: SyntaxTreeNode, inner: str) -> str:
    """renders nodes without a styling rule (text, emphasis, tables) as plain HTML."""
    # root carries no token, so it has no tag attribute to read
    if node.type in ("root", "inline"):
        return inner
    if node.type == "text":
        return html.escape(node.content, quote=False)
    if node.type in ("softbreak", "hardbreak"):
        return "<br />\n"
    if node.type in ("html_block", "html_inline"):
        return html.escape(node.content, quote=False)
    if not node.tag:
        return inner

    attrs = "".join(
        f' {name}="{html.escape(str(value))}"' for name, value in node.attrs.items()
    )
    if not node.block or node.tag in ("th", "td"):
        close = "\n" if node.block else ""
        return f"<{node.tag}{attrs}>{inner}</{node.tag}>{close}"
    return f"<{node.tag}{attrs}>\n{inner}</{node.tag}>\n"


def _render_node(node: SyntaxTreeNode, settings: Settings, table: RuleTable) -> str:
    """renders a subtree bottom-up: children first, then the node itself."""
    if node.type == "image":
        inner = ""
    else:
        inner = "".join(_render_node(child, settings, table) for child in node.children)

    builder = NODE_BUILDERS.get(node.type)
    if builder is None:
        return _render_plain(node, inner)
    return table.render(builder(node, inner), settings)


def render_fragment(
    markdown_text: str, settings: Settings, table: RuleTable = rules
) -> str:
    """
    renders markdown to styled HTML without the outer container.

    Raises:
        MarkdownParseError: if the markdown cannot be tokenized
    """
    tree = parse_markdown(markdown_text)
    return _render_node(tree, settings, table)


def render(markdown_text: str, settings: Settings, table: RuleTable = rules) -> str:
    """
    renders markdown to a self-contained, inline-styled HTML fragment.

    Args:
        markdown_text: author-written markdown
        settings: settings snapshot to style with
        table: rule table (defaults to the built-in rules)

    Returns:
        HTML wrapped in the fixed wechat-typeset section

    Raises:
        MarkdownParseError: if the markdown cannot be tokenized
    """
    body = render_fragment(markdown_text, settings, table)
    logger.debug("rendered %d chars of markdown to %d chars", len(markdown_text), len(body))
    return f"{WRAPPER_OPEN}\n{body}\n{WRAPPER_CLOSE}"
