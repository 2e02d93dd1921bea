"""block-level render rules."""

import html

from md2wechat.core.models import (
    Blockquote,
    CodeBlock,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    NodeKind,
    Paragraph,
)
from md2wechat.core.settings import Settings
from md2wechat.exporters.rules import rule
from md2wechat.exporters.styles import (
    BLOCK_PADDING,
    BLOCKQUOTE_BACKGROUND,
    BLOCKQUOTE_MARGIN,
    BLOCKQUOTE_RADIUS,
    BLOCKQUOTE_TEXT_COLOR,
    H1_MARGIN,
    H2_MARGIN_BOTTOM,
    H2_MARGIN_TOP,
    H3_MARGIN,
    Declarations,
    accent_border,
    blockquote_font_size,
    code_block_declarations,
    heading_font_size,
    inline_style,
    paragraph_declarations,
    px,
)


def _heading_common(settings: Settings) -> Declarations:
    return [
        ("font-weight", "bold"),
        ("line-height", "1.4"),
        ("color", settings.heading_color),
    ]


@rule(NodeKind.HEADING)
def render_heading(node: Heading, settings: Settings) -> str:
    """
    renders a heading.

    Level 1 is centered, level 2 is a centered span underlined in the heading
    color, deeper levels get a left accent bar.
    """
    font_size = heading_font_size(node.level, settings)

    if node.level == 1:
        style = inline_style(
            _heading_common(settings)
            + [
                ("margin", H1_MARGIN),
                ("font-size", font_size),
                ("text-align", "center"),
            ]
        )
        return f'<h1 style="{style}">{node.content}</h1>\n'

    if node.level == 2:
        outer = inline_style(
            [
                ("margin-top", H2_MARGIN_TOP),
                ("margin-bottom", H2_MARGIN_BOTTOM),
                ("text-align", "center"),
            ]
        )
        inner = inline_style(
            [
                ("font-size", font_size),
                ("font-weight", "bold"),
                ("border-bottom", accent_border("2px", "solid", settings)),
                ("color", settings.heading_color),
                ("padding-bottom", "5px"),
                ("display", "inline-block"),
            ]
        )
        return (
            f'<section style="{outer}"><span style="{inner}">'
            f"{node.content}</span></section>\n"
        )

    style = inline_style(
        _heading_common(settings)
        + [
            ("margin", H3_MARGIN),
            ("font-size", font_size),
            ("border-left", accent_border("4px", "solid", settings)),
            ("padding-left", "10px"),
        ]
    )
    tag = f"h{node.level}"
    return f'<{tag} style="{style}">{node.content}</{tag}>\n'


@rule(NodeKind.PARAGRAPH)
def render_paragraph(node: Paragraph, settings: Settings) -> str:
    """renders a paragraph; tight list paragraphs render bare content."""
    if node.hidden:
        return node.content
    style = inline_style(paragraph_declarations(settings))
    return f'<p style="{style}">{node.content}</p>\n'


@rule(NodeKind.BLOCKQUOTE)
def render_blockquote(node: Blockquote, settings: Settings) -> str:
    style = inline_style(
        [
            ("margin", BLOCKQUOTE_MARGIN),
            ("padding", BLOCK_PADDING),
            ("background", BLOCKQUOTE_BACKGROUND),
            ("border-left", accent_border("4px", "solid", settings)),
            ("border-radius", BLOCKQUOTE_RADIUS),
            ("color", BLOCKQUOTE_TEXT_COLOR),
            ("font-size", blockquote_font_size(settings)),
            ("line-height", "1.6"),
        ]
    )
    return f'<blockquote style="{style}">{node.content}</blockquote>\n'


@rule(NodeKind.CODE_BLOCK)
def render_code_block(node: CodeBlock, settings: Settings) -> str:
    """renders fenced code without highlighting; the language is not styled."""
    style = inline_style(code_block_declarations(settings))
    escaped = html.escape(node.code, quote=False)
    return f'<pre style="{style}"><code>{escaped}</code></pre>\n'


@rule(NodeKind.LIST)
def render_list(node: ListBlock, settings: Settings) -> str:
    tag = "ol" if node.ordered else "ul"
    style = inline_style(
        [
            ("margin", "10px 0 20px"),
            ("padding-left", "25px"),
            ("font-size", px(settings.font_size)),
            ("color", settings.text_color),
            ("line-height", "1.75"),
        ]
    )
    start = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
    return f'<{tag}{start} style="{style}">\n{node.items}</{tag}>\n'


@rule(NodeKind.LIST_ITEM)
def render_list_item(node: ListItem, _settings: Settings) -> str:
    style = inline_style([("margin-bottom", "5px")])
    return f'<li style="{style}">{node.content}</li>\n'


@rule(NodeKind.HORIZONTAL_RULE)
def render_horizontal_rule(_node: HorizontalRule, settings: Settings) -> str:
    style = inline_style(
        [
            ("border", "0"),
            ("border-top", accent_border("1px", "dashed", settings)),
            ("margin", "30px 0"),
            ("opacity", "0.6"),
        ]
    )
    return f'<hr style="{style}" />\n'
