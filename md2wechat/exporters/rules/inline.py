"""inline render rules."""

import html
from typing import Optional

from md2wechat.core.models import Image, InlineCode, Link, NodeKind, Strong
from md2wechat.core.settings import Settings
from md2wechat.exporters.rules import rule
from md2wechat.exporters.styles import (
    INLINE_CODE_BACKGROUND,
    INLINE_CODE_COLOR,
    accent_border,
    inline_style,
)


def _title_attr(title: Optional[str]) -> str:
    return f' title="{html.escape(title)}"' if title else ""


@rule(NodeKind.INLINE_CODE)
def render_inline_code(node: InlineCode, _settings: Settings) -> str:
    style = inline_style(
        [
            ("background", INLINE_CODE_BACKGROUND),
            ("color", INLINE_CODE_COLOR),
            ("padding", "2px 5px"),
            ("border-radius", "3px"),
            ("font-family", "monospace"),
            ("font-size", "0.9em"),
            ("margin", "0 2px"),
        ]
    )
    return f'<code style="{style}">{html.escape(node.text, quote=False)}</code>'


@rule(NodeKind.STRONG)
def render_strong(node: Strong, settings: Settings) -> str:
    style = inline_style([("color", settings.bold_color), ("font-weight", "bold")])
    return f'<strong style="{style}">{node.content}</strong>'


@rule(NodeKind.IMAGE)
def render_image(node: Image, _settings: Settings) -> str:
    """renders a centered block image with rounded corners and a soft shadow."""
    style = inline_style(
        [
            ("display", "block"),
            ("max-width", "100%"),
            ("height", "auto"),
            ("margin", "20px auto"),
            ("border-radius", "6px"),
            ("box-shadow", "0 2px 10px rgba(0,0,0,0.1)"),
        ]
    )
    src = html.escape(node.url)
    alt = html.escape(node.alt)
    return f'<img src="{src}" alt="{alt}"{_title_attr(node.title)} style="{style}" />'


@rule(NodeKind.LINK)
def render_link(node: Link, settings: Settings) -> str:
    """renders a link underlined by a bottom border in the heading color."""
    style = inline_style(
        [
            ("color", settings.heading_color),
            ("text-decoration", "none"),
            ("border-bottom", accent_border("1px", "solid", settings)),
            ("word-break", "break-all"),
        ]
    )
    href = html.escape(node.url)
    return (
        f'<a href="{href}"{_title_attr(node.title)} style="{style}">'
        f"{node.content}</a>"
    )
