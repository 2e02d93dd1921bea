"""Obsidian CSS snippet matching the inline WeChat styling."""

from md2wechat.core.settings import Settings
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
    css_number,
    heading_font_size,
    paragraph_declarations,
    px,
)

PREVIEW_SELECTOR = ".markdown-preview-view"
SNIPPET_FILENAME = "obsidian-wechat.css"
PREVIEW_FONT_FAMILY = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif'
)

LEAD_IN = (
    f"/* Save the following as {SNIPPET_FILENAME} in your vault's .obsidian/snippets "
    "folder, then enable it under Settings -> Appearance -> CSS snippets */"
)


def _block(selector: str, declarations: Declarations) -> str:
    """formats one selector block with every declaration marked !important."""
    body = "\n".join(f"  {name}: {value} !important;" for name, value in declarations)
    return f"{selector} {{\n{body}\n}}"


def _scoped(element: str) -> str:
    return f"{PREVIEW_SELECTOR} {element}"


def export_stylesheet(settings: Settings) -> str:
    """
    generates an Obsidian CSS snippet for the given settings.

    The snippet scopes every rule under the reading-view container and
    reuses the inline renderer's values, so both hosts show the same colors
    and spacing.

    Args:
        settings: settings snapshot to project

    Returns:
        CSS text with a lead-in comment and install instructions
    """
    blocks = [
        _block(
            PREVIEW_SELECTOR,
            [
                ("font-family", PREVIEW_FONT_FAMILY),
                ("font-size", px(settings.font_size)),
                ("line-height", css_number(settings.line_height)),
                ("color", settings.text_color),
            ],
        ),
        _block(
            _scoped("h1"),
            [
                ("text-align", "center"),
                ("font-size", heading_font_size(1, settings)),
                ("color", settings.heading_color),
                ("margin", H1_MARGIN),
            ],
        ),
        _block(
            _scoped("h2"),
            [
                ("text-align", "center"),
                ("border-bottom", accent_border("2px", "solid", settings)),
                ("color", settings.heading_color),
                ("font-size", heading_font_size(2, settings)),
                ("margin-top", H2_MARGIN_TOP),
                ("margin-bottom", H2_MARGIN_BOTTOM),
                ("padding-bottom", "5px"),
                ("display", "inline-block"),
            ],
        ),
        _block(
            _scoped("h3"),
            [
                ("border-left", accent_border("4px", "solid", settings)),
                ("padding-left", "10px"),
                ("color", settings.heading_color),
                ("font-size", heading_font_size(3, settings)),
                ("margin", H3_MARGIN),
            ],
        ),
        _block(_scoped("p"), paragraph_declarations(settings)),
        _block(
            _scoped("strong"),
            [("color", settings.bold_color), ("font-weight", "bold")],
        ),
        _block(
            _scoped("blockquote"),
            [
                ("margin", BLOCKQUOTE_MARGIN),
                ("border-left", accent_border("4px", "solid", settings)),
                ("border-radius", BLOCKQUOTE_RADIUS),
                ("background-color", BLOCKQUOTE_BACKGROUND),
                ("color", BLOCKQUOTE_TEXT_COLOR),
                ("padding", BLOCK_PADDING),
                ("font-size", blockquote_font_size(settings)),
                ("line-height", "1.6"),
            ],
        ),
        _block(_scoped("pre"), code_block_declarations(settings)),
    ]
    return LEAD_IN + "\n\n" + "\n\n".join(blocks) + "\n"
