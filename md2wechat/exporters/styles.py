"""style declarations shared by the inline renderer and the stylesheet exporter."""

from typing import Union

from md2wechat.core.settings import (
    BLOCKQUOTE_SCALE,
    H1_SCALE,
    H2_SCALE,
    H3_SCALE,
    Settings,
)

Declarations = list[tuple[str, str]]

# fixed colors, intentionally not derived from settings
BLOCKQUOTE_BACKGROUND = "#f9f9f9"
BLOCKQUOTE_TEXT_COLOR = "#555"
INLINE_CODE_BACKGROUND = "#fff5f5"
INLINE_CODE_COLOR = "#ff502c"
CODE_TEXT_COLOR = "#333"
CODE_BORDER = "1px solid #e1e4e8"
CODE_FONT_FAMILY = "Consolas, Monaco, 'Andale Mono', monospace"

H1_MARGIN = "20px 0 30px"
H2_MARGIN_TOP = "40px"
H2_MARGIN_BOTTOM = "20px"
H3_MARGIN = "25px 0 10px"
PARAGRAPH_MARGIN_BOTTOM = "20px"
BLOCK_PADDING = "15px"
BLOCKQUOTE_MARGIN = "20px 0"
BLOCKQUOTE_RADIUS = "4px"


def css_number(value: Union[int, float]) -> str:
    """formats a number the way a browser prints it: 16, 22.4, 0.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def px(value: Union[int, float]) -> str:
    """formats a pixel length."""
    return f"{css_number(value)}px"


def inline_style(declarations: Declarations) -> str:
    """joins declarations into a style attribute value."""
    return " ".join(f"{name}:{value};" for name, value in declarations)


def heading_font_size(level: int, settings: Settings) -> str:
    """font size for a heading level, scaled from the body size."""
    if level == 1:
        return px(settings.font_size * H1_SCALE)
    if level == 2:
        return px(settings.font_size * H2_SCALE)
    return px(settings.font_size * H3_SCALE)


def blockquote_font_size(settings: Settings) -> str:
    return px(settings.font_size * BLOCKQUOTE_SCALE)


def accent_border(width: str, line: str, settings: Settings) -> str:
    """border shorthand in the heading color."""
    return f"{width} {line} {settings.heading_color}"


def code_block_declarations(settings: Settings) -> Declarations:
    """box declarations for fenced code, used verbatim by both outputs."""
    return [
        ("margin-top", px(settings.code_margin_top)),
        ("margin-bottom", px(settings.code_margin_bottom)),
        ("padding", BLOCK_PADDING),
        ("background", settings.code_bg),
        ("border-radius", "6px"),
        ("font-size", "14px"),
        ("line-height", "1.5"),
        ("color", CODE_TEXT_COLOR),
        ("overflow-x", "auto"),
        ("font-family", CODE_FONT_FAMILY),
        ("border", CODE_BORDER),
    ]


def paragraph_declarations(settings: Settings) -> Declarations:
    """body text declarations, used verbatim by both outputs."""
    return [
        ("margin", f"0 0 {PARAGRAPH_MARGIN_BOTTOM}"),
        ("font-size", px(settings.font_size)),
        ("line-height", css_number(settings.line_height)),
        ("text-align", "justify"),
        ("color", settings.text_color),
        ("letter-spacing", "0.5px"),
    ]
