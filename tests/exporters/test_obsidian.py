"""tests for the Obsidian CSS snippet exporter."""

import re

import pytest

from md2wechat.core.settings import Settings
from md2wechat.exporters.html_renderer import render
from md2wechat.exporters.obsidian import (
    PREVIEW_SELECTOR,
    SNIPPET_FILENAME,
    export_stylesheet,
)

PARITY_MARKDOWN = """# One

## Two

### Three

Body **strong** text.

> quoted

```
code
```
"""

SETTINGS_CASES = [
    Settings(),
    Settings(
        heading_color="#d32f2f",
        bold_color="#388e3c",
        text_color="#222222",
        code_bg="#101010",
        code_margin_top=0,
        code_margin_bottom=50,
        font_size=13,
        line_height=2.2,
    ),
    Settings(font_size=20, line_height=1.5, code_margin_top=7.5),
]


def _parse_css(css: str) -> dict[str, dict[str, str]]:
    """maps selector -> {property: value} with !important stripped."""
    blocks: dict[str, dict[str, str]] = {}
    for selector, body in re.findall(r"([^{}/]+?)\s*\{([^}]*)\}", css):
        declarations = {}
        for line in body.strip().splitlines():
            name, value = line.strip().rstrip(";").split(":", 1)
            declarations[name.strip()] = value.replace("!important", "").strip()
        blocks[selector.strip()] = declarations
    return blocks


def _parse_style(tag: str) -> dict[str, str]:
    """maps property -> value for the style attribute of an opening tag."""
    match = re.search(r'style="([^"]*)"', tag)
    assert match
    pairs = [d.split(":", 1) for d in match.group(1).split(";") if d.strip()]
    return {name.strip(): value.strip() for name, value in pairs}


def _inline_styles(html: str, pattern: str) -> dict[str, str]:
    match = re.search(pattern, html)
    assert match, pattern
    return _parse_style(match.group(0))


def test_starts_with_install_instructions() -> None:
    """snippet opens with a comment explaining installation."""
    css = export_stylesheet(Settings())

    assert css.startswith("/*")
    lead_in = css.split("*/", 1)[0]
    assert SNIPPET_FILENAME in lead_in
    assert ".obsidian/snippets" in lead_in


def test_all_selectors_present() -> None:
    """snippet scopes root, headings, paragraph, strong, blockquote and pre."""
    blocks = _parse_css(export_stylesheet(Settings()))

    assert set(blocks) == {
        PREVIEW_SELECTOR,
        f"{PREVIEW_SELECTOR} h1",
        f"{PREVIEW_SELECTOR} h2",
        f"{PREVIEW_SELECTOR} h3",
        f"{PREVIEW_SELECTOR} p",
        f"{PREVIEW_SELECTOR} strong",
        f"{PREVIEW_SELECTOR} blockquote",
        f"{PREVIEW_SELECTOR} pre",
    }


def test_every_declaration_is_important() -> None:
    """each declaration is marked !important."""
    css = export_stylesheet(Settings())
    body = css.split("*/", 1)[1]
    declarations = [line for line in body.splitlines() if line.startswith("  ")]

    assert declarations
    assert all(line.endswith(" !important;") for line in declarations)


def test_settings_values_are_embedded() -> None:
    """settings flow into the matching declarations."""
    settings = Settings(
        heading_color="#7b1fa2",
        bold_color="#f57c00",
        code_bg="#fafafa",
        code_margin_top=3,
        code_margin_bottom=9,
        font_size=16,
    )
    blocks = _parse_css(export_stylesheet(settings))

    assert blocks[f"{PREVIEW_SELECTOR} h1"]["font-size"] == "22.4px"
    assert blocks[f"{PREVIEW_SELECTOR} h2"]["font-size"] == "18px"
    assert blocks[f"{PREVIEW_SELECTOR} h3"]["border-left"] == "4px solid #7b1fa2"
    assert blocks[f"{PREVIEW_SELECTOR} strong"]["color"] == "#f57c00"
    assert blocks[f"{PREVIEW_SELECTOR} pre"]["background"] == "#fafafa"
    assert blocks[f"{PREVIEW_SELECTOR} pre"]["margin-top"] == "3px"
    assert blocks[f"{PREVIEW_SELECTOR} pre"]["margin-bottom"] == "9px"


def test_blockquote_keeps_fixed_background() -> None:
    """blockquote background is the same constant as inline."""
    blocks = _parse_css(export_stylesheet(Settings(code_bg="#000000")))

    assert blocks[f"{PREVIEW_SELECTOR} blockquote"]["background-color"] == "#f9f9f9"


def test_blockquote_carries_box_spacing() -> None:
    """blockquote block keeps the inline margin and corner radius."""
    blocks = _parse_css(export_stylesheet(Settings()))

    quote = blocks[f"{PREVIEW_SELECTOR} blockquote"]
    assert quote["margin"] == "20px 0"
    assert quote["border-radius"] == "4px"



@pytest.mark.parametrize("settings", SETTINGS_CASES)
def test_parity_with_inline_renderer(settings: Settings) -> None:
    """shared node kinds carry identical color and spacing values in both outputs."""
    blocks = _parse_css(export_stylesheet(settings))
    html = render(PARITY_MARKDOWN, settings)

    def css(element: str) -> dict[str, str]:
        return blocks[f"{PREVIEW_SELECTOR} {element}"]

    h1 = _inline_styles(html, r"<h1 [^>]*>")
    for name in ("font-size", "color", "margin", "text-align"):
        assert css("h1")[name] == h1[name]

    h2_box = _inline_styles(html, r"<section style=\"margin-top[^>]*>")
    h2_text = _inline_styles(html, r"<span [^>]*>")
    for name in ("margin-top", "margin-bottom", "text-align"):
        assert css("h2")[name] == h2_box[name]
    for name in ("font-size", "color", "border-bottom", "padding-bottom", "display"):
        assert css("h2")[name] == h2_text[name]

    h3 = _inline_styles(html, r"<h3 [^>]*>")
    for name in ("font-size", "color", "margin", "border-left", "padding-left"):
        assert css("h3")[name] == h3[name]

    assert css("p") == _inline_styles(html, r"<p [^>]*>")
    assert css("strong") == _inline_styles(html, r"<strong [^>]*>")
    assert css("pre") == _inline_styles(html, r"<pre [^>]*>")

    quote = _inline_styles(html, r"<blockquote [^>]*>")
    for name in (
        "margin",
        "border-left",
        "border-radius",
        "color",
        "padding",
        "font-size",
        "line-height",
    ):
        assert css("blockquote")[name] == quote[name]
    assert css("blockquote")["background-color"] == quote["background"]


def test_root_block_uses_body_settings() -> None:
    """the container block carries body size, line height and color."""
    blocks = _parse_css(
        export_stylesheet(Settings(font_size=14, line_height=1.6, text_color="#111"))
    )

    root = blocks[PREVIEW_SELECTOR]
    assert root["font-size"] == "14px"
    assert root["line-height"] == "1.6"
    assert root["color"] == "#111"
