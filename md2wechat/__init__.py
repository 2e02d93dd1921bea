"""Markdown to inline-styled HTML for the WeChat article editor."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from md2wechat.clipboard import copy_to_clipboard
from md2wechat.core.settings import (
    CODE_MARGIN_RANGE,
    FONT_SIZE_RANGE,
    PRESETS,
    SettingsModel,
    check_ranges,
    get_preset,
    load_settings,
)
from md2wechat.exporters.obsidian import SNIPPET_FILENAME
from md2wechat.sample import SAMPLE_MARKDOWN
from md2wechat.session import TypesetSession
from md2wechat.status import StatusReporter

logger = logging.getLogger(__name__)

# Settings fields exposed as CLI overrides, with their argument types
SETTING_OPTIONS = {
    "heading_color": str,
    "bold_color": str,
    "text_color": str,
    "code_bg": str,
    "code_margin_top": float,
    "code_margin_bottom": float,
    "font_size": float,
    "line_height": float,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2wechat",
        description="Convert Markdown to inline-styled HTML for WeChat articles",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Markdown file to convert ('-' reads stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="write HTML to this file instead of stdout",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="convert the built-in sample article",
    )
    parser.add_argument(
        "--settings",
        help="JSON file with settings (camelCase or snake_case keys)",
    )
    parser.add_argument(
        "--preset",
        choices=[p.key for p in PRESETS],
        help="accent color preset for headings and bold text",
    )
    for field, field_type in SETTING_OPTIONS.items():
        parser.add_argument(
            f"--{field.replace('_', '-')}",
            dest=field,
            type=field_type,
            help=f"override {field.replace('_', ' ')}",
        )
    parser.add_argument(
        "--css",
        metavar="FILE",
        help=f"also write the Obsidian CSS snippet (e.g. {SNIPPET_FILENAME})",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="copy the generated HTML to the clipboard",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="list color presets and exit",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress status messages",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def _check_ranges(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """enforces the input bounds the settings model itself does not police."""
    low, high = FONT_SIZE_RANGE
    if args.font_size is not None and not low <= args.font_size <= high:
        parser.error(f"--font-size must be between {low} and {high}")
    low, high = CODE_MARGIN_RANGE
    for name in ("code_margin_top", "code_margin_bottom"):
        value = getattr(args, name)
        if value is not None and not low <= value <= high:
            option = name.replace("_", "-")
            parser.error(f"--{option} must be between {low} and {high}")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        field: getattr(args, field)
        for field in SETTING_OPTIONS
        if getattr(args, field) is not None
    }


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for md2wechat CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 clipboard failure, 2 fatal error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    status = StatusReporter(quiet=args.quiet)

    if args.list_presets:
        for preset in PRESETS:
            print(f"{preset.key}\t{preset.primary}\t{preset.name}")
        return 0

    if not args.source and not args.sample:
        parser.error("a source file is required unless --sample is given")
    _check_ranges(parser, args)

    try:
        model = SettingsModel()
        if args.settings:
            model = SettingsModel(load_settings(Path(args.settings)))
        if args.preset:
            model.apply_preset(get_preset(args.preset).primary)
        overrides = _settings_overrides(args)
        if overrides:
            model.set(overrides)
        check_ranges(model.get())
        markdown_text = SAMPLE_MARKDOWN if args.sample else _read_source(args.source)
    except (OSError, ValueError) as e:
        logger.error("Fatal error: %s", e)
        return 2

    session = TypesetSession(markdown_text, model.get())

    try:
        if args.output:
            Path(args.output).write_text(session.html, encoding="utf-8")
            status.log_info(f"Wrote HTML to {args.output}")
        else:
            print(session.html)

        if args.css:
            Path(args.css).write_text(session.stylesheet, encoding="utf-8")
            status.log_info(f"Wrote Obsidian CSS snippet to {args.css}")
    except OSError as e:
        logger.error("Fatal error: %s", e)
        return 2

    if args.copy:
        copied = copy_to_clipboard(session.html)
        status.copy_result(copied)
        if not copied:
            return 1

    return 0
