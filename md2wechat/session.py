"""Editing session: current text, settings and the last good outputs."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from md2wechat.core.markdown_ast import MarkdownParseError
from md2wechat.core.settings import PRESETS, Settings, SettingsModel
from md2wechat.exporters.html_renderer import render
from md2wechat.exporters.obsidian import export_stylesheet

logger = logging.getLogger(__name__)


class TypesetSession:
    """
    holds the editor state and recomputes both outputs on every change.

    Each mutation re-renders the whole document synchronously. If the
    markdown cannot be parsed, the previous HTML is kept and the failure is
    only logged.
    """

    def __init__(
        self, markdown_text: str = "", settings: Optional[Settings] = None
    ) -> None:
        self._markdown_text = markdown_text
        self._settings = SettingsModel(settings)
        self._html = ""
        self._stylesheet = ""
        self._recompute()

    @property
    def markdown_text(self) -> str:
        return self._markdown_text

    @property
    def settings(self) -> Settings:
        return self._settings.get()

    @property
    def html(self) -> str:
        """last successfully rendered HTML."""
        return self._html

    @property
    def stylesheet(self) -> str:
        return self._stylesheet

    def set_text(self, markdown_text: str) -> str:
        """replaces the markdown text and returns the current HTML."""
        self._markdown_text = markdown_text
        return self._recompute()

    def update_settings(
        self, partial: Optional[Mapping[str, Any]] = None, **changes: Any
    ) -> str:
        """merges settings changes and returns the current HTML."""
        self._settings.set(partial, **changes)
        return self._recompute()

    def apply_preset(self, color_or_key: str) -> str:
        """
        applies a preset accent color.

        Args:
            color_or_key: a preset key such as "red", or a color value

        Returns:
            the current HTML
        """
        color = next(
            (p.primary for p in PRESETS if p.key == color_or_key), color_or_key
        )
        self._settings.apply_preset(color)
        return self._recompute()

    def _recompute(self) -> str:
        settings = self._settings.get()
        self._stylesheet = export_stylesheet(settings)
        try:
            self._html = render(self._markdown_text, settings)
        except MarkdownParseError:
            logger.exception("Markdown parse error, keeping previous output")
        return self._html
