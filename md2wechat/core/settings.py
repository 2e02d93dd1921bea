"""visual settings, presets and the settings model."""

import dataclasses
import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

H1_SCALE = 1.4
H2_SCALE = 1.125
H3_SCALE = 1.0
BLOCKQUOTE_SCALE = 0.95

# bounds policed by the input surface, not by the model
FONT_SIZE_RANGE = (12, 20)
CODE_MARGIN_RANGE = (0, 50)


@dataclass(frozen=True)
class Settings:
    """complete visual configuration driving both outputs."""

    heading_color: str = "#1e88e5"
    bold_color: str = "#1e88e5"
    text_color: str = "#3f3f3f"
    code_bg: str = "#f6f8fa"
    code_margin_top: float = 15
    code_margin_bottom: float = 15
    font_size: float = 16
    line_height: float = 1.8


@dataclass(frozen=True)
class Preset:
    """named accent color."""

    key: str
    name: str
    primary: str


PRESETS: tuple[Preset, ...] = (
    Preset("blue", "Classic Blue", "#1e88e5"),
    Preset("red", "Vivid Red", "#d32f2f"),
    Preset("green", "Fresh Green", "#388e3c"),
    Preset("purple", "Elegant Purple", "#7b1fa2"),
    Preset("orange", "Lively Orange", "#f57c00"),
    Preset("black", "Minimal Black", "#333333"),
)

# camelCase names used by the web editor's settings export
FIELD_ALIASES = {
    "headingColor": "heading_color",
    "boldColor": "bold_color",
    "textColor": "text_color",
    "codeBg": "code_bg",
    "codeMarginTop": "code_margin_top",
    "codeMarginBottom": "code_margin_bottom",
    "fontSize": "font_size",
    "lineHeight": "line_height",
}


def get_preset(key: str) -> Preset:
    """
    looks up a preset by key.

    Raises:
        KeyError: if no preset has that key
    """
    for preset in PRESETS:
        if preset.key == key:
            return preset
    raise KeyError(key)


def _normalize_keys(partial: Mapping[str, Any]) -> dict[str, Any]:
    """maps camelCase aliases onto dataclass field names."""
    normalized: dict[str, Any] = {}
    for key, value in partial.items():
        name = FIELD_ALIASES.get(key, key)
        if name in normalized:
            raise TypeError(f"setting '{name}' given more than once")
        normalized[name] = value
    return normalized


def _check_types(values: Mapping[str, Any]) -> None:
    """rejects values that do not match the field's declared type."""
    for field in dataclasses.fields(Settings):
        if field.name not in values:
            continue
        value = values[field.name]
        if field.type is float:
            # bool is an int subclass, but never a length
            valid = (
                isinstance(value, (int, float))
                and not isinstance(value, bool)
                and math.isfinite(value)
            )
            expected = "a number"
        else:
            valid = isinstance(value, str)
            expected = "a string"
        if not valid:
            raise ValueError(
                f"setting '{field.name}' must be {expected}, got {value!r}"
            )


def check_ranges(settings: Settings) -> None:
    """
    enforces the input-surface bounds on a snapshot.

    Raises:
        ValueError: naming the first field outside its range
    """
    bounds = [
        ("font_size", FONT_SIZE_RANGE),
        ("code_margin_top", CODE_MARGIN_RANGE),
        ("code_margin_bottom", CODE_MARGIN_RANGE),
    ]
    for name, (low, high) in bounds:
        value = getattr(settings, name)
        if not low <= value <= high:
            raise ValueError(
                f"setting '{name}' must be between {low} and {high}, got {value}"
            )


def settings_from_mapping(
    data: Mapping[str, Any], base: Optional[Settings] = None
) -> Settings:
    """
    builds settings from a mapping, taking missing fields from base.

    Args:
        data: field values keyed by snake_case or camelCase name
        base: snapshot supplying unspecified fields (defaults to Settings())

    Returns:
        fully populated Settings

    Raises:
        TypeError: if data names an unknown field or names a field twice
        ValueError: if a value has the wrong type for its field
    """
    values = _normalize_keys(data)
    _check_types(values)
    return dataclasses.replace(base or Settings(), **values)


def load_settings(path: Path, base: Optional[Settings] = None) -> Settings:
    """
    loads settings from a JSON object file.

    Raises:
        ValueError: if the file is not a JSON object of known, typed fields
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(
            f"Invalid settings file {path}: expected an object, got {type(data).__name__}"
        )
    try:
        return settings_from_mapping(data, base)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid settings file {path}: {e}") from e


class SettingsModel:
    """owns the current Settings snapshot; mutations replace it wholesale."""

    def __init__(self, initial: Optional[Settings] = None) -> None:
        self._current = initial or Settings()

    def get(self) -> Settings:
        """returns the current snapshot."""
        return self._current

    def set(
        self, partial: Optional[Mapping[str, Any]] = None, **changes: Any
    ) -> Settings:
        """
        merges partial values into a new snapshot.

        Args:
            partial: mapping of field values (camelCase aliases accepted)
            **changes: field values as keyword arguments

        Returns:
            the new full snapshot
        """
        merged = dict(partial or {})
        merged.update(changes)
        self._current = settings_from_mapping(merged, self._current)
        return self._current

    def apply_preset(self, color: str) -> Settings:
        """sets heading and bold color to color, leaving everything else."""
        return self.set(heading_color=color, bold_color=color)
