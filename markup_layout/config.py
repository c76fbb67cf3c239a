"""
Layout configuration.

A ``LayoutConfig`` is supplied once when a ``LayoutEngine`` is built and is
held for the lifetime of the engine. Margins and rule widths are expressed in
units of the base font size.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from reportlab.lib import colors
from reportlab.lib.colors import Color

from .exceptions import ConfigError
from .styles.color_utils import color_to_hex, parse_color

logger = logging.getLogger(__name__)

HEADING_LEVELS = 6


@dataclass(frozen=True, slots=True)
class HeadingStyle:
    """Scale, margins and weight of one heading level."""

    scale: float = 1.0
    margin_top: float = 0.5
    margin_bottom: float = 0.5
    bold: bool = True


def _default_headings() -> Tuple[HeadingStyle, ...]:
    scales = (2.0, 1.5, 1.25, 1.0, 1.0, 1.0)
    margins = (1.0, 0.833, 0.75, 0.5, 0.5, 0.5)
    bold = (True, True, True, True, True, False)
    return tuple(
        HeadingStyle(scale=s, margin_top=m, margin_bottom=m, bold=b)
        for s, m, b in zip(scales, margins, bold)
    )


@dataclass(frozen=True)
class LayoutConfig:
    # Fonts used for regular, bold, italic and bold-italic text.
    font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    italic_font: str = "Helvetica-Oblique"
    bold_italic_font: str = "Helvetica-BoldOblique"

    # Base font size in points and text color.
    font_size: float = 12.0
    color: Color = field(default_factory=lambda: colors.black)

    paragraph_margin_top: float = 0.0
    paragraph_margin_bottom: float = 0.833

    # Heading levels 1 to 6, in order.
    headings: Tuple[HeadingStyle, ...] = field(default_factory=_default_headings)

    # Superscript/subscript offsets are fractions of the scaled font size.
    superscript_position: float = 0.25
    subscript_position: float = -1.25
    super_sub_scale: float = 0.583

    hr_margin_top: float = 0.833
    hr_margin_bottom: float = 0.833
    hr_scale: float = 0.1
    hr_color: Color = field(default_factory=lambda: colors.black)

    wrap_lines: bool = True

    # Extra TrueType fonts to register, mapping face name to file path.
    font_files: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Accept loose values (hex strings, lists) and normalise them.
        object.__setattr__(self, "color", parse_color(self.color))
        object.__setattr__(self, "hr_color", parse_color(self.hr_color))
        object.__setattr__(self, "headings", tuple(_coerce_heading(h) for h in self.headings))
        object.__setattr__(self, "font_files", dict(self.font_files))
        self.validate()

    def heading(self, level: int) -> HeadingStyle:
        if not 1 <= level <= HEADING_LEVELS:
            raise ConfigError(f"heading level must be between 1 and {HEADING_LEVELS}", str(level))
        return self.headings[level - 1]

    def validate(self) -> None:
        """
        Check the configuration for values the engine cannot work with.

        Raises:
            ConfigError: If any value is out of range
        """
        errors: List[str] = []

        if len(self.headings) != HEADING_LEVELS:
            errors.append(f"expected {HEADING_LEVELS} heading styles, got {len(self.headings)}")
        if self.font_size <= 0:
            errors.append(f"font_size must be positive, got {self.font_size}")
        if self.super_sub_scale <= 0:
            errors.append(f"super_sub_scale must be positive, got {self.super_sub_scale}")
        if self.hr_scale < 0:
            errors.append(f"hr_scale must not be negative, got {self.hr_scale}")
        for name in ("paragraph_margin_top", "paragraph_margin_bottom", "hr_margin_top", "hr_margin_bottom"):
            if getattr(self, name) < 0:
                errors.append(f"{name} must not be negative, got {getattr(self, name)}")
        for level, heading in enumerate(self.headings, start=1):
            if heading.scale <= 0:
                errors.append(f"h{level} scale must be positive, got {heading.scale}")
            if heading.margin_top < 0 or heading.margin_bottom < 0:
                errors.append(
                    f"h{level} margins must not be negative, got {heading.margin_top}/{heading.margin_bottom}"
                )
        for name in ("font", "bold_font", "italic_font", "bold_italic_font"):
            if not getattr(self, name):
                errors.append(f"{name} must be a non-empty font name")

        if errors:
            raise ConfigError("invalid layout configuration", "; ".join(errors))

    def with_overrides(self, **overrides: Any) -> "LayoutConfig":
        return replace(self, **overrides)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping", type(data).__name__)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError("unknown configuration keys", ", ".join(unknown))

        values = dict(data)
        if "headings" in values:
            values["headings"] = tuple(values["headings"])
        try:
            return cls(**values)
        except TypeError as exc:
            raise ConfigError("invalid configuration value", str(exc)) from exc

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "LayoutConfig":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"cannot read configuration file {path}", str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"configuration file {path} is not valid JSON", str(exc)) from exc
        logger.debug("Loaded layout configuration from %s", path)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Color):
                value = color_to_hex(value)
            elif f.name == "headings":
                value = [
                    {
                        "scale": h.scale,
                        "margin_top": h.margin_top,
                        "margin_bottom": h.margin_bottom,
                        "bold": h.bold,
                    }
                    for h in value
                ]
            elif isinstance(value, dict):
                value = dict(value)
            result[f.name] = value
        return result


def _coerce_heading(value: Union[HeadingStyle, Dict[str, Any]]) -> HeadingStyle:
    if isinstance(value, HeadingStyle):
        return value
    if isinstance(value, dict):
        try:
            return HeadingStyle(**value)
        except TypeError as exc:
            raise ConfigError("invalid heading style", str(exc)) from exc
    raise ConfigError("heading styles must be mappings", type(value).__name__)
