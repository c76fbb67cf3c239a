"""Color parsing for configuration values."""

from __future__ import annotations

from typing import Union

from reportlab.lib import colors
from reportlab.lib.colors import Color, HexColor

from ..exceptions import ConfigError

ColorLike = Union[Color, str, tuple, list]

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def parse_color(value: ColorLike) -> Color:
    """
    Convert a configuration value into a reportlab ``Color``.

    Accepts ``Color`` instances, ``(r, g, b)`` triples in the 0-1 range,
    hex strings with or without a leading ``#`` and reportlab color names.

    Raises:
        ConfigError: If the value cannot be interpreted as a color
    """
    if isinstance(value, Color):
        return value

    if isinstance(value, (tuple, list)):
        if len(value) not in (3, 4):
            raise ConfigError("color triples must have three or four components", str(value))
        try:
            components = [float(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise ConfigError("invalid color components", str(value)) from exc
        if any(c < 0.0 or c > 1.0 for c in components):
            raise ConfigError("color components must lie in [0, 1]", str(value))
        return Color(*components)

    token = str(value or "").strip()
    if not token:
        raise ConfigError("empty color value")

    if not token.startswith("#") and len(token) in (3, 6) and set(token) <= _HEX_DIGITS:
        token = f"#{token}"

    if token.startswith("#"):
        try:
            return HexColor(token)
        except ValueError as exc:
            raise ConfigError("invalid hex color", token) from exc

    try:
        return colors.toColor(token)
    except ValueError as exc:
        raise ConfigError("unknown color name", token) from exc


def color_to_hex(color: Color) -> str:
    return color.hexval().replace("0x", "#")
