"""Color parsing and formatting utilities for wcag_skills."""

import re
from typing import NamedTuple

import colour

__all__ = [
    "Color",
    "UnsupportedColorFormatError",
    "parse_hex_color",
    "parse_rgb_color",
    "parse_color",
    "format_hex",
    "format_rgb",
]

_HEX_PATTERN = re.compile(r"#([0-9a-f]{3}|[0-9a-f]{6})", re.IGNORECASE)
_RGB_PATTERN = re.compile(
    r"rgb\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE
)
_HSL_PATTERN = re.compile(r"hsla?\s*\(.*\)", re.IGNORECASE)


class UnsupportedColorFormatError(ValueError):
    """Raised for color notations that are recognised but not supported."""


class Color(NamedTuple):
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def normalized(self) -> tuple[float, float, float]:
        """Channels scaled to the [0, 1] range."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)


def parse_hex_color(color_str: str) -> Color | None:
    """Parse hexadecimal color format #RGB or #RRGGBB."""
    match = _HEX_PATTERN.fullmatch(color_str.strip())
    if not match:
        return None

    hex_str = match.group(1)
    if len(hex_str) == 3:
        hex_str = "".join(c * 2 for c in hex_str)

    rgb = colour.notation.HEX_to_RGB(hex_str)
    r, g, b = (int(round(float(c) * 255)) for c in rgb)
    return Color(r, g, b)


def parse_rgb_color(color_str: str) -> Color | None:
    """Parse RGB color format rgb(R, G, B)."""
    match = _RGB_PATTERN.fullmatch(color_str.strip())
    if not match:
        return None

    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    if not all(0 <= val <= 255 for val in (r, g, b)):
        return None

    return Color(r, g, b)


def parse_color(color_str: str) -> Color:
    """Parse a color string in hex or rgb() notation.

    HSL input is rejected with :class:`UnsupportedColorFormatError` rather
    than being approximated.
    """
    color_str = color_str.strip()

    if _HSL_PATTERN.fullmatch(color_str):
        raise UnsupportedColorFormatError(
            f"HSL color format is not supported: '{color_str}'. "
            "Convert it to #RRGGBB or rgb(R,G,B) first"
        )

    for parser in (parse_hex_color, parse_rgb_color):
        result = parser(color_str)
        if result is not None:
            return result

    raise ValueError(
        f"Invalid color format: '{color_str}'. "
        "Supported formats: #RGB, #RRGGBB, rgb(R,G,B)"
    )


def format_hex(color: Color) -> str:
    """Format a color as upper-case #RRGGBB."""
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def format_rgb(color: Color) -> str:
    """Format a color as rgb(R, G, B)."""
    return f"rgb({color.r}, {color.g}, {color.b})"
