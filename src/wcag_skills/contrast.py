"""Contrast ratio calculation and WCAG compliance checks for wcag_skills.

This module implements the Web Content Accessibility Guidelines (WCAG) 2.x
definitions of relative luminance and contrast ratio, and evaluates a color
pair against the Success Criteria 1.4.3 (Contrast Minimum), 1.4.6 (Contrast
Enhanced) and 1.4.11 (Non-text Contrast).

Key Features:
    - WCAG 2.x relative luminance using the sRGB transfer function
    - Order-independent contrast ratio in the range [1.0, 21.0]
    - Threshold tables keyed by conformance level and text size
    - Separate rule set for non-text content (UI components, graphics)

Standards Compliance:
    - Level AA Normal Text: 4.5:1
    - Level AA Large Text: 3.0:1
    - Level AAA Normal Text: 7.0:1
    - Level AAA Large Text: 4.5:1
    - Non-text (AA and AAA): 3.0:1

Example:
    >>> from wcag_skills.color_utils import Color
    >>> from wcag_skills.contrast import contrast_ratio
    >>> contrast_ratio(Color(0, 0, 0), Color(255, 255, 255))
    21.0
"""

import enum
from collections.abc import Sequence
from types import MappingProxyType
from typing import TypedDict

from .color_utils import Color

__all__ = [
    "ConformanceLevel",
    "ContentType",
    "TextSize",
    "TEXT_THRESHOLDS",
    "NON_TEXT_THRESHOLD",
    "relative_luminance",
    "contrast_ratio",
    "check_compliance",
    "parse_content_type",
]


class ConformanceLevel(enum.Enum):
    AA = "AA"
    AAA = "AAA"


class TextSize(enum.Enum):
    NORMAL = "normal"
    LARGE = "large"


class ContentType(enum.Enum):
    TEXT = "text"
    NON_TEXT = "non-text"


TEXT_THRESHOLDS = MappingProxyType(
    {
        (ConformanceLevel.AA, TextSize.NORMAL): 4.5,
        (ConformanceLevel.AA, TextSize.LARGE): 3.0,
        (ConformanceLevel.AAA, TextSize.NORMAL): 7.0,
        (ConformanceLevel.AAA, TextSize.LARGE): 4.5,
    }
)

# SC 1.4.11 has no AAA counterpart; the same ratio applies to both levels.
NON_TEXT_THRESHOLD = 3.0

LUMINANCE_COEFFICIENTS = (0.2126, 0.7152, 0.0722)


class TextCompliance(TypedDict):
    normal: bool
    large: bool


ComplianceReport = dict[str, TextCompliance] | dict[str, bool]


def _linearize(c: float) -> float:
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: Color | Sequence[float]) -> float:
    """Compute the relative luminance of an sRGB color.

    Args:
        rgb: Either a :class:`Color` with 8-bit channels, or a sequence of
            three channel values already normalized to [0, 1].

    Returns:
        float: Relative luminance in [0.0, 1.0]; 0.0 for black, 1.0 for white.

    Algorithm:
        - For c <= 0.03928: linear_c = c / 12.92
        - For c > 0.03928: linear_c = ((c + 0.055) / 1.055) ** 2.4
        - L = 0.2126 * R + 0.7152 * G + 0.0722 * B

    Examples:
        >>> relative_luminance(Color(255, 255, 255))
        1.0
        >>> relative_luminance([1.0, 0.0, 0.0])
        0.2126
    """
    if isinstance(rgb, Color):
        rgb = rgb.normalized()

    r, g, b = rgb
    kr, kg, kb = LUMINANCE_COEFFICIENTS
    return kr * _linearize(r) + kg * _linearize(g) + kb * _linearize(b)


def contrast_ratio(color1: Color, color2: Color) -> float:
    """Calculate the WCAG contrast ratio between two colors.

    The ratio is order-independent:
    ``ratio = (L_lighter + 0.05) / (L_darker + 0.05)``. The 0.05 offset
    models ambient flare and keeps pure black from dividing by zero.

    Returns:
        float: Contrast ratio in [1.0, 21.0]. Identical colors give exactly
        1.0; black against white gives 21.0.
    """
    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def parse_content_type(value: str | None) -> ContentType:
    """Map a ``--type`` value onto :class:`ContentType` (default text)."""
    if value is None:
        return ContentType.TEXT
    try:
        return ContentType(value.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown content type: '{value}'. Supported types: text, non-text"
        ) from None


def check_compliance(
    ratio: float, content_type: ContentType = ContentType.TEXT
) -> ComplianceReport:
    """Evaluate a contrast ratio against the WCAG thresholds.

    The ratio is rounded to two decimals before comparison so that a value
    displayed as ``4.5:1`` never fails a 4.5 threshold.

    Returns:
        For text: ``{"AA": {"normal": bool, "large": bool}, "AAA": {...}}``.
        For non-text: ``{"AA": bool, "AAA": bool}``.
    """
    rounded = round(ratio, 2)

    if content_type is ContentType.NON_TEXT:
        return {
            level.value: rounded >= NON_TEXT_THRESHOLD for level in ConformanceLevel
        }

    return {
        level.value: TextCompliance(
            normal=rounded >= TEXT_THRESHOLDS[(level, TextSize.NORMAL)],
            large=rounded >= TEXT_THRESHOLDS[(level, TextSize.LARGE)],
        )
        for level in ConformanceLevel
    }
