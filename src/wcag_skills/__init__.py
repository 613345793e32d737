"""wcag_skills - WCAG accessibility checks and skill documentation tooling"""

__version__ = "0.1.0"

from .color_blindness import Deficiency, simulate_color_blindness
from .color_utils import Color, UnsupportedColorFormatError, format_hex, parse_color
from .contrast import ContentType, check_compliance, contrast_ratio, relative_luminance
from .focus_order import validate_focus_order
from .motion import assess_animation
from .target_size import assess_target
from .text_size import convert, parse_font_size

__all__ = [
    "Color",
    "ContentType",
    "Deficiency",
    "UnsupportedColorFormatError",
    "assess_animation",
    "assess_target",
    "check_compliance",
    "contrast_ratio",
    "convert",
    "format_hex",
    "parse_color",
    "parse_font_size",
    "relative_luminance",
    "simulate_color_blindness",
    "validate_focus_order",
]
