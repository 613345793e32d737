"""Font size unit conversion with WCAG readability minimums."""

import math
import re
from typing import Literal, NamedTuple, NotRequired, TypedDict, get_args

__all__ = [
    "WCAG_MINIMUM_BODY_TEXT",
    "WCAG_MINIMUM_HEADINGS",
    "DEFAULT_BASE_FONT",
    "PT_TO_PX_RATIO",
    "FontSize",
    "parse_font_size",
    "parse_unit",
    "to_pixels",
    "from_pixels",
    "format_value",
    "convert",
    "check_accessibility",
    "parse_context",
    "conversion_result",
]

WCAG_MINIMUM_BODY_TEXT = 14  # pixels
WCAG_MINIMUM_HEADINGS = 18  # pixels
DEFAULT_BASE_FONT = 16  # pixels
PT_TO_PX_RATIO = 1.333  # 1pt ~ 1.333px at 96 DPI

Unit = Literal["px", "pt", "em", "rem"]
Context = Literal["body", "heading"]

UNITS: tuple[str, ...] = get_args(Unit)

_FONT_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(px|pt|em|rem)?", re.IGNORECASE)


class FontSize(NamedTuple):
    value: float
    unit: Unit


class Conversion(TypedDict):
    inputValue: float
    inputUnit: Unit
    outputValue: float
    outputUnit: Unit
    pxValue: float
    baseFontSize: float


class AccessibilityCheck(TypedDict):
    meetsMinimum: bool
    minimumRequired: int
    recommendations: list[str]


class ConversionResult(TypedDict):
    input: str
    output: str
    baseFontSize: str
    accessibility: NotRequired[AccessibilityCheck]


def parse_font_size(text: str) -> FontSize:
    """Parse ``"16px"``, ``"12pt"``, ``"1.5rem"``; a bare number is pixels."""
    match = _FONT_SIZE_PATTERN.fullmatch(str(text).strip())
    if not match:
        raise ValueError(
            f"Invalid font size: {text!r}. Expected a number with an optional "
            "unit (px, pt, em, rem)"
        )
    unit = (match.group(2) or "px").lower()
    return FontSize(float(match.group(1)), unit)  # type: ignore[arg-type]


def parse_unit(text: str) -> Unit:
    unit = str(text).strip().lower()
    if unit not in UNITS:
        raise ValueError(f"Unknown unit: {text!r}. Supported units: {', '.join(UNITS)}")
    return unit  # type: ignore[return-value]


def to_pixels(value: float, unit: Unit, base_font_size: float = DEFAULT_BASE_FONT) -> float:
    if unit == "pt":
        return value * PT_TO_PX_RATIO
    if unit in ("em", "rem"):
        return value * base_font_size
    return value


def from_pixels(
    px_value: float, target_unit: Unit, base_font_size: float = DEFAULT_BASE_FONT
) -> float:
    if target_unit == "pt":
        return px_value / PT_TO_PX_RATIO
    if target_unit in ("em", "rem"):
        return px_value / base_font_size
    return px_value


def _round_half_up(value: float, places: int = 0) -> float:
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale


def _trim(value: float) -> str:
    return f"{_round_half_up(value, 3):.3f}".rstrip("0").rstrip(".")


def format_value(value: float, unit: Unit) -> str:
    """Pixels are shown as whole numbers, other units to three decimals.

    Halves round up: 22.5px is shown as 23px.
    """
    if unit == "px":
        return f"{int(_round_half_up(value))}px"
    return f"{_trim(value)}{unit}"


def convert(
    size: FontSize, target_unit: Unit, base_font_size: float = DEFAULT_BASE_FONT
) -> Conversion:
    """Convert via pixels: source unit -> px -> target unit."""
    if base_font_size <= 0:
        raise ValueError("Base font size must be positive")

    px_value = to_pixels(size.value, size.unit, base_font_size)
    return Conversion(
        inputValue=size.value,
        inputUnit=size.unit,
        outputValue=from_pixels(px_value, target_unit, base_font_size),
        outputUnit=target_unit,
        pxValue=px_value,
        baseFontSize=base_font_size,
    )


def check_accessibility(px_value: float, context: Context = "body") -> AccessibilityCheck:
    minimum = WCAG_MINIMUM_HEADINGS if context == "heading" else WCAG_MINIMUM_BODY_TEXT
    meets_minimum = px_value >= minimum

    recommendations: list[str] = []
    if not meets_minimum:
        audience = "headings" if context == "heading" else "readable body text"
        recommendations.append(
            f"Increase to at least {minimum}px "
            f"({format_value(from_pixels(minimum, 'pt'), 'pt')}) for {audience}"
        )

    return AccessibilityCheck(
        meetsMinimum=meets_minimum,
        minimumRequired=minimum,
        recommendations=recommendations,
    )


def parse_context(text: str) -> Context:
    context = str(text).strip().lower()
    if context not in get_args(Context):
        raise ValueError(f"Unknown context: {text!r}. Supported contexts: body, heading")
    return context  # type: ignore[return-value]


def conversion_result(
    conversion: Conversion, accessibility: AccessibilityCheck | None = None
) -> ConversionResult:
    result = ConversionResult(
        input=format_value(conversion["inputValue"], conversion["inputUnit"]),
        output=format_value(conversion["outputValue"], conversion["outputUnit"]),
        baseFontSize=f"{_trim(conversion['baseFontSize'])}px",
    )
    if accessibility is not None:
        result["accessibility"] = accessibility
    return result
