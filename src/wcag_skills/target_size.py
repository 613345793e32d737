"""Touch target size checks (WCAG 2.5.5 Target Size)."""

import re
from typing import Any, NotRequired, TypedDict

__all__ = [
    "WCAG_MINIMUM_SIZE",
    "RECOMMENDED_SPACING",
    "parse_pixels",
    "parse_dimensions",
    "check_size",
    "check_spacing",
    "generate_recommendations",
    "assess_target",
]

WCAG_MINIMUM_SIZE = 44  # pixels
RECOMMENDED_SPACING = 8  # pixels

_PIXELS_PATTERN = re.compile(r"(\d+)\s*(?:px)?", re.IGNORECASE)


class SizeCheck(TypedDict):
    compliant: bool
    minimumWidth: int
    minimumHeight: int
    actualWidth: int
    actualHeight: int


class SpacingCheck(TypedDict):
    compliant: bool | None
    recommended: int
    actual: int | None


class TargetResult(TypedDict):
    element: str
    dimensions: dict[str, int]
    minimumRequired: dict[str, int]
    compliance: dict[str, bool | None]
    recommendations: NotRequired[list[str]]


def parse_pixels(value: Any, name: str, allow_zero: bool = False) -> int:
    """Parse a pixel count given as an int or a string such as ``"48"``/``"48px"``."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid {name}: {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)

    if isinstance(value, int):
        pixels = value
    else:
        match = _PIXELS_PATTERN.fullmatch(str(value).strip())
        if not match:
            raise ValueError(f"Invalid {name}: {value!r} is not a whole number of pixels")
        pixels = int(match.group(1))

    if pixels < 0 or (pixels == 0 and not allow_zero):
        raise ValueError(f"Invalid {name}: must be a positive number of pixels")
    return pixels


def parse_dimensions(value: str) -> tuple[int, int]:
    """Parse a ``WIDTHxHEIGHT`` string such as ``"48x48"``."""
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Invalid dimensions: {value!r}, expected WIDTHxHEIGHT")
    return parse_pixels(parts[0], "width"), parse_pixels(parts[1], "height")


def check_size(width: int, height: int) -> SizeCheck:
    return SizeCheck(
        compliant=width >= WCAG_MINIMUM_SIZE and height >= WCAG_MINIMUM_SIZE,
        minimumWidth=WCAG_MINIMUM_SIZE,
        minimumHeight=WCAG_MINIMUM_SIZE,
        actualWidth=width,
        actualHeight=height,
    )


def check_spacing(spacing: int | None) -> SpacingCheck:
    """Spacing compliance is ``None`` (unknown) when no spacing was given."""
    if spacing is None:
        return SpacingCheck(compliant=None, recommended=RECOMMENDED_SPACING, actual=None)

    return SpacingCheck(
        compliant=spacing >= RECOMMENDED_SPACING,
        recommended=RECOMMENDED_SPACING,
        actual=spacing,
    )


def generate_recommendations(size: SizeCheck, spacing: SpacingCheck) -> list[str]:
    recommendations: list[str] = []

    if size["actualWidth"] < WCAG_MINIMUM_SIZE:
        recommendations.append(
            f"Increase width to at least {WCAG_MINIMUM_SIZE}px "
            f"(currently {size['actualWidth']}px)"
        )
    if size["actualHeight"] < WCAG_MINIMUM_SIZE:
        recommendations.append(
            f"Increase height to at least {WCAG_MINIMUM_SIZE}px "
            f"(currently {size['actualHeight']}px)"
        )

    if spacing["compliant"] is False:
        recommendations.append(
            f"Ensure at least {RECOMMENDED_SPACING}px spacing between adjacent "
            f"interactive elements (currently {spacing['actual']}px)"
        )
    elif spacing["compliant"] is None:
        recommendations.append(
            f"Consider providing at least {RECOMMENDED_SPACING}px spacing between "
            "adjacent interactive elements"
        )

    return recommendations


def assess_target(
    width: int,
    height: int,
    spacing: int | None = None,
    element: str = "interactive element",
) -> TargetResult:
    """Run the size and spacing checks and build the report."""
    size = check_size(width, height)
    spacing_check = check_spacing(spacing)
    recommendations = generate_recommendations(size, spacing_check)

    result = TargetResult(
        element=element,
        dimensions={"width": width, "height": height},
        minimumRequired={"width": WCAG_MINIMUM_SIZE, "height": WCAG_MINIMUM_SIZE},
        compliance={"size": size["compliant"], "spacing": spacing_check["compliant"]},
    )
    if recommendations:
        result["recommendations"] = recommendations
    return result
