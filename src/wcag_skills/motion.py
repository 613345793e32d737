"""Animation and motion checks (WCAG 2.2.2, 2.3.1 and 2.3.3).

Three independent checks each contribute their own issues and
recommendations:

    - reduced motion: any animation is flagged when the user prefers reduced
      motion, whatever its duration or flash rate
    - flashing: more than three flashes per second always fails
    - duration: anything longer than five seconds fails, and auto-advancing
      content (carousels, tickers, ...) additionally needs pause controls

Overall compliance is the conjunction of the three.
"""

from typing import Any, TypedDict

__all__ = [
    "MAX_AUTO_DURATION",
    "MAX_FLASHES_PER_SECOND",
    "AUTO_ADVANCE_TYPES",
    "HIGH_RISK_TYPES",
    "check_reduced_motion",
    "check_flashing",
    "check_duration",
    "assess_animation",
    "is_compliant",
    "parse_bool",
]

MAX_AUTO_DURATION = 5  # seconds
MAX_FLASHES_PER_SECOND = 3

AUTO_ADVANCE_TYPES = ("carousel", "slideshow", "auto-advance", "ticker", "marquee")
HIGH_RISK_TYPES = ("parallax", "scroll-triggered", "3d-transform")

PAUSE_CONTROL_RECOMMENDATION = (
    "Provide pause/stop controls or reduce duration to under 5 seconds"
)


class CheckResult(TypedDict):
    compliant: bool
    issues: list[str]
    recommendations: list[str]


class Assessment(TypedDict):
    animation: dict[str, Any]
    compliance: dict[str, bool]
    issues: list[str]
    recommendations: list[str]


def check_reduced_motion(duration: float, type: str, reduced_motion: bool) -> CheckResult:
    issues: list[str] = []
    recommendations: list[str] = []

    if reduced_motion:
        issues.append(
            "User prefers reduced motion - animation should be disabled or minimized"
        )
        recommendations.append(
            "Disable or significantly reduce animation when user prefers reduced motion"
        )

    if duration > MAX_AUTO_DURATION and any(t in type for t in AUTO_ADVANCE_TYPES):
        issues.append(
            f"Auto-playing {type} duration ({duration:g}s) exceeds "
            f"{MAX_AUTO_DURATION}s limit"
        )
        recommendations.append(PAUSE_CONTROL_RECOMMENDATION)

    if any(t in type for t in HIGH_RISK_TYPES):
        recommendations.append(
            "Consider providing option to disable or reduce motion intensity"
        )

    return CheckResult(compliant=not issues, issues=issues, recommendations=recommendations)


def check_flashing(flashes: float) -> CheckResult:
    compliant = flashes <= MAX_FLASHES_PER_SECOND
    issues: list[str] = []
    recommendations: list[str] = []

    if not compliant:
        issues.append(
            f"Flashing frequency ({flashes:g} flashes/s) exceeds "
            f"{MAX_FLASHES_PER_SECOND} flashes/s limit"
        )
        recommendations.extend(
            [
                "Reduce flashing to maximum 3 flashes per second",
                "Consider non-flashing alternatives for important information",
                "Test with users sensitive to flashing content",
            ]
        )

    return CheckResult(compliant=compliant, issues=issues, recommendations=recommendations)


def check_duration(duration: float) -> CheckResult:
    compliant = duration <= MAX_AUTO_DURATION
    issues: list[str] = []
    recommendations: list[str] = []

    if not compliant:
        issues.append(
            f"Animation duration ({duration:g}s) exceeds "
            f"{MAX_AUTO_DURATION}s recommended limit"
        )
        recommendations.extend(
            [
                "Consider shorter duration or provide user controls",
                "Break long animations into smaller segments with pauses",
            ]
        )

    return CheckResult(compliant=compliant, issues=issues, recommendations=recommendations)


def assess_animation(
    duration: float,
    type: str = "unknown",
    flashes: float = 0,
    reduced_motion: bool = False,
) -> Assessment:
    """Run all motion checks and merge their findings."""
    type = type.lower()
    reduced = check_reduced_motion(duration, type, reduced_motion)
    flashing = check_flashing(flashes)
    timing = check_duration(duration)

    checks = (reduced, flashing, timing)
    issues = [issue for check in checks for issue in check["issues"]]
    recommendations = list(
        dict.fromkeys(rec for check in checks for rec in check["recommendations"])
    )

    return Assessment(
        animation={"duration": duration, "type": type, "flashes": flashes},
        compliance={
            "reducedMotion": not reduced_motion or reduced["compliant"],
            "flashing": flashing["compliant"],
            "duration": timing["compliant"],
        },
        issues=issues,
        recommendations=recommendations,
    )


def is_compliant(assessment: Assessment) -> bool:
    return all(assessment["compliance"].values())


def parse_bool(value: Any) -> bool:
    """Interpret flag values such as ``true``/``false``/``1``/``0``."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "1", "yes", "on"):
        return True
    if text in ("false", "0", "no", "off", ""):
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
