"""Command-line interface for wcag_skills.

Every checker is a standalone command. Options may be given individually or
as a single ``--json '<object>'`` blob whose keys override the individual
options; passing ``--json`` (with or without a blob) also switches the output
to JSON.
"""

import json
import sys
import warnings
from pathlib import Path
from typing import Any, Callable, NoReturn

import click

from . import __version__
from .build import build as build_artifacts
from .color_blindness import (
    DESCRIPTIONS,
    Deficiency,
    parse_deficiency,
    simulate_all,
    simulate_color_blindness,
    simulation_result,
)
from .color_utils import format_hex, format_rgb, parse_color
from .contrast import ContentType, check_compliance, contrast_ratio, parse_content_type
from .focus_order import parse_element_list, parse_index_list, validate_focus_order
from .image_generation import create_swatch_png
from .motion import assess_animation, is_compliant, parse_bool
from .skills import find_skill_files, validate_skill_file
from .target_size import (
    RECOMMENDED_SPACING,
    WCAG_MINIMUM_SIZE,
    assess_target,
    parse_dimensions,
    parse_pixels,
)
from .text_size import (
    DEFAULT_BASE_FONT,
    check_accessibility,
    conversion_result,
    convert,
    parse_context,
    parse_font_size,
    parse_unit,
    to_pixels,
)

CONTRAST_USAGE = (
    'Usage: wcag-contrast --foreground "#000000" --background "#FFFFFF" '
    "[--type text|non-text]",
    'Or: wcag-contrast --json \'{"foreground": "#000000", "background": "#FFFFFF"}\'',
)
SIMULATE_USAGE = (
    'Usage: wcag-color-blindness --color "#FF0000" --type protanopia',
    "Supported types: protanopia, deuteranopia, tritanopia, all",
    'Or: wcag-color-blindness --json \'{"color": "#FF0000", "type": "protanopia"}\'',
)
TARGET_SIZE_USAGE = (
    'Usage: wcag-target-size --width 48 --height 48 [--spacing 8] [--element "button"]',
    'Or: wcag-target-size --dimensions "48x48"',
    'Or: wcag-target-size --json \'{"width": 48, "height": 48, "spacing": 8}\'',
)
MOTION_USAGE = (
    "Usage: wcag-motion --duration 3.5 --type parallax [--flashes 0] "
    "[--reduced-motion true]",
    'Or: wcag-motion --json \'{"duration": 3.5, "type": "parallax"}\'',
)
TEXT_SIZE_USAGE = (
    'Usage: wcag-text-size --from "16px" --to rem [--base-font "16px"] '
    "[--accessibility-check]",
    'Or: wcag-text-size --json \'{"from": "16px", "to": "rem"}\'',
)
FOCUS_ORDER_USAGE = (
    'Usage: wcag-focus-order --elements "header,nav,main,button" --tab-order "1,2,3,4"',
    'Or: wcag-focus-order --json \'{"elements": ["header", "nav"], "tabOrder": [1, 2]}\'',
)


def _fail(message: str, usage: tuple[str, ...] = ()) -> NoReturn:
    click.echo(message, err=True)
    for line in usage:
        click.echo(line, err=True)
    sys.exit(1)


def _load_json(raw: str | None) -> dict[str, Any]:
    if raw is None:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        _fail("Invalid JSON input")
    if not isinstance(data, dict):
        _fail("Invalid JSON input")
    return data


def _pick(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """First of ``keys`` present in the JSON input, else ``default``."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _mark(passed: bool) -> str:
    return "✅" if passed else "❌"


def _echo_list(title: str, items: list[str]) -> None:
    if items:
        click.echo()
        click.echo(title)
        for item in items:
            click.echo(f"- {item}")


def _parse_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid {name}: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name}: {value!r} is not a number") from None
    if number < 0:
        raise ValueError(f"Invalid {name}: must not be negative")
    return number


def json_option(f: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--json",
        "json_input",
        is_flag=False,
        flag_value="{}",
        default=None,
        help="Read options from a JSON object and print the result as JSON",
    )(f)


@click.group()
@click.version_option(version=__version__, prog_name="wcag-skills")
def main() -> None:
    """WCAG accessibility checks for AI coding agents.

    Each sub-command is also installed as a standalone ``wcag-*`` script.
    """


@main.command("contrast")
@click.option("--foreground", "--fg", help="Foreground color: #RGB, #RRGGBB or rgb(R,G,B)")
@click.option("--background", "--bg", help="Background color: #RGB, #RRGGBB or rgb(R,G,B)")
@click.option("--type", "content_type", help="Content type: text (default) or non-text")
@json_option
def contrast(
    foreground: str | None,
    background: str | None,
    content_type: str | None,
    json_input: str | None,
) -> None:
    """Calculate the contrast ratio of two colors and check WCAG compliance.

    Examples:

        wcag-contrast --foreground "#333" --background "#FFFFFF"

        wcag-contrast --fg "rgb(0, 102, 204)" --bg "#FFF" --type non-text

        wcag-contrast --json '{"foreground": "#000", "background": "#FFF"}'
    """
    data = _load_json(json_input)
    foreground = _pick(data, "foreground", "fg", default=foreground)
    background = _pick(data, "background", "bg", default=background)
    content_type = _pick(data, "type", default=content_type)

    if not foreground or not background:
        _fail("Error: both foreground and background colors are required", CONTRAST_USAGE)

    try:
        fg_color = parse_color(str(foreground))
        bg_color = parse_color(str(background))
        kind = parse_content_type(None if content_type is None else str(content_type))
    except ValueError as e:
        _fail(f"Error: {e}", CONTRAST_USAGE)

    ratio = contrast_ratio(fg_color, bg_color)
    compliance = check_compliance(ratio, kind)

    if json_input is not None:
        _echo_json(
            {
                "contrastRatio": round(ratio, 2),
                "compliance": compliance,
                "colors": {
                    "foreground": format_rgb(fg_color),
                    "background": format_rgb(bg_color),
                },
            }
        )
        return

    click.echo(f"Contrast Ratio: {round(ratio, 2):g}:1")
    if kind is ContentType.NON_TEXT:
        passed = compliance["AA"]
        click.echo(f"{_mark(passed)} Non-text contrast: {'PASS' if passed else 'FAIL'}")
        return

    for level in ("AA", "AAA"):
        for size in ("normal", "large"):
            passed = compliance[level][size]  # type: ignore[index]
            click.echo(
                f"{_mark(passed)} {level} {size.capitalize()} Text: "
                f"{'PASS' if passed else 'FAIL'}"
            )


@main.command("simulate")
@click.option("--color", help="Color to simulate: #RGB, #RRGGBB or rgb(R,G,B)")
@click.option(
    "--type",
    "deficiency",
    help="protanopia, deuteranopia, tritanopia, or all",
)
@click.option("-o", "--output", help="Also write a PNG swatch of the simulation")
@json_option
def simulate(
    color: str | None,
    deficiency: str | None,
    output: str | None,
    json_input: str | None,
) -> None:
    """Simulate how a color appears with a color vision deficiency.

    Examples:

        wcag-color-blindness --color "#FF0000" --type protanopia

        wcag-color-blindness --color "rgb(0, 128, 0)" --type all -o swatch.png

        wcag-color-blindness --json '{"color": "#F00", "type": "deuteranopia"}'
    """
    data = _load_json(json_input)
    color = _pick(data, "color", default=color)
    deficiency = _pick(data, "type", default=deficiency)

    if not color:
        _fail("Error: a color is required", SIMULATE_USAGE)

    try:
        original = parse_color(str(color))
        if str(deficiency).strip().lower() == "all":
            types = list(Deficiency)
        else:
            types = [parse_deficiency(None if deficiency is None else str(deficiency))]
    except ValueError as e:
        _fail(f"Error: {e}", SIMULATE_USAGE)

    simulated = (
        simulate_all(original)
        if len(types) > 1
        else {types[0]: simulate_color_blindness(original, types[0])}
    )

    if output:
        swatches = [("original", original)]
        swatches += [(d.value, c) for d, c in simulated.items()]
        try:
            create_swatch_png(swatches, output)
        except (OSError, ValueError) as e:
            _fail(f"Error creating PNG: {e}")

    if json_input is not None:
        if len(types) == 1:
            _echo_json(simulation_result(original, types[0]))
        else:
            _echo_json(
                {
                    "original": format_hex(original),
                    "simulations": [simulation_result(original, d) for d in types],
                }
            )
        return

    click.echo(f"Original: {format_hex(original)} ({format_rgb(original)})")
    for d, result in simulated.items():
        click.echo(f"{d.value}: {format_hex(result)} ({format_rgb(result)})")
    for d in simulated:
        appearance = DESCRIPTIONS[d].split(" - ")[0].lower()
        click.echo(f"This color appears as {appearance} to someone with {d.value}")


@main.command("target-size")
@click.option("--width", help="Target width in pixels")
@click.option("--height", help="Target height in pixels")
@click.option("--dimensions", help='Width and height as "WIDTHxHEIGHT"')
@click.option("--spacing", help="Spacing to the nearest adjacent target in pixels")
@click.option("--element", help="Label of the element being checked")
@json_option
def target_size(
    width: str | None,
    height: str | None,
    dimensions: str | None,
    spacing: str | None,
    element: str | None,
    json_input: str | None,
) -> None:
    """Check an interactive element against the 44x44px minimum target size.

    Examples:

        wcag-target-size --width 40 --height 40

        wcag-target-size --dimensions 48x48 --spacing 8 --element "Menu button"
    """
    data = _load_json(json_input)
    width = _pick(data, "width", default=width)
    height = _pick(data, "height", default=height)
    dimensions = _pick(data, "dimensions", default=dimensions)
    spacing = _pick(data, "spacing", default=spacing)
    element = str(_pick(data, "element", default=element) or "interactive element")

    try:
        if dimensions:
            width_px, height_px = parse_dimensions(str(dimensions))
        elif width is None or height is None:
            _fail("Error: width and height are required", TARGET_SIZE_USAGE)
        else:
            width_px = parse_pixels(width, "width")
            height_px = parse_pixels(height, "height")
        spacing_px = (
            None if spacing is None else parse_pixels(spacing, "spacing", allow_zero=True)
        )
    except ValueError as e:
        _fail(f"Error: {e}", TARGET_SIZE_USAGE)

    result = assess_target(width_px, height_px, spacing_px, element)

    if json_input is not None:
        _echo_json(result)
        return

    minimum = f"{WCAG_MINIMUM_SIZE}x{WCAG_MINIMUM_SIZE}px"
    size = f"{width_px}x{height_px}px"
    click.echo(f"Checking target size for: {element}")
    click.echo(f"Dimensions: {size}")
    click.echo(f"Minimum required: {minimum}")
    click.echo()

    if result["compliance"]["size"]:
        click.echo(f"✅ Size: PASS ({size} meets {minimum} minimum)")
    else:
        click.echo(f"❌ Size: FAIL ({size} is below {minimum} minimum)")

    spacing_ok = result["compliance"]["spacing"]
    if spacing_ok is True:
        click.echo(f"✅ Spacing: PASS ({spacing_px}px spacing provided)")
    elif spacing_ok is False:
        click.echo("❌ Spacing: FAIL (insufficient spacing between targets)")
    else:
        click.echo(
            "⚠️  Spacing: UNKNOWN (not specified - recommend at least "
            f"{RECOMMENDED_SPACING}px)"
        )

    recommendations = result.get("recommendations", [])
    if recommendations:
        _echo_list("Recommendations:", recommendations)
    else:
        click.echo()
        click.echo("No issues found - this target meets accessibility requirements")


@main.command("motion")
@click.option("--duration", help="Animation duration in seconds")
@click.option("--type", "animation_type", help="Animation category, e.g. carousel, parallax")
@click.option("--flashes", help="Flashes per second")
@click.option(
    "--reduced-motion",
    "--reducedMotion",
    "reduced_motion",
    is_flag=False,
    flag_value="true",
    help="Whether the user prefers reduced motion (true/false)",
)
@json_option
def motion(
    duration: str | None,
    animation_type: str | None,
    flashes: str | None,
    reduced_motion: str | None,
    json_input: str | None,
) -> None:
    """Test an animation for flashing, duration and reduced-motion compliance.

    Examples:

        wcag-motion --duration 6 --type carousel

        wcag-motion --duration 2 --type parallax --reduced-motion true

        wcag-motion --json '{"duration": 1, "type": "fade", "flashes": 4}'
    """
    data = _load_json(json_input)
    duration = _pick(data, "duration", default=duration)
    animation_type = _pick(data, "type", default=animation_type)
    flashes = _pick(data, "flashes", default=flashes)
    reduced_motion = _pick(
        data, "userPrefersReducedMotion", "reducedMotion", default=reduced_motion
    )

    try:
        seconds = 0.0 if duration is None else _parse_float(duration, "duration")
        flash_rate = 0.0 if flashes is None else _parse_float(flashes, "flashes")
        prefers_reduced = False if reduced_motion is None else parse_bool(reduced_motion)
    except ValueError as e:
        _fail(f"Error: {e}", MOTION_USAGE)

    if seconds == 0 and json_input is None:
        _fail("Error: a positive duration is required", MOTION_USAGE)

    assessment = assess_animation(
        seconds, str(animation_type or "unknown"), flash_rate, prefers_reduced
    )

    if json_input is not None:
        _echo_json(assessment)
        return

    compliance = assessment["compliance"]
    animation = assessment["animation"]
    click.echo(
        f"Testing {animation['type']} animation ({seconds:g}s duration, "
        f"{flash_rate:g} flashes/s):"
    )
    click.echo()

    if prefers_reduced:
        click.echo("⚠️  Reduced motion: NEEDS ATTENTION (user prefers reduced motion)")
    else:
        click.echo("✅ Reduced motion: RESPECTED")

    if compliance["flashing"]:
        click.echo("✅ Flashing: PASS (within safe limits)")
    else:
        click.echo("❌ Flashing: FAIL (exceeds safe limits)")

    if compliance["duration"]:
        click.echo("✅ Duration: PASS (within recommended limits)")
    else:
        click.echo("❌ Duration: FAIL (exceeds recommended limits)")

    _echo_list("Issues found:", assessment["issues"])
    _echo_list("Recommendations:", assessment["recommendations"])

    if is_compliant(assessment) and not assessment["issues"]:
        click.echo()
        click.echo("Animation meets accessibility requirements")


@main.command("text-size")
@click.option("--from", "source", help='Font size to convert, e.g. "16px", "12pt", "1.5rem"')
@click.option("--value", help="Alias of --from")
@click.option("--to", "target", help="Target unit: px (default), pt, em, rem")
@click.option("--base-font", "--baseFont", "base_font", help='Base font size (default "16px")')
@click.option("--context", help="Text context for the check: body (default) or heading")
@click.option(
    "--accessibility-check",
    "--accessibilityCheck",
    "accessibility_check",
    is_flag=True,
    help="Also check the size against WCAG readability minimums",
)
@json_option
def text_size(
    source: str | None,
    value: str | None,
    target: str | None,
    base_font: str | None,
    context: str | None,
    accessibility_check: bool,
    json_input: str | None,
) -> None:
    """Convert font sizes between px, pt, em and rem.

    Examples:

        wcag-text-size --from 12pt --to px --accessibility-check

        wcag-text-size --from 24px --to rem --base-font 16px

        wcag-text-size --json '{"from": "1.5rem", "to": "pt", "baseFontSize": 18}'
    """
    data = _load_json(json_input)
    source = _pick(data, "from", "value", default=source or value)
    target = _pick(data, "to", default=target)
    base_font = _pick(data, "baseFontSize", "baseFont", default=base_font)
    context = _pick(data, "context", default=context)
    accessibility_check = _pick(data, "accessibilityCheck", default=accessibility_check)

    if not source:
        _fail("Error: a font size to convert is required", TEXT_SIZE_USAGE)

    try:
        size = parse_font_size(str(source))
        accessibility_check = parse_bool(accessibility_check)
        unit = parse_unit(target) if target else "px"
        if base_font is None:
            base_px = float(DEFAULT_BASE_FONT)
        elif isinstance(base_font, (int, float)) and not isinstance(base_font, bool):
            base_px = float(base_font)
        else:
            base = parse_font_size(str(base_font))
            base_px = to_pixels(base.value, base.unit)
        text_context = parse_context(context) if context else "body"
        conversion = convert(size, unit, base_px)
    except ValueError as e:
        _fail(f"Error: {e}", TEXT_SIZE_USAGE)

    accessibility = (
        check_accessibility(conversion["pxValue"], text_context)
        if accessibility_check
        else None
    )
    result = conversion_result(conversion, accessibility)

    if json_input is not None:
        _echo_json(result)
        return

    click.echo(f"{result['input']} = {result['output']} (base font: {result['baseFontSize']})")

    if accessibility is not None:
        px = f"{conversion['pxValue']:g}px"
        minimum = f"{accessibility['minimumRequired']}px"
        if accessibility["meetsMinimum"]:
            click.echo(f"✅ Accessibility: PASS ({px} meets {minimum} minimum)")
        else:
            click.echo(
                f"❌ Accessibility: FAIL ({px} below {minimum} minimum "
                f"for {text_context} text)"
            )
            for recommendation in accessibility["recommendations"][:1]:
                click.echo(f"Recommendation: {recommendation}")


@main.command("focus-order")
@click.option("--elements", help='Comma-separated element labels, e.g. "header,nav,main"')
@click.option("--tab-order", "--tabOrder", "tab_order", help='Comma-separated tab indices')
@click.option("--expected", help="Comma-separated expected tab indices")
@json_option
def focus_order(
    elements: str | None,
    tab_order: str | None,
    expected: str | None,
    json_input: str | None,
) -> None:
    """Validate that keyboard focus follows a logical reading sequence.

    Examples:

        wcag-focus-order --elements "header,main,footer" --tab-order "1,2,3"

        wcag-focus-order --json '{"elements": ["nav", "nav menu"], "tabOrder": [1, 1]}'
    """
    data = _load_json(json_input)
    raw_elements = _pick(data, "elements", default=elements)
    raw_tab_order = _pick(data, "tabOrder", "tab_order", default=tab_order)
    raw_expected = _pick(data, "expectedOrder", "expected_order", default=expected)

    if not raw_elements or not raw_tab_order:
        _fail("Error: elements and tab order are required", FOCUS_ORDER_USAGE)

    try:
        labels = parse_element_list(raw_elements)
        indices = parse_index_list(raw_tab_order)
        expected_order = (
            None if raw_expected is None else parse_index_list(raw_expected, "expected order")
        )
        result = validate_focus_order(labels, indices, expected_order)
    except ValueError as e:
        _fail(f"Error: {e}", FOCUS_ORDER_USAGE)

    if json_input is not None:
        _echo_json(result)
        return

    validation = result["validation"]
    click.echo(f"Validating focus order for {len(labels)} elements:")
    for i, label in enumerate(labels):
        index = indices[i] if i < len(indices) else "?"
        click.echo(f"  {index} → {label}")
    click.echo()

    click.echo(
        f"{_mark(validation['logical'])} Logical order: "
        f"{'PASS' if validation['logical'] else 'FAIL'}"
    )
    click.echo(
        f"{_mark(validation['complete'])} Complete coverage: "
        f"{'PASS' if validation['complete'] else 'FAIL'}"
    )
    no_traps = len(set(indices)) == len(indices)
    click.echo(
        f"{_mark(no_traps)} No focus traps: "
        f"{'PASS' if no_traps else 'FAIL'} (based on provided data)"
    )

    _echo_list("Issues found:", validation["issues"])
    _echo_list("Recommendations:", result["recommendations"])

    if not validation["issues"] and not result["recommendations"]:
        click.echo()
        click.echo("Focus order follows logical reading sequence")


skills_dir_option = click.option(
    "--skills-dir",
    envvar="WCAG_SKILLS_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("skills"),
    show_default=True,
    help="Directory searched recursively for SKILL.md files",
)


@main.command("validate")
@skills_dir_option
def validate(skills_dir: Path) -> None:
    """Validate the front matter and structure of every SKILL.md."""
    click.echo("🔍 Validating WCAG skills...")
    click.echo()

    skill_files = find_skill_files(skills_dir)
    if not skill_files:
        _fail(f"❌ No SKILL.md files found in {skills_dir}")

    click.echo(f"Found {len(skill_files)} skill(s) to validate:")
    click.echo()

    total_errors = 0
    total_warnings = 0
    for path in skill_files:
        click.echo(f"📋 Validating: {path.parent.name}")
        result = validate_skill_file(path)

        if result.errors:
            click.echo("  ❌ Errors:")
            for error in result.errors:
                click.echo(f"    • {error}")
        if result.warnings:
            click.echo("  ⚠️  Warnings:")
            for warning in result.warnings:
                click.echo(f"    • {warning}")
        if not result.errors and not result.warnings:
            click.echo("  ✅ Valid")
        click.echo()

        total_errors += len(result.errors)
        total_warnings += len(result.warnings)

    click.echo("📊 Validation Summary:")
    click.echo(f"  • Skills checked: {len(skill_files)}")
    click.echo(f"  • Total errors: {total_errors}")
    click.echo(f"  • Total warnings: {total_warnings}")
    click.echo()

    if total_errors:
        click.echo("❌ Validation failed due to errors")
        sys.exit(1)
    if total_warnings:
        click.echo("⚠️  Validation passed with warnings")
    else:
        click.echo("✅ All skills validated successfully")


@main.command("build")
@skills_dir_option
@click.option(
    "--root-dir",
    envvar="WCAG_SKILLS_ROOT",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Repository root holding AGENTS.md and README.md",
)
@click.option(
    "--config-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write skills.json (default: <root-dir>/config/skills.json)",
)
def build(skills_dir: Path, root_dir: Path, config_path: Path | None) -> None:
    """Regenerate AGENTS.md, the README skill list and config/skills.json."""
    click.echo("🔨 Building WCAG skills package...")
    click.echo()

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            report = build_artifacts(skills_dir, root_dir, config_path)
        except OSError as e:
            _fail(f"Error: {e}")

    for warning in caught:
        click.echo(f"Warning: {warning.message}", err=True)

    click.echo(f"📋 Found {len(report.skills)} skills to process")
    click.echo(f"✅ Generated {report.agents_path.name}")
    if report.readme_updated:
        click.echo("✅ Updated README.md with installation instructions")
    click.echo(f"✅ Generated {report.config_path}")
    click.echo()
    click.echo("🎉 Build completed successfully!")
    click.echo(f"   • Processed {len(report.skills)} skills")


if __name__ == "__main__":
    main()
