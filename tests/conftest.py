"""Test configuration and fixtures for wcag_skills tests."""

from pathlib import Path
from typing import Callable

import pytest

from wcag_skills.color_utils import Color


@pytest.fixture
def sample_colors() -> list[Color]:
    """Provide sample colors for testing."""
    return [
        Color(0, 0, 0),        # Black
        Color(255, 255, 255),  # White
        Color(255, 0, 0),      # Red
        Color(0, 255, 0),      # Green
        Color(0, 0, 255),      # Blue
        Color(128, 128, 128),  # Gray
        Color(118, 118, 118),  # Lightest gray passing AA on white
    ]


@pytest.fixture
def color_format_examples() -> list[tuple[str, Color]]:
    """Provide examples of supported color formats with expected values."""
    return [
        ("#FF0000", Color(255, 0, 0)),
        ("#00ff00", Color(0, 255, 0)),
        ("#00F", Color(0, 0, 255)),
        ("#fff", Color(255, 255, 255)),
        ("  #000000  ", Color(0, 0, 0)),
        ("rgb(255, 0, 0)", Color(255, 0, 0)),
        ("RGB( 0 , 255 , 0 )", Color(0, 255, 0)),
        ("rgb(128,128,128)", Color(128, 128, 128)),
    ]


@pytest.fixture
def invalid_color_formats() -> list[str]:
    """Provide examples of invalid color format strings."""
    return [
        "invalid",
        "#GG0000",
        "#FF00",
        "#FF000000",
        "FF0000",
        "rgb(256, 0, 0)",
        "rgb(-1, 0, 0)",
        "rgb(255, 0)",
        "rgb(1.5, 0, 0)",
        "",
        "   ",
    ]


SKILL_TEMPLATE = """---
name: {name}
description: {description}
---

# {name}

## When to Use

Use this skill when auditing pages.
"""


@pytest.fixture
def make_skill(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing skills/<directory>/SKILL.md below tmp_path."""

    def _make_skill(
        directory: str,
        name: str | None = None,
        description: str = "Checks something useful",
        content: str | None = None,
    ) -> Path:
        skill_dir = tmp_path / "skills" / directory
        skill_dir.mkdir(parents=True, exist_ok=True)
        path = skill_dir / "SKILL.md"
        if content is None:
            content = SKILL_TEMPLATE.format(name=name or directory, description=description)
        path.write_text(content, encoding="utf-8")
        return path

    return _make_skill


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    return tmp_path / "skills"
