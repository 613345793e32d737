"""Regenerate AGENTS.md, the README installation section and skills.json.

All three artifacts are derived from the SKILL.md front matter only, so a
rebuild on unchanged skills reproduces them exactly, apart from the
generation timestamp.
"""

import json
import re
import warnings
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, NamedTuple

from .skills import SkillMetadata, categorize, get_all_skills_metadata

__all__ = [
    "CONFIG_VERSION",
    "REPOSITORY_NAME",
    "BuildReport",
    "generate_agents_md",
    "render_install_section",
    "update_readme",
    "generate_skills_config",
    "build",
]

CONFIG_VERSION = "1.0.0"
REPOSITORY_NAME = "agent-skills-wcag"

_CATEGORY_HEADINGS = (
    ("router", "Router Skills"),
    ("deep", "Deep Domain Skills"),
    ("tools", "Accessibility Tools"),
)

# A previously generated section: installation text, the skill count line and
# the bullet list, up to and including the blank line that ends it.
_GENERATED_SECTION = re.compile(
    r"^## Installation\n(?:(?!## )[^\n]*\n)*"
    r"## Available Skills\n\nThis repository contains \d+ WCAG accessibility skills:\n\n"
    r"(?:- [^\n]*\n)*\n?",
    re.MULTILINE,
)

# A hand-written installation section, together with any "Available Skills"
# section right after it, runs up to the next heading.
_INSTALL_SECTION = re.compile(
    r"^## Installation\b.*?(?=^## (?!Available Skills\b)|\Z)", re.DOTALL | re.MULTILINE
)


class BuildReport(NamedTuple):
    skills: list[SkillMetadata]
    agents_path: Path
    readme_updated: bool
    config_path: Path


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _bullet(skill: SkillMetadata) -> str:
    # One line per skill, so the generated list can be found again on rebuild.
    description = " ".join(skill.description.split())
    return f"- **{skill.name}**: {description}"


def generate_agents_md(skills: list[SkillMetadata], now: datetime | None = None) -> str:
    """Render the aggregated agent-facing skill index."""
    lines = [
        "# WCAG Agent Skills Reference",
        "",
        "This document contains aggregated information about all WCAG accessibility "
        "skills available in this repository. It is optimized for AI agent "
        "consumption and provides quick access to skill metadata and usage "
        "guidelines.",
        "",
        "## Available Skills",
        "",
    ]

    for skill in skills:
        lines += [
            f"### {skill.name}",
            "",
            f"**Description:** {skill.description}",
            "",
            f"**Skill Directory:** `skills/{skill.directory}/`",
            "",
            "**Installation:** Use `npx add-skill` to install this skill individually.",
            "",
            "---",
            "",
        ]

    example = " --skill ".join(skill.name for skill in skills[:3])
    lines += [
        "## Installation",
        "",
        "Install all WCAG skills:",
        "```bash",
        "npx add-skill <repository-url>",
        "```",
        "",
        "Install specific skills:",
        "```bash",
        f"npx add-skill <repository-url> --skill {example}",
        "```",
        "",
        "## Skill Categories",
    ]

    for category, heading in _CATEGORY_HEADINGS:
        lines += ["", f"### {heading}"]
        lines += [_bullet(skill) for skill in skills if categorize(skill.name) == category]

    lines += [
        "",
        "---",
        "",
        "*Generated automatically from SKILL.md files. "
        f"Last updated: {_now(now).date().isoformat()}*",
        "",
    ]
    return "\n".join(lines)


def render_install_section(skills: list[SkillMetadata]) -> str:
    lines = [
        "## Installation",
        "",
        "```sh",
        "npx add-skill <repository-url>",
        "```",
        "",
        "Or install specific skills:",
        "",
        "```sh",
        "npx add-skill <repository-url> --skill wcag-audit-perceivable-color "
        "--skill wcag-audit-understandable-forms",
        "```",
        "",
        "## Available Skills",
        "",
        f"This repository contains {len(skills)} WCAG accessibility skills:",
        "",
        *(_bullet(skill) for skill in skills),
        "",
        "",
    ]
    return "\n".join(lines)


def update_readme(readme_path: Path, skills: list[SkillMetadata]) -> bool:
    """Rewrite the README installation section in place.

    The section is replaced when present, otherwise inserted after the first
    blank line. Returns False, with a warning, when the README is missing.
    """
    try:
        content = readme_path.read_text(encoding="utf-8")
    except OSError as e:
        warnings.warn(f"Could not update {readme_path.name}: {e}", stacklevel=2)
        return False

    section = render_install_section(skills)
    for pattern in (_GENERATED_SECTION, _INSTALL_SECTION):
        if pattern.search(content):
            content = pattern.sub(lambda _: section, content, count=1)
            break
    else:
        lines = content.split("\n")
        blank = next((i for i, line in enumerate(lines) if not line.strip()), -1)
        lines.insert(blank + 1, section.rstrip("\n") + "\n")
        content = "\n".join(lines)

    readme_path.write_text(content, encoding="utf-8")
    return True


def generate_skills_config(
    skills: list[SkillMetadata], now: datetime | None = None
) -> dict[str, Any]:
    timestamp = _now(now).astimezone(timezone.utc)
    return {
        "version": CONFIG_VERSION,
        "lastUpdated": timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "repository": REPOSITORY_NAME,
        "totalSkills": len(skills),
        "skills": {
            skill.name: {
                "description": skill.description,
                "directory": skill.directory,
                "category": categorize(skill.name),
            }
            for skill in skills
        },
    }


def build(
    skills_dir: Path,
    root_dir: Path,
    config_path: Path | None = None,
    now: datetime | None = None,
) -> BuildReport:
    """Regenerate every derived artifact from the skills under ``skills_dir``."""
    now = _now(now)
    skills = get_all_skills_metadata(skills_dir)

    agents_path = root_dir / "AGENTS.md"
    agents_path.write_text(generate_agents_md(skills, now), encoding="utf-8")

    readme_updated = update_readme(root_dir / "README.md", skills)

    if config_path is None:
        config_path = root_dir / "config" / "skills.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        json.dumps(generate_skills_config(skills, now), indent=2) + "\n",
        encoding="utf-8",
    )

    return BuildReport(skills, agents_path, readme_updated, config_path)
