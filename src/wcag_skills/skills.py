"""SKILL.md discovery, front matter parsing and validation.

A skill is a directory holding a ``SKILL.md`` file: YAML front matter with
``name`` and ``description`` followed by a markdown body.

Example:
    >>> from pathlib import Path
    >>> from wcag_skills.skills import find_skill_files, validate_skill_file
    >>> for path in find_skill_files(Path("skills")):
    ...     result = validate_skill_file(path)
"""

import re
import warnings
from pathlib import Path
from typing import Any, Literal, NamedTuple

import yaml

__all__ = [
    "SKILL_FILENAME",
    "TOOL_SUFFIXES",
    "SkillMetadata",
    "ValidationResult",
    "FrontMatterError",
    "split_front_matter",
    "find_skill_files",
    "validate_skill_file",
    "categorize",
    "load_skill_metadata",
    "get_all_skills_metadata",
]

SKILL_FILENAME = "SKILL.md"
NAME_PATTERN = re.compile(r"[a-z0-9-]{1,64}")
MAX_DESCRIPTION_LENGTH = 1024
TOOL_SUFFIXES = ("-focus", "-test", "-size", "-contrast", "-blindness", "-target-size")

Category = Literal["tools", "deep", "router", "other"]


class FrontMatterError(ValueError):
    """Raised when the YAML front matter of a skill file cannot be parsed."""


class SkillMetadata(NamedTuple):
    name: str
    description: str
    directory: str
    path: Path


class ValidationResult(NamedTuple):
    errors: list[str]
    warnings: list[str]

    @property
    def ok(self) -> bool:
        return not self.errors


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split ``text`` into its YAML front matter mapping and markdown body.

    Files without a leading ``---`` fence have empty front matter.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != "---":
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            raw = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        raise FrontMatterError("Front matter is missing its closing '---' line")

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML front matter: {e}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError("Front matter must be a YAML mapping")
    return data, body


def find_skill_files(skills_dir: Path) -> list[Path]:
    """All SKILL.md files below ``skills_dir``, in a stable order."""
    if not skills_dir.is_dir():
        return []
    return sorted(skills_dir.rglob(SKILL_FILENAME))


def _validate_front_matter(data: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    name = data.get("name")
    if not name:
        errors.append('Missing required "name" field in frontmatter')
    elif not isinstance(name, str):
        errors.append('"name" field must be a string')
    elif not NAME_PATTERN.fullmatch(name):
        errors.append(
            '"name" field must be lowercase, contain only letters, numbers, '
            "and hyphens (1-64 chars)"
        )

    description = data.get("description")
    if not description:
        errors.append('Missing required "description" field in frontmatter')
    elif not isinstance(description, str):
        errors.append('"description" field must be a string')
    elif not 1 <= len(description) <= MAX_DESCRIPTION_LENGTH:
        errors.append(f'"description" field must be 1-{MAX_DESCRIPTION_LENGTH} characters')

    return errors


def validate_skill_file(path: Path) -> ValidationResult:
    """Validate one SKILL.md; errors block, warnings only advise."""
    errors: list[str] = []
    warnings_: list[str] = []

    try:
        data, body = split_front_matter(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, FrontMatterError) as e:
        return ValidationResult([f"Failed to parse {SKILL_FILENAME}: {e}"], [])

    errors.extend(_validate_front_matter(data))

    if not body.strip():
        warnings_.append(f"{SKILL_FILENAME} has no content body (only frontmatter)")

    if "## When to Use" not in body:
        warnings_.append(
            'Consider adding a "When to Use" section to help agents understand '
            "when to apply this skill"
        )

    return ValidationResult(errors, warnings_)


def categorize(name: str) -> Category:
    """Derive a skill's category from its name alone."""
    if name.endswith(TOOL_SUFFIXES):
        return "tools"
    if "-deep" in name:
        return "deep"
    if name.startswith("wcag-"):
        return "router"
    return "other"


def load_skill_metadata(path: Path) -> SkillMetadata | None:
    """Metadata of one skill, or None when name or description is absent."""
    data, _ = split_front_matter(path.read_text(encoding="utf-8"))
    name = data.get("name")
    description = data.get("description")
    if not name or not description:
        return None
    return SkillMetadata(
        name=str(name),
        description=str(description),
        directory=path.parent.name,
        path=path,
    )


def get_all_skills_metadata(skills_dir: Path) -> list[SkillMetadata]:
    """Collect metadata for every parseable skill, sorted by name.

    Unreadable files and files lacking a name or description are skipped
    with a warning.
    """
    skills: list[SkillMetadata] = []
    for path in find_skill_files(skills_dir):
        try:
            metadata = load_skill_metadata(path)
        except (OSError, UnicodeDecodeError, FrontMatterError) as e:
            warnings.warn(f"Could not parse {path}: {e}", stacklevel=2)
            continue
        if metadata is None:
            warnings.warn(f"Skipping {path}: missing name or description", stacklevel=2)
            continue
        skills.append(metadata)

    return sorted(skills, key=lambda skill: skill.name)
