"""Tests for wcag_skills.build module."""

import json
from datetime import datetime, timezone

import pytest

from wcag_skills.build import (
    CONFIG_VERSION,
    REPOSITORY_NAME,
    build,
    generate_agents_md,
    generate_skills_config,
    render_install_section,
    update_readme,
)
from wcag_skills.skills import get_all_skills_metadata

NOW = datetime(2024, 5, 17, 9, 30, 15, 123000, tzinfo=timezone.utc)

README = """# WCAG Skills

Accessibility skills for agents.

## Installation

Old instructions.

## Available Skills

- stale entry

## License

MIT
"""


@pytest.fixture
def skill_set(make_skill, skills_dir):
    make_skill("wcag-audit-perceivable-color", description="Routes color audits")
    make_skill("wcag-perceivable-deep", description="Deep perceivable guidance")
    make_skill("wcag-contrast", description="Contrast checker")
    make_skill("aria-patterns", description="ARIA reference")
    return get_all_skills_metadata(skills_dir)


class TestGenerateAgentsMd:
    """Test the AGENTS.md renderer."""

    def test_sections(self, skill_set):
        text = generate_agents_md(skill_set, NOW)
        assert text.startswith("# WCAG Agent Skills Reference\n")
        assert "### wcag-contrast\n\n**Description:** Contrast checker" in text
        assert "**Skill Directory:** `skills/aria-patterns/`" in text
        assert "## Skill Categories" in text
        assert text.endswith("Last updated: 2024-05-17*\n")

    def test_categories_are_disjoint(self, skill_set):
        text = generate_agents_md(skill_set, NOW)
        router = text.split("### Router Skills")[1].split("###")[0]
        deep = text.split("### Deep Domain Skills")[1].split("###")[0]
        tools = text.split("### Accessibility Tools")[1].split("---")[0]
        assert "wcag-audit-perceivable-color" in router
        assert "wcag-contrast" not in router
        assert "wcag-perceivable-deep" in deep
        assert "wcag-contrast" in tools
        assert "aria-patterns" not in router + deep + tools

    def test_install_example_uses_first_three_skills(self, skill_set):
        text = generate_agents_md(skill_set, NOW)
        names = [s.name for s in skill_set[:3]]
        assert f"--skill {names[0]} --skill {names[1]} --skill {names[2]}" in text


class TestUpdateReadme:
    """Test the README installation section rewrite."""

    def test_replaces_existing_section(self, tmp_path, skill_set):
        readme = tmp_path / "README.md"
        readme.write_text(README, encoding="utf-8")
        assert update_readme(readme, skill_set) is True

        content = readme.read_text(encoding="utf-8")
        assert "Old instructions." not in content
        assert "stale entry" not in content
        assert "This repository contains 4 WCAG accessibility skills:" in content
        assert content.count("## Available Skills") == 1
        assert content.endswith("## License\n\nMIT\n")

    def test_idempotent(self, tmp_path, skill_set):
        readme = tmp_path / "README.md"
        readme.write_text(README, encoding="utf-8")
        update_readme(readme, skill_set)
        first = readme.read_text(encoding="utf-8")
        update_readme(readme, skill_set)
        assert readme.read_text(encoding="utf-8") == first

    def test_inserts_after_first_blank_line(self, tmp_path, skill_set):
        readme = tmp_path / "README.md"
        readme.write_text("# Title\n\n## Usage\n\nRun it.\n", encoding="utf-8")
        update_readme(readme, skill_set)
        content = readme.read_text(encoding="utf-8")
        assert content.startswith("# Title\n\n## Installation\n")
        assert "## Usage\n\nRun it.\n" in content

        update_readme(readme, skill_set)
        assert readme.read_text(encoding="utf-8") == content

    def test_rebuild_keeps_text_after_inserted_section(self, tmp_path, skill_set):
        """Test text following an inserted section survives later rebuilds."""
        readme = tmp_path / "README.md"
        readme.write_text("# Title\n\nIntro paragraph.\n", encoding="utf-8")
        update_readme(readme, skill_set)
        first = readme.read_text(encoding="utf-8")
        assert first.endswith("\n\nIntro paragraph.\n")

        update_readme(readme, skill_set)
        assert readme.read_text(encoding="utf-8") == first

    def test_multi_line_description_stays_on_one_line(self, tmp_path, make_skill, skills_dir):
        content = (
            "---\nname: wcag-contrast\ndescription: >\n  Checks contrast\n  ratios\n---\n"
            "## When to Use\n"
        )
        make_skill("wcag-contrast", content=content)
        skills = get_all_skills_metadata(skills_dir)
        readme = tmp_path / "README.md"
        readme.write_text("# Title\n\nIntro paragraph.\n", encoding="utf-8")
        update_readme(readme, skills)
        first = readme.read_text(encoding="utf-8")
        assert "- **wcag-contrast**: Checks contrast ratios\n" in first

        update_readme(readme, skills)
        assert readme.read_text(encoding="utf-8") == first

    def test_missing_readme_warns(self, tmp_path, skill_set):
        with pytest.warns(UserWarning, match="Could not update README.md"):
            assert update_readme(tmp_path / "README.md", skill_set) is False

    def test_section_lists_every_skill(self, skill_set):
        section = render_install_section(skill_set)
        for skill in skill_set:
            assert f"- **{skill.name}**: {skill.description}" in section


class TestGenerateSkillsConfig:
    """Test the skills.json payload."""

    def test_payload(self, skill_set):
        config = generate_skills_config(skill_set, NOW)
        assert config["version"] == CONFIG_VERSION
        assert config["repository"] == REPOSITORY_NAME
        assert config["lastUpdated"] == "2024-05-17T09:30:15.123Z"
        assert config["totalSkills"] == 4
        assert config["skills"]["wcag-contrast"] == {
            "description": "Contrast checker",
            "directory": "wcag-contrast",
            "category": "tools",
        }
        assert config["skills"]["aria-patterns"]["category"] == "other"


class TestBuild:
    """Test the full build."""

    def test_writes_all_artifacts(self, tmp_path, skill_set, skills_dir):
        (tmp_path / "README.md").write_text(README, encoding="utf-8")
        report = build(skills_dir, tmp_path, now=NOW)

        assert report.readme_updated is True
        assert report.agents_path == tmp_path / "AGENTS.md"
        assert report.config_path == tmp_path / "config" / "skills.json"
        assert [s.name for s in report.skills] == [s.name for s in skill_set]

        config = json.loads(report.config_path.read_text(encoding="utf-8"))
        assert config["totalSkills"] == 4

    def test_rebuild_is_byte_identical(self, tmp_path, skill_set, skills_dir):
        (tmp_path / "README.md").write_text(README, encoding="utf-8")
        build(skills_dir, tmp_path, now=NOW)
        paths = ["AGENTS.md", "README.md", "config/skills.json"]
        first = {p: (tmp_path / p).read_bytes() for p in paths}

        build(skills_dir, tmp_path, now=NOW)
        assert {p: (tmp_path / p).read_bytes() for p in paths} == first

    def test_custom_config_path(self, tmp_path, skill_set, skills_dir):
        target = tmp_path / "out" / "nested" / "skills.json"
        with pytest.warns(UserWarning):
            report = build(skills_dir, tmp_path, config_path=target, now=NOW)
        assert report.config_path == target
        assert target.exists()
        assert report.readme_updated is False
