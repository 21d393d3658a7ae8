"""Skill error types."""

from pathlib import Path


class SkillError(Exception):
    """Base class for skill errors."""


class SkillParseError(SkillError):
    """A SKILL.md could not be decoded."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{message} in {path}")


class MissingHeaderError(SkillParseError):
    """A SKILL.md does not start with a '---' delimited header block."""

    def __init__(self, path: Path):
        super().__init__(path, "No YAML frontmatter found")


class SkillNotFoundError(SkillError):
    """No skill is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Skill {name} not found")
