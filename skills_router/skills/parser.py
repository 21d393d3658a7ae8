"""
Skill Parser

Reads the YAML frontmatter at the top of a SKILL.md:

    ---
    name: greet
    description: Says hi
    parameters:
      who: {type: string, description: Who to greet}
    scripts:
      - run.sh
    ---
    Free-form instructions...
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import MissingHeaderError, SkillParseError

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Unnamed Skill"
DEFAULT_DESCRIPTION = "No description provided"

# Opening '---', header lines (possibly none), closing '---' on its own line
HEADER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass(frozen=True)
class SkillMetadata:
    """Decoded SKILL.md header."""
    name: str = DEFAULT_NAME
    description: str = DEFAULT_DESCRIPTION
    parameters: dict[str, Any] = field(default_factory=dict)
    scripts: list[str] = field(default_factory=list)


def split_header(text: str) -> tuple[str, str] | None:
    """Split content into (header, body), or None if there is no header block."""
    match = HEADER_PATTERN.match(text)
    if not match:
        return None
    return match.group(1) or "", text[match.end():]


def strip_header(text: str) -> str:
    """Remove the leading header block and trim surrounding whitespace."""
    parts = split_header(text)
    body = parts[1] if parts else text
    return body.strip()


class SkillParser:
    """Parses SKILL.md files into SkillMetadata."""

    def parse(self, skill_md_path: Path) -> SkillMetadata:
        """
        Parse a SKILL.md file.

        Raises:
            MissingHeaderError: file does not start with a '---' delimited block
            SkillParseError: file is not UTF-8, or header is not valid YAML or not a mapping
            OSError: file could not be read
        """
        path = Path(skill_md_path)
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SkillParseError(path, f"File is not valid UTF-8 ({e})") from e
        return self.parse_text(content, path)

    def parse_text(self, content: str, path: Path) -> SkillMetadata:
        parts = split_header(content)
        if parts is None:
            if not content.startswith("---"):
                logger.debug(f"{path} does not start with ---")
            raise MissingHeaderError(path)

        try:
            header = yaml.safe_load(parts[0]) or {}
        except yaml.YAMLError as e:
            raise SkillParseError(path, f"Invalid YAML frontmatter ({e})") from e

        if not isinstance(header, dict):
            raise SkillParseError(path, "YAML frontmatter must be a mapping")

        return SkillMetadata(
            name=str(header.get("name") or DEFAULT_NAME),
            description=str(header.get("description") or DEFAULT_DESCRIPTION),
            parameters=self._parameters(header.get("parameters"), path),
            scripts=self._scripts(header.get("scripts")),
        )

    def _parameters(self, value: Any, path: Path) -> dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            logger.warning(f"Ignoring non-mapping 'parameters' in {path}")
            return {}
        return {str(k): v for k, v in value.items()}

    def _scripts(self, value: Any) -> list[str]:
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(s) for s in value if s]
        return [str(value)]
