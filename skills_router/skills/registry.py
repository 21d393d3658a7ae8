"""
Skill Registry

Name-keyed snapshot of the skills currently on disk. A refresh builds a new
mapping and publishes it with a single assignment; readers holding the old
snapshot keep a consistent view.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from .errors import SkillParseError
from .parser import SkillMetadata, SkillParser
from .scanner import SKILL_FILE, SkillScanner


@dataclass(frozen=True)
class RegisteredSkill:
    """A parsed skill and the folder it lives in."""
    metadata: SkillMetadata
    path: Path

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def skill_md_path(self) -> Path:
        return self.path / SKILL_FILE


class SkillRegistry:
    """
    Registry of skills discovered under a root directory.

    Lifecycle: create, refresh() as often as needed, clear() on shutdown.
    Several registries can coexist (one per root).
    """

    def __init__(self, skills_dir: Path, logger, parser: Optional[SkillParser] = None):
        self.skills_dir = Path(skills_dir)
        self.logger = logger
        self.parser = parser or SkillParser()
        self._skills: Mapping[str, RegisteredSkill] = MappingProxyType({})

    def refresh(self) -> int:
        """
        Rescan the skills directory and publish a fresh snapshot.

        Skills that fail to parse are logged and left out. When two skills
        share a name, the one scanned later wins.

        Returns:
            Number of registered skills
        """
        discovered = SkillScanner(self.skills_dir).scan()
        self.logger.debug(f"Discovered {len(discovered)} skill folders in {self.skills_dir}")

        skills: dict[str, RegisteredSkill] = {}
        for location in discovered:
            try:
                metadata = self.parser.parse(location.skill_md_path)
            except (SkillParseError, OSError) as e:
                self.logger.error(f"Failed to parse skill at {location.path}: {e}")
                continue

            previous = skills.get(metadata.name)
            if previous is not None:
                self.logger.warning(
                    f"Duplicate skill name '{metadata.name}': {location.path} replaces {previous.path}"
                )
            skills[metadata.name] = RegisteredSkill(metadata=metadata, path=location.path)
            self.logger.debug(f"Parsed skill: {metadata.name}")

        self._skills = MappingProxyType(skills)
        return len(skills)

    def snapshot(self) -> Mapping[str, RegisteredSkill]:
        """Current read-only snapshot."""
        return self._skills

    def get(self, name: str) -> Optional[RegisteredSkill]:
        return self._skills.get(name)

    def has(self, name: str) -> bool:
        return name in self._skills

    def list_skills(self) -> list[RegisteredSkill]:
        return list(self._skills.values())

    def __len__(self) -> int:
        return len(self._skills)

    def clear(self) -> None:
        """Drop all skills."""
        self._skills = MappingProxyType({})
        self.logger.info("Skill registry cleared")
