"""
Skill Scanner

Walks a skills root and finds skill folders: directories holding a SKILL.md.
A skill folder is a leaf; nothing below it is scanned.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"


@dataclass(frozen=True)
class SkillLocation:
    """A discovered skill folder."""
    path: Path
    skill_md_path: Path


class SkillScanner:
    """Finds skill folders below a base directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def scan(self) -> list[SkillLocation]:
        """
        Scan the base directory.

        Entries are visited in sorted order so results are deterministic.
        Unreadable directories are logged and skipped; the walk never raises.
        """
        skills: list[SkillLocation] = []
        self._walk(self.base_dir, skills)
        return skills

    def _walk(self, directory: Path, results: list[SkillLocation]) -> None:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.error(f"Failed to scan directory {directory}: {e}")
            return

        for entry in entries:
            # Symlinked directories are not followed, so cycles can't loop the walk
            if not entry.is_dir(follow_symlinks=False):
                continue

            child = Path(entry.path)
            skill_md = child / SKILL_FILE
            if os.path.isfile(skill_md):
                logger.debug(f"Found skill folder: {child}")
                results.append(SkillLocation(path=child, skill_md_path=skill_md))
            else:
                self._walk(child, results)
