"""Skill discovery, parsing, execution and registry."""

from .errors import SkillError, SkillParseError, MissingHeaderError, SkillNotFoundError
from .scanner import SkillScanner, SkillLocation, SKILL_FILE
from .parser import SkillParser, SkillMetadata, strip_header
from .executor import SkillExecutor, ExecutionResult, ExecutionStatus, args_to_env
from .registry import SkillRegistry, RegisteredSkill

__all__ = [
    # Errors
    "SkillError",
    "SkillParseError",
    "MissingHeaderError",
    "SkillNotFoundError",
    # Discovery
    "SkillScanner",
    "SkillLocation",
    "SKILL_FILE",
    # Parsing
    "SkillParser",
    "SkillMetadata",
    "strip_header",
    # Execution
    "SkillExecutor",
    "ExecutionResult",
    "ExecutionStatus",
    "args_to_env",
    # Registry
    "SkillRegistry",
    "RegisteredSkill",
]
