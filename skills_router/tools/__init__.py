"""
Tools Module

Every discovered skill is served as one MCP tool.
"""

from .base import BaseTool
from .skill import SkillTool

__all__ = [
    "BaseTool",
    "SkillTool",
]
