"""
Skill Tool

Exposes one registered skill as an MCP tool.

- Prompt-only skills (no scripts) return their SKILL.md instructions.
- Script skills run their first script with the call arguments.
"""

from typing import Any, Dict

from skills_router.mcp_types import (
    MCPErrorCode,
    ToolContext,
    ToolError,
    ToolHandlerResult,
)
from skills_router.skills import RegisteredSkill, SkillExecutor, strip_header
from skills_router.tools.base import BaseTool


class SkillTool(BaseTool):
    """A skill, seen as a tool."""

    def __init__(self, skill: RegisteredSkill, executor: SkillExecutor, logger):
        super().__init__(logger)
        self.skill = skill
        self.executor = executor

    @property
    def name(self) -> str:
        return self.skill.metadata.name

    @property
    def description(self) -> str:
        return self.skill.metadata.description

    @property
    def inputSchema(self) -> Dict[str, Any]:
        # Every declared parameter is required
        parameters = dict(self.skill.metadata.parameters)
        return {
            "type": "object",
            "properties": parameters,
            "required": list(parameters.keys()),
        }

    @property
    def is_prompt_only(self) -> bool:
        return not self.skill.metadata.scripts

    async def execute(self, input: Dict[str, Any], context: ToolContext) -> ToolHandlerResult:
        """Return the skill's instructions, or run its first script."""
        if self.is_prompt_only:
            return self._read_instructions(context)

        script = self.skill.metadata.scripts[0]
        output = self.executor.execute(self.skill.path, script, dict(input or {}))
        self.logExecution(context, True)
        return ToolHandlerResult(success=True, result=self.createSuccessResult(output))

    def _read_instructions(self, context: ToolContext) -> ToolHandlerResult:
        try:
            content = self.skill.skill_md_path.read_text(encoding="utf-8")
        except OSError as e:
            self.logger.error(f"Failed to read {self.skill.skill_md_path}: {e}")
            error = ToolError(
                code=MCPErrorCode.RESOURCE_NOT_FOUND,
                message="Failed to read skill instructions.",
                details=str(e)
            )
            self.logExecution(context, False)
            return ToolHandlerResult(success=False, error=error, result=self.createErrorResult(error))

        self.logExecution(context, True)
        return ToolHandlerResult(success=True, result=self.createSuccessResult(strip_header(content)))
