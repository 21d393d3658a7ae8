"""
Base Tool Classes
Abstract base class for tool implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from mcp import types

from skills_router.mcp_types import (
    TextContent,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolResult,
)


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""

    def __init__(self, logger):
        self.logger = logger

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass

    @abstractmethod
    async def execute(self, input: Dict[str, Any], context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""
        pass

    def toMCPTool(self) -> types.Tool:
        """Protocol-facing tool descriptor."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.inputSchema,
        )

    def createSuccessResult(self, text: str) -> ToolResult:
        """Create a successful tool result. Text is passed through untouched."""
        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=False
        )

    def createErrorResult(self, error: ToolError) -> ToolResult:
        """Create an error tool result - follows MCP specification."""
        return ToolResult(
            content=[TextContent(type="text", text=error.message)],
            isError=True
        )

    def logExecution(self, context: ToolContext, success: bool):
        """Log tool execution."""
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId
        })
