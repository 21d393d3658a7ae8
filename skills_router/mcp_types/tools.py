"""
Tool-related types
Result and context types shared by skill tools - follows MCP specification.
"""

from typing import List, Optional
from dataclasses import dataclass
from enum import Enum


class MCPErrorCode(Enum):
    """MCP Error codes - follows MCP specification."""
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"


@dataclass
class TextContent:
    """Text content for tool results - follows MCP specification."""
    type: str
    text: str


@dataclass
class ToolContext:
    """Per-call context handed to a tool."""
    requestId: str
    timestamp: float
    toolName: Optional[str] = None


@dataclass
class ToolResult:
    """Tool execution result - follows MCP specification."""
    content: List[TextContent]
    isError: bool = False


@dataclass
class ToolError:
    """Tool error information."""
    code: MCPErrorCode
    message: str
    details: Optional[str] = None


@dataclass
class ToolHandlerResult:
    """Tool handler result."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None

