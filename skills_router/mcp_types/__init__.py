"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    # Enums
    MCPErrorCode,
    
    # Core types
    TextContent,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
)

__all__ = [
    # Enums
    "MCPErrorCode",
    
    # Core types
    "TextContent",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
]
