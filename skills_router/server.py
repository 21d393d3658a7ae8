#!/usr/bin/env python3
"""
Skills Router MCP Server
Serves every skill folder under the skills root as an MCP tool.
"""

import asyncio
from pathlib import Path
from typing import Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from skills_router import __version__, __package_name__
from skills_router.config import ConfigManager
from skills_router.mcp_types import MCPErrorCode, ToolContext, ToolError, ToolResult
from skills_router.skills import SkillExecutor, SkillNotFoundError, SkillRegistry
from skills_router.tools import SkillTool
from skills_router.utils import Logger


class SkillsRouterMCPServer:
    """Main MCP Server for Skills Router."""

    def __init__(self, skills_dir: Optional[Path] = None, config: Optional[ConfigManager] = None):
        # Initialize configuration
        self.config = config or ConfigManager(skills_dir=skills_dir)
        cfg = self.config.get()

        # Initialize MCP Server
        self.server = Server(__package_name__)

        # Initialize logger
        self.logger = Logger(level=cfg.log_level)

        self.registry = SkillRegistry(cfg.skills_dir, self.logger)
        self.executor = SkillExecutor(timeout=cfg.exec_timeout)

        # Set up MCP protocol handlers
        self._setup_handlers()

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return await self.list_tools()

        # Registered directly so a call never re-lists tools; it sees only the
        # last published snapshot. Arguments are handed to skills as-is.
        async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
            return types.ServerResult(
                await self.call_tool(req.params.name, req.params.arguments)
            )

        self.server.request_handlers[types.CallToolRequest] = handle_call_tool

    def reload(self) -> None:
        """Re-read configuration into the registry and executor."""
        cfg = self.config.get()
        self.logger = Logger(level=cfg.log_level)
        self.registry = SkillRegistry(cfg.skills_dir, self.logger)
        self.executor = SkillExecutor(timeout=cfg.exec_timeout)

    def get_tool(self, name: str) -> Optional[SkillTool]:
        """Look a skill up in the current snapshot (no refresh)."""
        skill = self.registry.get(name)
        if skill is None:
            return None
        return SkillTool(skill, self.executor, self.logger)

    async def list_tools(self) -> list[types.Tool]:
        """Refresh the registry, then describe every skill."""
        count = self.registry.refresh()
        self.logger.debug(f"Exposing {count} skills")
        return [
            SkillTool(skill, self.executor, self.logger).toMCPTool()
            for skill in self.registry.list_skills()
        ]

    async def call_tool(self, name: str, arguments: dict | None) -> types.CallToolResult:
        """
        Invoke a skill by name against the current snapshot.

        Unknown names and unreadable instructions come back as results with
        isError set; script failures are ordinary text results.
        """
        tool = self.get_tool(name)
        if tool is None:
            self.logger.error(f"Tool not found: {name}")
            return _error_result(ToolError(
                code=MCPErrorCode.TOOL_NOT_FOUND,
                message=str(SkillNotFoundError(name))
            ))

        loop = asyncio.get_running_loop()
        context = ToolContext(
            requestId=f"req_{loop.time()}",
            timestamp=loop.time(),
            toolName=name
        )

        result = await tool.execute(arguments or {}, context)
        if result.result is not None:
            return _to_call_result(result.result)

        return _error_result(result.error)

    async def start(self):
        """Start the MCP server on stdio."""
        try:
            # Load configuration
            await self.config.load()
            self.reload()

            skills_dir = self.config.get().skills_dir
            if not skills_dir.is_dir():
                self.logger.warning(f"Skills directory does not exist: {skills_dir}")

            self.logger.info(f"Initializing skills-router with directory: {skills_dir}")
            count = self.registry.refresh()
            self.logger.info(f"Registered {count} skills")

            # Create transport and run server
            async with stdio_server() as (read_stream, write_stream):
                self.logger.info("Skills Router MCP server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=__package_name__,
                        server_version=__version__,
                        capabilities=self.server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={}
                        ),
                    ),
                )

        except Exception as e:
            self.logger.error(f"Fatal error in skills-router: {e}")
            raise


async def run_stdio(skills_dir: Optional[Path] = None):
    """Run in stdio mode."""
    server = SkillsRouterMCPServer(skills_dir=skills_dir)
    await server.start()


def _to_call_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=item.text) for item in result.content],
        isError=result.isError,
    )


def _error_result(error: ToolError) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=error.message)],
        isError=True,
    )
