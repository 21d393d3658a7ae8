#!/usr/bin/env python3
"""
Skills Router MCP Server - HTTP Transport
Runs as a web server using MCP Streamable HTTP protocol.

For local clients that spawn the server, use stdio mode instead.
"""

import asyncio
import contextlib
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Optional

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Mount, Route

from skills_router import __version__
from skills_router.server import SkillsRouterMCPServer


class SkillsHTTPApp:
    """Starlette app wrapping one SkillsRouterMCPServer."""

    def __init__(self, server_instance: SkillsRouterMCPServer):
        self.server_instance = server_instance
        # Tracks sessions by the Mcp-Session-Id header
        self.session_manager = StreamableHTTPSessionManager(
            app=server_instance.server,
            event_store=None,
            json_response=False,
            stateless=False,
        )
        self.app = Starlette(
            routes=[
                Route("/health", endpoint=self.health_check),
                Route("/skills", endpoint=self.list_skills),
                Mount("/mcp", app=self.mcp_endpoint),  # MCP protocol - all tool interaction
            ],
            lifespan=self.lifespan,
        )

    @contextlib.asynccontextmanager
    async def lifespan(self, app: Starlette) -> AsyncIterator[None]:
        """Run the session manager for as long as the app is up."""
        async with self.session_manager.run():
            self.server_instance.logger.info("Streamable HTTP session manager started")
            try:
                yield
            finally:
                self.server_instance.logger.info("Streamable HTTP session manager stopped")

    async def mcp_endpoint(self, scope, receive, send):
        """
        Handle MCP requests via Streamable HTTP protocol.
        This endpoint handles all MCP communication (GET/POST/DELETE).
        """
        await self.session_manager.handle_request(scope, receive, send)

    async def health_check(self, request: Request):
        """Health check endpoint."""
        cfg = self.server_instance.config.get()
        return PlainTextResponse(
            f"Skills Router MCP Server (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Skills directory: {cfg.skills_dir}\n"
            f"Skills: {len(self.server_instance.registry)}\n"
            f"MCP endpoint: /mcp\n"
        )

    async def list_skills(self, request: Request):
        """JSON listing of the registry, refreshed from disk."""
        self.server_instance.registry.refresh()
        return JSONResponse({
            "skills": [
                {
                    "name": skill.name,
                    "description": skill.metadata.description,
                    "path": str(skill.path),
                    "parameters": skill.metadata.parameters,
                    "scripts": skill.metadata.scripts,
                }
                for skill in self.server_instance.registry.list_skills()
            ]
        })


async def create_app(skills_dir: Optional[Path] = None) -> SkillsHTTPApp:
    """Load configuration, do the initial scan and build the app."""
    server_instance = SkillsRouterMCPServer(skills_dir=skills_dir)
    await server_instance.config.load()
    server_instance.reload()
    count = server_instance.registry.refresh()
    server_instance.logger.info(f"MCP Server initialized with {count} skills")
    return SkillsHTTPApp(server_instance)


async def main(skills_dir: Optional[Path] = None, port: Optional[int] = None):
    """Run the HTTP server."""
    import uvicorn

    http_app = await create_app(skills_dir)
    cfg = http_app.server_instance.config.get()
    host, port = cfg.http_host, port or cfg.http_port

    config = uvicorn.Config(
        http_app.app,
        host=host,
        port=port,
        log_level="info",
    )
    server = uvicorn.Server(config)

    http_app.server_instance.logger.info(
        f"Skills Router MCP Server (HTTP) starting on http://{host}:{port} "
        f"(MCP: /mcp, health: /health, skills: /skills)"
    )

    await server.serve()


if __name__ == "__main__":
    asyncio.run(main())
