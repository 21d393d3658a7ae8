#!/usr/bin/env python3
"""
Skills Router CLI Entry Point

Handles:
- Server modes (stdio, http)
- Inspecting the skills directory without starting a server
- One-off skill invocation
"""

import argparse
import asyncio
import sys
from pathlib import Path

from skills_router import __version__, __package_name__


def parse_arg_pairs(pairs: list[str] | None) -> dict[str, str]:
    """Turn ["who=Ada", "n=5"] into {"who": "Ada", "n": "5"}."""
    arguments: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        arguments[key] = value
    return arguments


async def list_skills(skills_dir: Path | None) -> int:
    """Print discovered skills."""
    from skills_router.server import SkillsRouterMCPServer

    server = SkillsRouterMCPServer(skills_dir=skills_dir)
    await server.config.load()
    server.reload()
    server.registry.refresh()

    skills = server.registry.list_skills()
    print(f"Skills directory: {server.config.get().skills_dir}")
    if not skills:
        print("No skills found.")
        return 0

    for skill in skills:
        scripts = ", ".join(skill.metadata.scripts) or "(prompt only)"
        print(f"- {skill.name}: {skill.metadata.description}")
        print(f"    path: {skill.path}")
        print(f"    scripts: {scripts}")
    return 0


async def call_skill(skills_dir: Path | None, name: str, arguments: dict[str, str]) -> int:
    """Invoke one skill and print its output."""
    from skills_router.server import SkillsRouterMCPServer

    server = SkillsRouterMCPServer(skills_dir=skills_dir)
    await server.config.load()
    server.reload()
    server.registry.refresh()

    result = await server.call_tool(name, arguments)
    if result.isError:
        for item in result.content:
            print(item.text, file=sys.stderr)
        return 1

    for item in result.content:
        sys.stdout.write(item.text)
        if not item.text.endswith("\n"):
            sys.stdout.write("\n")
    return 0


async def run_stdio(skills_dir: Path | None):
    """Run in stdio mode (for MCP clients that spawn the server)."""
    from skills_router.server import run_stdio as _run_stdio
    await _run_stdio(skills_dir)


async def run_http(skills_dir: Path | None, port: int | None):
    """Run in HTTP mode using Streamable HTTP transport."""
    from skills_router.server_http import main as http_main
    await http_main(skills_dir=skills_dir, port=port)


async def main_async(args) -> int:
    skills_dir = Path(args.skills_dir).expanduser() if args.skills_dir else None

    if args.list:
        return await list_skills(skills_dir)

    if args.call:
        try:
            arguments = parse_arg_pairs(args.arg)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 2
        return await call_skill(skills_dir, args.call, arguments)

    if args.http:
        await run_http(skills_dir, args.port)
    else:
        await run_stdio(skills_dir)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Skills Router - serve SKILL.md folders as MCP tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  skills-router                          # stdio server (default)
  skills-router --http --port 8000       # HTTP server
  skills-router --list                   # show discovered skills
  skills-router --call greet --arg who=Ada

Environment:
  SKILLS_DIR            skills root (default: ./skills next to the package)
  SKILLS_EXEC_TIMEOUT   seconds before a skill script is killed (default: none)
  LOG_LEVEL             DEBUG, INFO, WARNING, ERROR
""",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode (default)",
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Run in HTTP mode",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="HTTP port (default: MCP_PORT or 8000)",
    )
    parser.add_argument(
        "--skills-dir",
        default=None,
        help="Skills root directory (overrides SKILLS_DIR)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List discovered skills and exit",
    )
    parser.add_argument(
        "--call",
        metavar="NAME",
        default=None,
        help="Invoke a skill once and print its output",
    )
    parser.add_argument(
        "--arg",
        action="append",
        metavar="KEY=VALUE",
        help="Argument for --call (repeatable)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{__package_name__} {__version__}",
    )
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    try:
        code = asyncio.run(main_async(args))
    except KeyboardInterrupt:
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
