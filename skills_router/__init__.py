"""
Skills Router

Discovers SKILL.md skill folders and serves them as MCP tools.
"""

__version__ = "1.0.0"
__package_name__ = "skills-router"
