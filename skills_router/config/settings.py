"""
Settings
Configuration management for Skills Router.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

APP_NAME = "SkillsRouter"

# Repository root for a source checkout or editable install. In a wheel install
# this is site-packages, which has no skills/ folder.
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def get_user_data_dir() -> Path:
    """
    Get the per-user application data directory.

    - macOS: ~/Library/Application Support/SkillsRouter
    - Windows: %APPDATA%/SkillsRouter
    - Other: $XDG_DATA_HOME/skills-router (default ~/.local/share/skills-router)
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(os.path.expanduser(xdg)) if xdg else Path.home() / ".local" / "share"
    return base / "skills-router"


def get_skills_dir() -> Path:
    """
    Resolve the skills root directory.

    Priority:
    1. SKILLS_DIR env var (explicit override)
    2. Packaged (frozen) build: per-user application data directory
    3. <project root>/skills next to the running code, when that folder exists
    4. Per-user application data directory otherwise (e.g. wheel installs)
    """
    explicit = os.environ.get("SKILLS_DIR")
    if explicit:
        return Path(os.path.expanduser(explicit))

    if getattr(sys, "frozen", False):
        return get_user_data_dir() / "skills"

    bundled = PROJECT_ROOT / "skills"
    if bundled.is_dir():
        return bundled

    return get_user_data_dir() / "skills"


def get_exec_timeout() -> Optional[float]:
    """Read SKILLS_EXEC_TIMEOUT (seconds). Unset, empty or non-positive means no deadline."""
    raw = os.environ.get("SKILLS_EXEC_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid SKILLS_EXEC_TIMEOUT: {raw!r}")
        return None
    return timeout if timeout > 0 else None


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    skills_dir: Path = field(default_factory=get_skills_dir)
    exec_timeout: Optional[float] = None
    http_host: str = "0.0.0.0"
    http_port: int = 8000

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class ConfigManager:
    """Configuration manager - loads and provides config."""

    def __init__(self, skills_dir: Optional[Path] = None):
        self._config: Optional[Config] = None
        self._skills_dir_override = skills_dir

    async def load(self) -> None:
        """Load configuration from environment."""
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            skills_dir=self._skills_dir_override or get_skills_dir(),
            exec_timeout=get_exec_timeout(),
            http_host=os.getenv("MCP_HOST", "0.0.0.0"),
            http_port=int(os.getenv("MCP_PORT", os.getenv("HTTP_PORT", "8000"))),
        )

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config(
                log_level=os.getenv("LOG_LEVEL", "DEBUG"),
                skills_dir=self._skills_dir_override or get_skills_dir(),
                exec_timeout=get_exec_timeout(),
            )
        return self._config
