"""
Shared pytest fixtures for Skills Router tests

Provides a mocked logger, config and tool context, plus a helper that lays
out skill folders under a temporary skills root.
"""

import sys
import textwrap
from pathlib import Path
import pytest
from unittest.mock import Mock
from typing import Any, Dict, Optional

import yaml

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# ============================================================================
# Skill tree helpers
# ============================================================================

class SkillTreeBuilder:
    """
    Writes skill folders under a root directory.

    Usage:
        tree = SkillTreeBuilder(tmp_path / "skills")
        tree.add("cap1", {"name": "greet"}, body="Say hi.")
        tree.add("cap2", {"name": "cap2", "scripts": ["run.sh"]},
                 files={"run.sh": 'echo "$SKILL_ARG_WHO"'})
    """
    
    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
    
    def add(
        self,
        relative: str,
        header: Optional[Dict[str, Any]] = None,
        body: str = "",
        files: Optional[Dict[str, str]] = None,
        raw: Optional[str] = None,
    ) -> Path:
        """
        Create a skill folder.
        
        Args:
            relative: Folder path relative to the root (may be nested)
            header: Frontmatter mapping, dumped as YAML
            body: Markdown after the header
            files: Extra files to write into the folder
            raw: Exact SKILL.md content (overrides header/body)
        """
        folder = self.root / relative
        folder.mkdir(parents=True, exist_ok=True)
        
        if raw is None:
            front = yaml.safe_dump(header or {}, sort_keys=False).strip()
            raw = f"---\n{front}\n---\n{body}"
        (folder / "SKILL.md").write_text(raw)
        
        for name, content in (files or {}).items():
            path = folder / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(content))
        
        return folder


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from skills_router.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def skills_root(tmp_path):
    """Empty skills root directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def skill_tree(skills_root):
    """SkillTreeBuilder bound to skills_root."""
    return SkillTreeBuilder(skills_root)


@pytest.fixture
def mock_config(skills_root):
    """
    Standard configuration for all tests, pointing at skills_root.
    """
    from skills_router.config.settings import Config
    
    return Config(
        environment="test",
        log_level="DEBUG",
        skills_dir=skills_root,
        exec_timeout=None,
        http_port=8000,
    )


@pytest.fixture
def config_manager(mock_config):
    """ConfigManager that always hands out mock_config."""
    from skills_router.config import ConfigManager
    
    manager = ConfigManager(skills_dir=mock_config.skills_dir)
    manager._config = mock_config
    return manager


@pytest.fixture
def mock_context():
    """
    Standard ToolContext for all tests.
    """
    from skills_router.mcp_types.tools import ToolContext
    
    return ToolContext(
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )
