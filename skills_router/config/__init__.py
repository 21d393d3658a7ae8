"""
Config Module
Configuration management.
"""

from .settings import (
    ConfigManager,
    Config,
    get_skills_dir,
    get_user_data_dir,
    get_exec_timeout,
)

__all__ = [
    "ConfigManager",
    "Config",
    "get_skills_dir",
    "get_user_data_dir",
    "get_exec_timeout",
]
