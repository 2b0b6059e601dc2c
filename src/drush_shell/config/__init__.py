"""Configuration management."""

from drush_shell.config.loader import get_config, load_config, reset_config
from drush_shell.config.schema import ShellConfig

__all__ = ["ShellConfig", "get_config", "load_config", "reset_config"]
