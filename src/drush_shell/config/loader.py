"""Configuration loading from TOML files and environment variables."""

import os
from pathlib import Path

from drush_shell.config.defaults import (
    DEFAULT_CONFIG_TOML,
    ENV_LOG_LEVEL,
    ENV_NO_PAGER,
    ENV_TOOL_NAME,
    get_config_path,
)
from drush_shell.config.schema import ShellConfig
from drush_shell.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigValidationError,
)

# Global config instance (singleton)
_config: ShellConfig | None = None


def load_config(
    config_path: Path | None = None,
    *,
    create_if_missing: bool = False,
) -> ShellConfig:
    """Load configuration from a TOML file and environment variables.

    Args:
        config_path: Path to config file. If None, uses default.
        create_if_missing: Write the default config if the file doesn't exist.

    Returns:
        Loaded and validated configuration.

    Raises:
        ConfigNotFoundError: If an explicitly given file does not exist.
        ConfigError: If configuration cannot be loaded.
        ConfigValidationError: If configuration is invalid.
    """
    # Use Python 3.11+ tomllib or fallback
    try:
        import tomllib
    except ImportError:
        try:
            import tomli as tomllib
        except ImportError as err:
            raise ConfigError(
                "tomllib not available. Install 'tomli' for Python < 3.11"
            ) from err

    path = config_path or get_config_path()

    if not path.exists():
        if create_if_missing:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(DEFAULT_CONFIG_TOML)
        elif config_path is not None:
            raise ConfigNotFoundError(f"Config file not found: {path}")
        else:
            # Return default config without file
            return _apply_env_overrides(ShellConfig())

    # Load TOML file
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except Exception as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    # Parse into Pydantic model
    try:
        config = ShellConfig.model_validate(data)
    except Exception as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e

    return _apply_env_overrides(config)


def _apply_env_overrides(config: ShellConfig) -> ShellConfig:
    """Apply environment variable overrides to configuration."""
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if log_level:
        config.logging.level = log_level.upper()

    tool_name = os.environ.get(ENV_TOOL_NAME)
    if tool_name:
        config.tool_name = tool_name

    no_pager = os.environ.get(ENV_NO_PAGER)
    if no_pager and no_pager.lower() in ("1", "true", "yes"):
        config.output.pager = False

    return config


def get_config() -> ShellConfig:
    """Get the current configuration (singleton).

    Loads config on first access, caches for subsequent calls.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the configuration singleton (mainly for testing)."""
    global _config
    _config = None
