"""Default configuration values and paths."""

from pathlib import Path
from typing import Final

# Default directory
DEFAULT_CONFIG_DIR: Final[Path] = Path.home() / ".config" / "drush-shell"

# Default file path
DEFAULT_CONFIG_FILE: Final[Path] = DEFAULT_CONFIG_DIR / "config.toml"

# Environment variable names
ENV_CONFIG_PATH: Final[str] = "DRUSH_SHELL_CONFIG"
ENV_LOG_LEVEL: Final[str] = "DRUSH_SHELL_LOG_LEVEL"
ENV_TOOL_NAME: Final[str] = "DRUSH_SHELL_TOOL"
ENV_NO_PAGER: Final[str] = "DRUSH_SHELL_NO_PAGER"

# Proxy defaults
DEFAULT_TOOL_NAME: Final[str] = "drush"
DEFAULT_WRAP_WIDTH: Final[int] = 75
DEFAULT_SHELL_ENTRY_TOKENS: Final[tuple[str, ...]] = (
    "drush-psysh",
    "drush-shell",
    "shell",
    "repl",
    "psysh",
)
DEFAULT_CATEGORY: Final[str] = "Other commands"

# Default config content (TOML)
DEFAULT_CONFIG_TOML: Final[str] = """\
# drush-shell configuration

tool_name = "drush"
shell_entry_tokens = ["drush-psysh", "drush-shell", "shell", "repl", "psysh"]
wrap_width = 75
use_shell = false

[category_titles]
core = "Core drush commands"

[output]
default_format = "rich"
pager = true
color = true

[logging]
level = "WARNING"
json_format = false
"""


def get_config_path() -> Path:
    """Get the configuration file path."""
    import os

    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE
