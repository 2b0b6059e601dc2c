"""Shortcut entry point for starting the shell directly.

The shortcut is defined in pyproject.toml under [project.scripts]:
    drush-psysh = "drush_shell.cli.shortcuts:shell_main"
"""

import sys


def shell_main() -> None:
    """Entry point for the drush-psysh command."""
    from drush_shell.cli.app import app

    # Rewrite sys.argv to inject 'shell' command
    sys.argv = ["drush-shell", "shell"] + sys.argv[1:]
    app()
