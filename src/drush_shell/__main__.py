"""Allow ``python -m drush_shell``."""

from drush_shell.cli.app import main

main()
