"""drush-shell: expose an external CLI tool's subcommands inside an interactive shell."""

__version__ = "0.1.0"
