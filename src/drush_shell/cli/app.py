"""Main CLI application for drush-shell."""

import typer
from rich.console import Console

from drush_shell import __version__
from drush_shell.cli.context import build_shell, resolve_config
from drush_shell.cli.options import (
    CommandsOption,
    ConfigOption,
    FormatOption,
    InvocationArgument,
    NoPagerOption,
    VerboseOption,
)
from drush_shell.config import load_config
from drush_shell.config.defaults import get_config_path
from drush_shell.exceptions import DrushShellError

# Create Typer app
app = typer.Typer(
    name="drush-shell",
    help="Interactive shell exposing an external tool's commands",
    add_completion=True,
    no_args_is_help=True,
)

# Rich console for output
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"drush-shell version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Interactive shell exposing an external tool's commands."""
    pass


# The tool invocation may carry its own options, e.g. `drush --root=/srv`.
PASSTHROUGH = {"ignore_unknown_options": True}


@app.command(context_settings=PASSTHROUGH)
def shell(
    invocation: InvocationArgument = None,
    commands: CommandsOption = None,
    config: ConfigOption = None,
    format: FormatOption = None,
    no_pager: NoPagerOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Start the interactive shell."""
    try:
        repl = build_shell(
            commands_file=commands,
            config_path=config,
            invocation=invocation,
            format_choice=format,
            no_pager=no_pager,
            verbose=verbose,
        )
    except DrushShellError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(e.exit_code) from None

    raise typer.Exit(repl.run())


@app.command("exec", context_settings=PASSTHROUGH)
def exec_cmd(
    line: str = typer.Argument(..., help="Command line to run, e.g. 'status'."),
    invocation: InvocationArgument = None,
    commands: CommandsOption = None,
    config: ConfigOption = None,
    format: FormatOption = None,
    no_pager: NoPagerOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Run a single shell command line and exit."""
    try:
        repl = build_shell(
            commands_file=commands,
            config_path=config,
            invocation=invocation,
            format_choice=format,
            no_pager=no_pager,
            verbose=verbose,
        )
    except DrushShellError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(e.exit_code) from None

    try:
        ok = repl.execute_line(line)
    except SystemExit:
        ok = True

    if not ok:
        raise typer.Exit(1)


@app.command("config")
def config_cmd(
    config: ConfigOption = None,
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path.",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Write the default config file if it doesn't exist yet.",
    ),
) -> None:
    """Show current configuration."""
    path = config or get_config_path()
    if show_path:
        console.print(str(path))
        return

    try:
        if init:
            existed = path.exists()
            settings = load_config(path, create_if_missing=True)
            if not existed:
                console.print(f"Wrote default config to {path}", highlight=False)
        else:
            settings = resolve_config(config)
    except DrushShellError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(e.exit_code) from None

    console.print("[bold]drush-shell configuration[/bold]\n", highlight=False)
    console.print(f"Config file: {path}", highlight=False)
    console.print(f"Tool: {settings.tool_name}", highlight=False)
    console.print(
        f"Shell entry tokens: {', '.join(settings.shell_entry_tokens)}",
        highlight=False,
    )
    console.print(f"Wrap width: {settings.wrap_width}", highlight=False)
    console.print(f"Run through shell: {settings.use_shell}", highlight=False)
    console.print(f"Output format: {settings.output.default_format}", highlight=False)
    console.print(f"Pager: {'enabled' if settings.output.pager else 'disabled'}", highlight=False)

    if settings.category_titles:
        console.print("\n[bold]Category titles:[/bold]")
        for topic, title in settings.category_titles.items():
            console.print(f"  {topic}: {title}", highlight=False, markup=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
