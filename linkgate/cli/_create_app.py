"""Create the main Typer CLI app."""

import typer

from linkgate.api.link.cmd_check import cmd_check
from linkgate.cli._handle_stage_result import _handle_stage_result
from linkgate.cli.hook import hook


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app.

    Without a subcommand the staged-document link check runs.
    """
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Verify links and images in staged markdown documents",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(hook(), name="hook")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Show progress and output on success too"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["verbose"] = verbose

        if ctx.invoked_subcommand is None:
            _handle_stage_result(cmd_check, ctx, quiet=True)()

    @app.command(name="check")
    def check_cmd(ctx: typer.Context) -> None:
        """Check links in the staged markdown documents (default command)."""
        _handle_stage_result(cmd_check, ctx, quiet=True)()

    return app
