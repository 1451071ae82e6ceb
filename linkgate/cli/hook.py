"""Hook Typer app factory."""

import typer

from linkgate.api.hook.cmd_install import cmd_install
from linkgate.api.hook.cmd_status import cmd_status
from linkgate.api.hook.cmd_uninstall import cmd_uninstall
from linkgate.cli._handle_stage_result import _handle_stage_result


def hook() -> typer.Typer:
    """Create and configure the hook Typer app."""
    app = typer.Typer(
        name="hook",
        help="Manage the git pre-commit hook",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(".", help="Repository root"),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing pre-commit hook"),
    ) -> None:
        """Install the linkgate pre-commit hook."""
        _handle_stage_result(cmd_install, ctx)(path=path, force=force)

    @app.command(name="uninstall")
    def uninstall_cmd(ctx: typer.Context, path: str = typer.Argument(".", help="Repository root")) -> None:
        """Remove the linkgate pre-commit hook."""
        _handle_stage_result(cmd_uninstall, ctx)(path=path)

    @app.command(name="status")
    def status_cmd(ctx: typer.Context, path: str = typer.Argument(".", help="Repository root")) -> None:
        """Show whether the linkgate pre-commit hook is installed."""
        _handle_stage_result(cmd_status, ctx)(path=path)

    return app
