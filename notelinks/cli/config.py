"""Config Typer app factory."""

import typer

from notelinks.api.config.cmd_show import cmd_show
from notelinks.api.config.cmd_version import cmd_version
from notelinks.cli._handle_stage_result import _handle_stage_result, display_format_from


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Show configuration",
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

    @app.command(name="show")
    def show_cmd(ctx: typer.Context) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show, display_format=display_format_from(ctx))()

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show the package version."""
        _handle_stage_result(cmd_version, display_format=display_format_from(ctx))()

    return app
