"""Create the main Typer CLI app."""

from pathlib import Path

import typer

from notelinks.api.config.ConfigError import ConfigError
from notelinks.api.config.NotesConfig import NotesConfig
from notelinks.cli._handle_stage_result import DISPLAY_FORMATS
from notelinks.cli.config import config
from notelinks.cli.link import link
from notelinks.utils import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Pagination link checker for static HTML note pages",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(link(), name="link")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            loaded = NotesConfig.load()
        except ConfigError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(2) from e

        configure_logging(loaded.log.level, Path(loaded.log.file) if loaded.log.file else None)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
