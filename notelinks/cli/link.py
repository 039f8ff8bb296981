"""Link Typer app factory."""

from collections.abc import Iterator

import typer

from notelinks.api.link.cmd_check import cmd_check
from notelinks.api.link.DocumentReport import DocumentReport
from notelinks.api.link.render_report import render_report
from notelinks.cli._handle_stage_result import _handle_stage_result, display_format_from


def _check_report_lines(output: dict) -> Iterator[str]:
    return render_report(DocumentReport.from_dict(doc) for doc in output["documents"])


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Check pagination links in note pages",
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

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        documents: list[str] | None = typer.Argument(None, help="Documents to check (default: configured list)"),
        selector: str | None = typer.Option(None, "--selector", "-s", help="CSS selector for pagination links"),
    ) -> None:
        """Report whether each pagination link points at an existing file."""
        _handle_stage_result(cmd_check, text_printer=_check_report_lines, display_format=display_format_from(ctx))(
            documents=documents or None, selector=selector
        )

    return app
