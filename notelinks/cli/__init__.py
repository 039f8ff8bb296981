"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from notelinks.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from notelinks.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"notelinks {result.output['version']}")
        return 0

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except SystemExit as e:
        # Commands exit through sys.exit with their success status
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        # Usage errors raised by Typer's own click land here too
        typer.echo(f"Error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
