"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Status lines on stderr, command output on stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def progress(self, message: str, fraction: float) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] Progress: {escape(message)} ({fraction:.1%})")

    def text_output(self, lines: Any) -> None:
        # Plain print: report text must not be reinterpreted as Rich markup
        for line in lines:
            print(line, file=sys.stdout)

    def json_output(self, data: Any, format: str = "yaml", indent: int = 2) -> None:
        if format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        print(text, end="", file=sys.stdout)
