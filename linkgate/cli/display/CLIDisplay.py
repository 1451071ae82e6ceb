"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml  # type: ignore
from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Status lines on stderr, structured output as YAML or JSON."""

    def __init__(self):
        # Bind to the streams current at construction time
        self.stdout = sys.stdout
        self.stderr = sys.stderr
        self.stderr_console = Console(file=self.stderr, soft_wrap=True)

    def status(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [red]✗[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def json_output(self, data: Any, format: str = "yaml", err: bool = False) -> None:
        """Print ``data`` as YAML or JSON to stdout, or to stderr when ``err`` is set."""
        stream = self.stderr if err else self.stdout
        if format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        print(text, end="", file=stream)
