"""
Drako CLI - create project directories with optional initialization.
"""

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .classifier import classify, wants_help, wants_version
from .core import Pipeline
from .errors import UsageError
from .registry import get_registry
from .reporter import Reporter, RichReporter
from .settings import get_settings

# Setup
app = typer.Typer(
    name="drako",
    help="Create one or more directories with optional project initialization",
    add_completion=False,
)


def configure_logging():
    """Configure logging based on settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _console() -> Console:
    return Console(
        stderr=True,
        highlight=False,
        soft_wrap=True,
        no_color=get_settings().no_color,
    )


def print_usage(console: Console) -> None:
    console.print("[bold yellow]Usage:[/bold yellow] drako new_directory [options]...")


def print_version(console: Console) -> None:
    console.print(f"drako {__version__}")


def print_help(console: Console) -> None:
    """Print the help screen listing every registered action."""
    console.print("[bold yellow]Usage:[/bold yellow] drako [directories] [options]...\n")
    console.print(
        "[bold yellow]Help:[/bold yellow]  Creates one or more directories with optional "
        "project initialization.\n"
        "    Multiple directories can be specified, and options apply to all of them.\n"
    )
    console.print("[bold yellow]Options:[/bold yellow]")

    table = Table(box=None, show_header=False, padding=(0, 2, 0, 4))
    table.add_column(style="green", no_wrap=True)
    table.add_column()
    for spec in get_registry():
        long_flags = sorted(t for t in spec.triggers if t.startswith("--"))
        short_flags = sorted(t for t in spec.triggers if not t.startswith("--"))
        table.add_row(", ".join(long_flags + short_flags), spec.description)
    table.add_row("--verbose, -v", "Show detailed output from commands.")
    table.add_row("-###", "Set directory permissions (octal format, e.g., -700, -755).")
    table.add_row("--help, -h", "Display this help message.")
    table.add_row("--version", "Display version.")
    console.print(table)


def run(tokens: List[str], reporter: Reporter | None = None) -> int:
    """Run drako on raw command-line ``tokens`` and return the exit code.

    ``--help``/``-h`` and ``--version`` anywhere in ``tokens`` win over
    everything else and never touch the filesystem.
    """
    console = _console()
    if not tokens:
        print_usage(console)
        return 1
    if wants_help(tokens):
        print_help(console)
        return 0
    if wants_version(tokens):
        print_version(console)
        return 0

    reporter = reporter or RichReporter(console=console)
    parsed = classify(tokens)
    try:
        report = Pipeline(reporter=reporter).run(parsed)
    except UsageError as e:
        reporter.error(str(e))
        print_usage(console)
        return e.exit_code
    return report.exit_code


@app.command(context_settings={"help_option_names": []})
def drako(
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Directories, action flags and an optional -NNN permission mode"
    ),
):
    """Create directories and initialize them."""
    configure_logging()
    raise typer.Exit(code=run(list(tokens or [])))


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point.

    Tokens are handed to the command after ``--`` so drako's own classifier,
    not click's option parser, decides what each one means.
    """
    tokens = sys.argv[1:] if argv is None else argv
    app(args=["--", *tokens], prog_name="drako")
