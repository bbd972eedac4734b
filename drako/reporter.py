"""
Diagnostic reporting for drako.

Every user-visible outcome message goes through a Reporter passed explicitly
into the provisioner, dispatcher and pipeline. RichReporter writes coloured
lines to standard error; BufferedReporter records messages so they can be
replayed later (one directory's output at a time) or inspected in tests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape


class Level(str, Enum):
    """Severity of a reported message."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Reporter(Protocol):
    """Sink for user-visible diagnostics."""

    def info(self, message: str, subject: str | None = None, detail: str | None = None) -> None: ...

    def success(self, message: str, subject: str | None = None, detail: str | None = None) -> None: ...

    def warn(self, message: str, subject: str | None = None, detail: str | None = None) -> None: ...

    def error(self, message: str, subject: str | None = None, detail: str | None = None) -> None: ...


def compose(message: str, subject: str | None = None) -> str:
    """Join a message with the path or token it is about."""
    if subject is None:
        return message
    return f"{message} {subject}"


@dataclass(frozen=True)
class Entry:
    """A single recorded diagnostic."""
    level: Level
    message: str
    subject: str | None = None
    detail: str | None = None

    @property
    def text(self) -> str:
        return compose(self.message, self.subject)


class RichReporter:
    """Reporter that prints to standard error through a Rich console."""

    def __init__(self, console: Console | None = None, no_color: bool = False):
        """Initialize reporter with Rich console."""
        self.console = console or Console(
            stderr=True,
            highlight=False,
            soft_wrap=True,
            no_color=no_color,
        )

        # Colour scheme per level
        self.styles = {
            Level.INFO: "bold blue",
            Level.SUCCESS: "bold green",
            Level.WARNING: "bold yellow",
            Level.ERROR: "bold red",
        }
        self.labels = {
            Level.INFO: "Info:",
            Level.SUCCESS: "Success:",
            Level.WARNING: "Warning:",
            Level.ERROR: "Error:",
        }

    def emit(self, entry: Entry) -> None:
        style = self.styles[entry.level]
        label = self.labels[entry.level]
        self.console.print(f"[{style}]{label}[/{style}] {escape(entry.text)}")
        if entry.detail:
            self.console.print(f"[dim]{escape(entry.detail)}[/dim]")

    def info(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.emit(Entry(Level.INFO, message, subject, detail))

    def success(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.emit(Entry(Level.SUCCESS, message, subject, detail))

    def warn(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.emit(Entry(Level.WARNING, message, subject, detail))

    def error(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.emit(Entry(Level.ERROR, message, subject, detail))


class BufferedReporter:
    """Reporter that records entries instead of printing them."""

    def __init__(self):
        self.entries: list[Entry] = []

    def info(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.entries.append(Entry(Level.INFO, message, subject, detail))

    def success(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.entries.append(Entry(Level.SUCCESS, message, subject, detail))

    def warn(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.entries.append(Entry(Level.WARNING, message, subject, detail))

    def error(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        self.entries.append(Entry(Level.ERROR, message, subject, detail))

    def messages(self, level: Level | None = None) -> list[str]:
        """Recorded message texts, optionally filtered by level."""
        return [e.text for e in self.entries if level is None or e.level is level]

    def replay(self, reporter: Reporter) -> None:
        """Forward every recorded entry, in order, to ``reporter``."""
        dispatch = {
            Level.INFO: reporter.info,
            Level.SUCCESS: reporter.success,
            Level.WARNING: reporter.warn,
            Level.ERROR: reporter.error,
        }
        for entry in self.entries:
            dispatch[entry.level](entry.message, entry.subject, entry.detail)


class NullReporter:
    """Reporter that discards everything."""

    def info(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        pass

    def success(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        pass

    def warn(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        pass

    def error(self, message: str, subject: str | None = None, detail: str | None = None) -> None:
        pass
