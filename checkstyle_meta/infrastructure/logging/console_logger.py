from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import GenerationSummary


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    qualified_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "modules_written": 0,
        "modules_skipped": 0,
        "modules_failed": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_batch_start(self, module_count: int, resources_root: Path) -> None:
        self.set_context(operation="generate")
        self.console.print(
            f"[bold]Generating metadata for {module_count} module(s)[/bold]"
        )
        self.verbose(escape(f"Resources root: {resources_root}"))

    @override
    def log_module_written(self, qualified_name: str, output_path: Path) -> None:
        self._stats["modules_written"] += 1
        self.set_context(qualified_name=qualified_name)
        self.success(escape(qualified_name))
        self.verbose(escape(f"  Wrote {output_path}"))

    @override
    def log_module_skipped(self, qualified_name: str, reason: str) -> None:
        self._stats["modules_skipped"] += 1
        self.set_context(qualified_name=qualified_name)
        self.verbose(escape(f"Skipped {qualified_name}: {reason}"))

    @override
    def log_module_failed(self, qualified_name: str, error: str) -> None:
        self._stats["modules_failed"] += 1
        self.set_context(qualified_name=qualified_name)
        self.error(escape(f"Failed {qualified_name}: {error}"))

    @override
    def log_summary(self, summary: GenerationSummary) -> None:
        self.console.print()
        self.console.print(
            f"[bold]Written:[/bold] {len(summary.written)}  "
            f"[bold]Skipped:[/bold] {len(summary.skipped)}  "
            f"[bold]Failed:[/bold] {len(summary.failed)}"
        )
        if self.verbosity >= LogLevel.DEBUG and self._context is not None:
            self.debug(f"Elapsed: {self._context.elapsed_ms():.0f} ms")
        self.clear_context()

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        if self._context.qualified_name:
            return escape(f"[{self._context.qualified_name}] ")
        return ""
