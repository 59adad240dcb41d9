from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path

    from ...application.models import GenerationSummary


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_batch_start(self, module_count: int, resources_root: Path) -> None:
        return None

    @override
    def log_module_written(self, qualified_name: str, output_path: Path) -> None:
        return None

    @override
    def log_module_skipped(self, qualified_name: str, reason: str) -> None:
        return None

    @override
    def log_module_failed(self, qualified_name: str, error: str) -> None:
        return None

    @override
    def log_summary(self, summary: GenerationSummary) -> None:
        return None
