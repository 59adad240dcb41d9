from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities import ModuleDetails
    from ..models import GenerationSummary


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_batch_start(self, module_count: int, resources_root: Path) -> None: ...

    def log_module_written(self, qualified_name: str, output_path: Path) -> None: ...

    def log_module_skipped(self, qualified_name: str, reason: str) -> None: ...

    def log_module_failed(self, qualified_name: str, error: str) -> None: ...

    def log_summary(self, summary: GenerationSummary) -> None: ...


@runtime_checkable
class MetadataWriterPort(Protocol):
    pass

    def output_path(self, details: ModuleDetails) -> Path: ...

    def write(self, details: ModuleDetails) -> Path | None: ...


@runtime_checkable
class ModuleCatalogPort(Protocol):
    pass

    def load(self, path: Path) -> list[ModuleDetails]: ...
