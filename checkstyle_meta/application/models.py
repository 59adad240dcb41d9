from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ..domain.entities import ModuleDetails


class GenerationStatus(Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"
    FAILED = "failed"


def _empty_results() -> list[ModuleGenerationResult]:
    return []


@dataclass(frozen=True, slots=True)
class GenerateMetadataRequest:
    modules: Sequence[ModuleDetails]
    fail_fast: bool = False


@dataclass(frozen=True, slots=True)
class ModuleGenerationResult:
    qualified_name: str
    status: GenerationStatus
    output_path: Path | None = None
    error: str | None = None


@dataclass(slots=True)
class GenerationSummary:
    results: list[ModuleGenerationResult] = field(default_factory=_empty_results)

    def add(self, result: ModuleGenerationResult) -> None:
        self.results.append(result)

    def _with_status(self, status: GenerationStatus) -> list[ModuleGenerationResult]:
        return [r for r in self.results if r.status is status]

    @property
    def written(self) -> list[ModuleGenerationResult]:
        return self._with_status(GenerationStatus.WRITTEN)

    @property
    def skipped(self) -> list[ModuleGenerationResult]:
        return self._with_status(GenerationStatus.SKIPPED)

    @property
    def failed(self) -> list[ModuleGenerationResult]:
        return self._with_status(GenerationStatus.FAILED)

    @property
    def success(self) -> bool:
        return not self.failed
