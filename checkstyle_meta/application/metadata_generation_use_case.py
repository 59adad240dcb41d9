"""Metadata generation use case.

Writes the metadata file of every module in a request and reports the
outcome per module. Each module is independent: a failure is recorded with
the module's qualified name and the batch continues unless ``fail_fast`` is
set.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..infrastructure.io.exceptions import MetadataGenerationError
from .models import GenerationStatus, GenerationSummary, ModuleGenerationResult

if TYPE_CHECKING:
    from ..domain.entities import ModuleDetails
    from .models import GenerateMetadataRequest
    from .ports.services import LoggerPort, MetadataWriterPort


@dataclass(slots=True)
class MetadataGenerationDependencies:
    logger: LoggerPort
    writer: MetadataWriterPort
    resources_root: Path | None = None


class MetadataGenerationUseCase:
    """Use case for writing metadata files for a batch of modules.

    Example:
        >>> use_case = MetadataGenerationUseCase(
        ...     MetadataGenerationDependencies(
        ...         logger=NullLogger(), writer=MetaXMLWriter()
        ...     )
        ... )
        >>> summary = use_case.execute(GenerateMetadataRequest(modules=modules))
        >>> summary.success
        True
    """

    def __init__(self, dependencies: MetadataGenerationDependencies) -> None:
        super().__init__()
        self._logger = dependencies.logger
        self._writer = dependencies.writer
        self._resources_root = dependencies.resources_root

    def execute(self, request: GenerateMetadataRequest) -> GenerationSummary:
        summary = GenerationSummary()
        self._logger.log_batch_start(
            len(request.modules), self._resources_root or Path.cwd()
        )
        try:
            for details in request.modules:
                summary.add(self._generate(details, fail_fast=request.fail_fast))
        finally:
            self._logger.log_summary(summary)
        return summary

    def _generate(
        self, details: ModuleDetails, *, fail_fast: bool
    ) -> ModuleGenerationResult:
        qualified_name = details.fully_qualified_name
        self._logger.debug(f"Building metadata for {qualified_name}")
        try:
            output_path = self._writer.write(details)
        except (MetadataGenerationError, OSError, ValueError) as exc:
            message = str(exc)
            if not isinstance(exc, MetadataGenerationError):
                message = f"{type(exc).__name__}: {exc}"
            self._logger.log_module_failed(qualified_name, message)
            if fail_fast:
                raise
            return ModuleGenerationResult(
                qualified_name=qualified_name,
                status=GenerationStatus.FAILED,
                error=message,
            )

        if output_path is None:
            self._logger.log_module_skipped(qualified_name, "empty description")
            return ModuleGenerationResult(
                qualified_name=qualified_name,
                status=GenerationStatus.SKIPPED,
                output_path=self._writer.output_path(details),
            )
        self._logger.log_module_written(qualified_name, output_path)
        return ModuleGenerationResult(
            qualified_name=qualified_name,
            status=GenerationStatus.WRITTEN,
            output_path=output_path,
        )
