from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.metadata_generation_use_case import (
    MetadataGenerationDependencies,
    MetadataGenerationUseCase,
)
from ..config import MetaConfig
from .io.meta_xml_writer import MetaXMLWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.module_catalog_repository import ModuleCatalogRepository

if TYPE_CHECKING:
    from ..application.ports.services import (
        LoggerPort,
        MetadataWriterPort,
        ModuleCatalogPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        config: MetaConfig | None = None,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or MetaConfig()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._writer_instance: MetadataWriterPort | None = None
        self._catalog_instance: ModuleCatalogPort | None = None

    def get_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def get_writer(self) -> MetadataWriterPort:
        if self._writer_instance is None:
            self._writer_instance = MetaXMLWriter(self.config)
        return self._writer_instance

    def get_module_catalog(self) -> ModuleCatalogPort:
        if self._catalog_instance is None:
            self._catalog_instance = ModuleCatalogRepository()
        return self._catalog_instance

    def create_metadata_generation_use_case(self) -> MetadataGenerationUseCase:
        return MetadataGenerationUseCase(
            MetadataGenerationDependencies(
                logger=self.get_logger(),
                writer=self.get_writer(),
                resources_root=self.config.resolved_resources_dir(),
            )
        )

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_writer(self, writer: MetadataWriterPort) -> None:
        self._writer_instance = writer


def create_default_container(
    config: MetaConfig | None = None, verbose: int = 0
) -> DependencyContainer:
    return DependencyContainer(config=config, verbose=verbose)
