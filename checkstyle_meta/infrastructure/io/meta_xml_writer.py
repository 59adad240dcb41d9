"""Metadata writer adapter.

Binds the module-level writer to a ``MetaConfig`` so the application layer
can depend on ``MetadataWriterPort`` only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .meta_xml.paths import platform_separator, resolve_output_path
from .meta_xml.writer import write_module_metadata

if TYPE_CHECKING:
    from pathlib import Path

    from checkstyle_meta.config import MetaConfig
    from checkstyle_meta.domain.entities import ModuleDetails


class MetaXMLWriter:
    """Adapter for writing Checkstyle metadata files.

    Example:
        >>> writer = MetaXMLWriter(MetaConfig(resources_dir=Path("/srv/meta")))
        >>> writer.write(details)
        PosixPath('/srv/meta/com/puppycrawl/tools/checkstyle/meta/checks/FooCheck.xml')
    """

    def __init__(self, config: MetaConfig | None = None) -> None:
        self._config = config

    def _resources_root(self) -> Path | None:
        if self._config is None:
            return None
        return self._config.resolved_resources_dir()

    def _separator(self) -> str:
        os_name = self._config.os_name if self._config is not None else None
        return platform_separator(os_name)

    def output_path(self, details: ModuleDetails) -> Path:
        return resolve_output_path(
            details.fully_qualified_name,
            details.module_type,
            details.name,
            resources_root=self._resources_root(),
            separator=self._separator(),
        )

    def write(self, details: ModuleDetails) -> Path | None:
        """Write one module's metadata file.

        Returns:
            The written path, or ``None`` when the module has no description

        Raises:
            MetadataGenerationError: If building or writing fails
        """
        return write_module_metadata(
            details,
            resources_root=self._resources_root(),
            separator=self._separator(),
        )
