"""checkstyle-meta package.

Generates the XML metadata files that document Checkstyle modules (checks,
filters and file filters).

Features:
- Output location derived from a module's qualified name
- Metadata document building with CDATA descriptions
- Reading metadata files back into module descriptors
- Batch generation from a JSON module catalog
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("checkstyle-meta")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from checkstyle_meta.domain.entities import (
    ModuleDetails,
    ModulePropertyDetails,
    ModuleType,
)
from checkstyle_meta.infrastructure.io.meta_xml import (
    build_metadata_tree,
    read_module_metadata,
    resolve_output_path,
    write_module_metadata,
)

__all__ = [
    "__version__",
    "ModuleDetails",
    "ModulePropertyDetails",
    "ModuleType",
    "build_metadata_tree",
    "read_module_metadata",
    "resolve_output_path",
    "write_module_metadata",
]
