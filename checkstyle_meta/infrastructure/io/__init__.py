"""Infrastructure I/O: metadata files and their errors."""

from .exceptions import (
    CatalogLoadError,
    InvalidMetadataTreeError,
    MetadataConfigurationError,
    MetadataGenerationError,
    MetadataReadError,
    MetadataWriteError,
)
from .meta_xml_writer import MetaXMLWriter

__all__ = [
    "CatalogLoadError",
    "InvalidMetadataTreeError",
    "MetaXMLWriter",
    "MetadataConfigurationError",
    "MetadataGenerationError",
    "MetadataReadError",
    "MetadataWriteError",
]
