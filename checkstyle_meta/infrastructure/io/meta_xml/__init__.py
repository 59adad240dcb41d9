"""Checkstyle metadata XML generation.

The module is organized into focused components:
- constants: Element and attribute names
- models: Immutable document tree value
- paths: Output location of metadata files
- builder: Document tree construction and structural checks
- writer: DOM serialization and file I/O
- reader: Parsing written files back into descriptors
"""

from .builder import build_metadata_tree, validate_metadata_tree
from .models import MetaNode
from .paths import platform_separator, resolve_output_path
from .reader import read_module_metadata
from .writer import serialize_metadata_tree, write_module_metadata

__all__ = [
    "MetaNode",
    "build_metadata_tree",
    "platform_separator",
    "read_module_metadata",
    "resolve_output_path",
    "serialize_metadata_tree",
    "validate_metadata_tree",
    "write_module_metadata",
]
