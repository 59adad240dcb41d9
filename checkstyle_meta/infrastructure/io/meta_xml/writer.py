"""Writer for Checkstyle metadata files.

This module handles DOM conversion, pretty printing and file I/O. The
standard ``xml.dom.minidom`` implementation is used because ElementTree
cannot emit CDATA sections.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.dom import DOMException, minidom

from checkstyle_meta.constants import XmlFormat

from ..exceptions import MetadataConfigurationError, MetadataWriteError
from .builder import build_metadata_tree
from .paths import resolve_output_path

if TYPE_CHECKING:
    from pathlib import Path

    from checkstyle_meta.domain.entities import ModuleDetails

    from .models import MetaNode

CDATA_TERMINATOR = "]]>"
# Closes the section after "]]" and reopens it before ">".
SPLIT_CDATA_TERMINATOR = "]]]]><![CDATA[>"


class SplitCDATASection(minidom.CDATASection):
    """CDATA section that splits around ``]]>`` instead of rejecting it.

    Readers concatenate adjacent sections, so the text reads back unchanged.
    The node stays a single CDATA child and is still printed inline.
    """

    __slots__ = ()

    def writexml(self, writer, indent="", addindent="", newl=""):
        text = self.data.replace(CDATA_TERMINATOR, SPLIT_CDATA_TERMINATOR)
        writer.write(f"<![CDATA[{text}]]>")


def create_cdata_section(document: minidom.Document, text: str) -> SplitCDATASection:
    section = SplitCDATASection()
    section.data = text
    section.ownerDocument = document
    return section


def write_module_metadata(
    details: ModuleDetails,
    *,
    resources_root: Path | None = None,
    separator: str | None = None,
) -> Path | None:
    """Write the metadata file of a single module.

    The tree is always built. The file is written only when the module has
    a description; otherwise nothing on disk is touched.

    Args:
        details: The module descriptor
        resources_root: Base output directory (default: cwd-relative resources)
        separator: Path separator token (default: chosen from the platform)

    Returns:
        The written path, or ``None`` when the module has no description
    """
    root = build_metadata_tree(details)
    output = resolve_output_path(
        details.fully_qualified_name,
        details.module_type,
        details.name,
        resources_root=resources_root,
        separator=separator,
    )
    if not details.has_description:
        return None
    payload = serialize_metadata_tree(root, qualified_name=details.fully_qualified_name)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(payload)
    except OSError as exc:
        raise MetadataWriteError(
            f"Failed to write {output}: {exc}",
            qualified_name=details.fully_qualified_name,
        ) from exc
    return output


def serialize_metadata_tree(
    root: MetaNode, *, qualified_name: str | None = None
) -> bytes:
    """Render a metadata tree as indented UTF-8 XML."""
    document = create_document(root, qualified_name=qualified_name)
    try:
        return document.toprettyxml(
            indent=XmlFormat.INDENT, encoding=XmlFormat.ENCODING
        )
    finally:
        document.unlink()


def create_document(
    root: MetaNode, *, qualified_name: str | None = None
) -> minidom.Document:
    try:
        implementation = minidom.getDOMImplementation()
        document = implementation.createDocument(None, root.tag, None)
    except DOMException as exc:
        raise MetadataConfigurationError(
            f"Cannot create XML document: {exc}", qualified_name=qualified_name
        ) from exc
    _populate(document, document.documentElement, root)
    return document


def _populate(
    document: minidom.Document, element: minidom.Element, node: MetaNode
) -> None:
    for name, value in node.attributes:
        element.setAttribute(name, value)
    if node.cdata is not None:
        element.appendChild(create_cdata_section(document, node.cdata))
    for child in node.children:
        child_element = document.createElement(child.tag)
        element.appendChild(child_element)
        _populate(document, child_element, child)
