"""Builder for Checkstyle metadata document trees.

The builder produces an immutable ``MetaNode`` tree describing one module.
Nothing is serialized here; see ``writer`` for the file output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import InvalidMetadataTreeError
from .constants import (
    DEFAULT_VALUE_ATTR,
    DESCRIPTION_ELEMENT,
    FULLY_QUALIFIED_NAME_ATTR,
    KEY_ATTR,
    MESSAGE_KEY_ELEMENT,
    MESSAGE_KEYS_ELEMENT,
    MODULE_ELEMENT,
    NAME_ATTR,
    OPTIONAL_CONTAINERS,
    PARENT_ATTR,
    PROPERTIES_ELEMENT,
    PROPERTY_ELEMENT,
    ROOT_ELEMENT,
    TYPE_ATTR,
    VALIDATION_TYPE_ATTR,
)
from .models import MetaNode

if TYPE_CHECKING:
    from checkstyle_meta.domain.entities import ModuleDetails, ModulePropertyDetails


def build_metadata_tree(details: ModuleDetails) -> MetaNode:
    """Build the metadata document tree for a single module.

    Args:
        details: The module descriptor

    Returns:
        The ``checkstyle-metadata`` root node
    """
    children: list[MetaNode] = [_description_node(details.description)]

    properties = build_properties_node(details.properties)
    if properties is not None:
        children.append(properties)

    message_keys = build_message_keys_node(details.sorted_message_keys())
    if message_keys is not None:
        children.append(message_keys)

    module_node = MetaNode(
        tag=details.module_type.label,
        attributes=(
            (NAME_ATTR, details.name),
            (FULLY_QUALIFIED_NAME_ATTR, details.fully_qualified_name),
            (PARENT_ATTR, details.parent),
        ),
        children=tuple(children),
    )
    root = MetaNode(
        tag=ROOT_ELEMENT,
        children=(MetaNode(tag=MODULE_ELEMENT, children=(module_node,)),),
    )
    validate_metadata_tree(root, qualified_name=details.fully_qualified_name)
    return root


def build_properties_node(
    properties: tuple[ModulePropertyDetails, ...],
) -> MetaNode | None:
    """Return the ``properties`` container, or ``None`` when there are none."""
    if not properties:
        return None
    return MetaNode(
        tag=PROPERTIES_ELEMENT,
        children=tuple(build_property_node(prop) for prop in properties),
    )


def build_property_node(prop: ModulePropertyDetails) -> MetaNode:
    attributes: list[tuple[str, str]] = [
        (NAME_ATTR, prop.name),
        (TYPE_ATTR, prop.type),
    ]
    # Presence, not emptiness: an empty default is still a documented default.
    if prop.default_value is not None:
        attributes.append((DEFAULT_VALUE_ATTR, prop.default_value))
    if prop.validation_type is not None:
        attributes.append((VALIDATION_TYPE_ATTR, prop.validation_type))
    return MetaNode(
        tag=PROPERTY_ELEMENT,
        attributes=tuple(attributes),
        children=(_description_node(prop.description),),
    )


def build_message_keys_node(keys: list[str]) -> MetaNode | None:
    if not keys:
        return None
    return MetaNode(
        tag=MESSAGE_KEYS_ELEMENT,
        children=tuple(
            MetaNode(tag=MESSAGE_KEY_ELEMENT, attributes=((KEY_ATTR, key),))
            for key in keys
        ),
    )


def validate_metadata_tree(
    root: MetaNode, *, qualified_name: str | None = None
) -> None:
    """Check a tree against the structural rules of the metadata format.

    Raises:
        InvalidMetadataTreeError: If an element has no name, an optional
            container is empty, or an attribute name repeats
    """
    for node in root.iter():
        if not node.tag:
            raise InvalidMetadataTreeError(
                "Element without a tag name", qualified_name=qualified_name
            )
        if node.tag in OPTIONAL_CONTAINERS and not node.children:
            raise InvalidMetadataTreeError(
                f"Empty <{node.tag}> container", qualified_name=qualified_name
            )
        names = [name for name, _ in node.attributes]
        if len(names) != len(set(names)):
            raise InvalidMetadataTreeError(
                f"Duplicate attribute on <{node.tag}>", qualified_name=qualified_name
            )


def _description_node(text: str) -> MetaNode:
    return MetaNode(tag=DESCRIPTION_ELEMENT, cdata=text)
