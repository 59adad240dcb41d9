"""Reader for Checkstyle metadata files.

Turns a file produced by ``write_module_metadata`` back into a
``ModuleDetails`` descriptor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from checkstyle_meta.domain.entities import (
    ModuleDetails,
    ModulePropertyDetails,
    ModuleType,
)

from ..exceptions import MetadataReadError
from .constants import (
    DEFAULT_VALUE_ATTR,
    DESCRIPTION_ELEMENT,
    FULLY_QUALIFIED_NAME_ATTR,
    KEY_ATTR,
    MESSAGE_KEY_ELEMENT,
    MESSAGE_KEYS_ELEMENT,
    MODULE_ELEMENT,
    NAME_ATTR,
    PARENT_ATTR,
    PROPERTIES_ELEMENT,
    PROPERTY_ELEMENT,
    ROOT_ELEMENT,
    TYPE_ATTR,
    VALIDATION_TYPE_ATTR,
)

if TYPE_CHECKING:
    from pathlib import Path


def read_module_metadata(path: Path) -> ModuleDetails:
    """Parse a metadata file into a module descriptor.

    Raises:
        MetadataReadError: If the file is missing, not well-formed, or does
            not follow the metadata layout
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise MetadataReadError(f"Cannot parse {path}: {exc}") from exc
    return parse_metadata_element(root, source=str(path))


def parse_metadata_element(
    root: ET.Element, *, source: str = "<memory>"
) -> ModuleDetails:
    if root.tag != ROOT_ELEMENT:
        raise MetadataReadError(
            f"{source}: expected <{ROOT_ELEMENT}>, got <{root.tag}>"
        )
    module = root.find(MODULE_ELEMENT)
    if module is None or len(module) != 1:
        raise MetadataReadError(f"{source}: expected exactly one module definition")
    element = module[0]
    try:
        module_type = ModuleType.from_label(element.tag)
    except ValueError as exc:
        raise MetadataReadError(f"{source}: {exc}") from exc

    qualified_name = element.get(FULLY_QUALIFIED_NAME_ATTR, "")
    name = element.get(NAME_ATTR)
    if not name or not qualified_name:
        raise MetadataReadError(
            f"{source}: module is missing its name", qualified_name=qualified_name
        )

    properties: list[ModulePropertyDetails] = []
    properties_element = element.find(PROPERTIES_ELEMENT)
    if properties_element is not None:
        for prop in properties_element.findall(PROPERTY_ELEMENT):
            properties.append(
                ModulePropertyDetails(
                    name=prop.get(NAME_ATTR, ""),
                    type=prop.get(TYPE_ATTR, ""),
                    default_value=prop.get(DEFAULT_VALUE_ATTR),
                    validation_type=prop.get(VALIDATION_TYPE_ATTR),
                    description=_description_text(prop),
                )
            )

    message_keys: set[str] = set()
    keys_element = element.find(MESSAGE_KEYS_ELEMENT)
    if keys_element is not None:
        for key in keys_element.findall(MESSAGE_KEY_ELEMENT):
            if value := key.get(KEY_ATTR):
                message_keys.add(value)

    return ModuleDetails(
        name=name,
        module_type=module_type,
        fully_qualified_name=qualified_name,
        parent=element.get(PARENT_ATTR, ""),
        description=_description_text(element),
        properties=tuple(properties),
        violation_message_keys=frozenset(message_keys),
    )


def _description_text(element: ET.Element) -> str:
    description = element.find(DESCRIPTION_ELEMENT)
    if description is None:
        return ""
    return description.text or ""
