"""Element and attribute names of the Checkstyle metadata format."""

ROOT_ELEMENT = "checkstyle-metadata"
MODULE_ELEMENT = "module"
DESCRIPTION_ELEMENT = "description"
PROPERTIES_ELEMENT = "properties"
PROPERTY_ELEMENT = "property"
MESSAGE_KEYS_ELEMENT = "message-keys"
MESSAGE_KEY_ELEMENT = "message-key"

NAME_ATTR = "name"
FULLY_QUALIFIED_NAME_ATTR = "fully-qualified-name"
PARENT_ATTR = "parent"
TYPE_ATTR = "type"
DEFAULT_VALUE_ATTR = "default-value"
VALIDATION_TYPE_ATTR = "validation-type"
KEY_ATTR = "key"

# Containers that must be omitted rather than written empty.
OPTIONAL_CONTAINERS = frozenset({PROPERTIES_ELEMENT, MESSAGE_KEYS_ELEMENT})
