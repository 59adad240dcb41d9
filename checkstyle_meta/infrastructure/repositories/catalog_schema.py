"""Schema of the JSON module catalog handed over by the extraction step.

Example::

    {
      "modules": [
        {
          "name": "Foo",
          "type": "check",
          "fully_qualified_name": "com.puppycrawl.tools.checkstyle.checks.FooCheck",
          "parent": "com.puppycrawl.tools.checkstyle.TreeWalker",
          "description": "Checks foo.",
          "properties": [{"name": "max", "type": "int", "default_value": "3"}],
          "message_keys": ["foo.violation"]
        }
      ]
    }
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkstyle_meta.domain.entities import (
    ModuleDetails,
    ModulePropertyDetails,
    ModuleType,
)

QUALIFIED_NAME_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


class PropertyEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    type: str
    default_value: str | None = None
    validation_type: str | None = None
    description: str = ""

    def to_details(self) -> ModulePropertyDetails:
        return ModulePropertyDetails(
            name=self.name,
            type=self.type,
            default_value=self.default_value,
            validation_type=self.validation_type,
            description=self.description,
        )


class ModuleEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    type: ModuleType
    fully_qualified_name: str
    parent: str
    description: str = ""
    properties: list[PropertyEntry] = Field(default_factory=list)
    message_keys: list[str] = Field(default_factory=list)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: object) -> object:
        if isinstance(value, str):
            return ModuleType.from_label(value)
        return value

    @field_validator("fully_qualified_name")
    @classmethod
    def _check_qualified_name(cls, value: str) -> str:
        if not QUALIFIED_NAME_PATTERN.match(value):
            raise ValueError(f"not a dotted identifier: {value!r}")
        return value

    def to_details(self) -> ModuleDetails:
        return ModuleDetails(
            name=self.name,
            module_type=self.type,
            fully_qualified_name=self.fully_qualified_name,
            parent=self.parent,
            description=self.description,
            properties=tuple(prop.to_details() for prop in self.properties),
            violation_message_keys=frozenset(self.message_keys),
        )


class ModuleCatalog(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    modules: list[ModuleEntry] = Field(default_factory=list)

    def to_details(self) -> list[ModuleDetails]:
        return [entry.to_details() for entry in self.modules]
