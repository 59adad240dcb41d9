from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ModuleType(Enum):
    CHECK = "check"
    FILTER = "filter"
    FILEFILTER = "filefilter"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> ModuleType:
        normalized = label.strip().lower().replace(" ", "").replace("-", "")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown module type: {label!r}")


@dataclass(frozen=True, slots=True)
class ModulePropertyDetails:
    name: str
    type: str
    default_value: str | None = None
    validation_type: str | None = None
    description: str = ""


@dataclass(frozen=True, slots=True)
class ModuleDetails:
    """Metadata of one check, filter or file filter.

    ``properties`` keeps declaration order and may contain duplicates.
    ``violation_message_keys`` is a set; writers emit it in sorted order.
    """

    name: str
    module_type: ModuleType
    fully_qualified_name: str
    parent: str
    description: str = ""
    properties: tuple[ModulePropertyDetails, ...] = ()
    violation_message_keys: frozenset[str] = field(default_factory=frozenset)

    def sorted_message_keys(self) -> list[str]:
        return sorted(self.violation_message_keys)

    @property
    def has_description(self) -> bool:
        return bool(self.description)
