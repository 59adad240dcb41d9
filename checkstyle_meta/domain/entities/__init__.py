"""Domain entities describing documented Checkstyle modules."""

from .module_details import ModuleDetails, ModulePropertyDetails, ModuleType

__all__ = [
    "ModuleDetails",
    "ModulePropertyDetails",
    "ModuleType",
]
