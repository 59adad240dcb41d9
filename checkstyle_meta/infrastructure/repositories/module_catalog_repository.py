from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from ..io.exceptions import CatalogLoadError
from .catalog_schema import ModuleCatalog

if TYPE_CHECKING:
    from pathlib import Path

    from checkstyle_meta.domain.entities import ModuleDetails


class ModuleCatalogRepository:
    """Loads module descriptors from a JSON catalog file."""

    def load(self, path: Path) -> list[ModuleDetails]:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(f"Cannot read catalog {path}: {exc}") from exc
        try:
            catalog = ModuleCatalog.model_validate_json(raw)
        except ValidationError as exc:
            raise CatalogLoadError(f"Invalid catalog {path}: {exc}") from exc
        return catalog.to_details()
