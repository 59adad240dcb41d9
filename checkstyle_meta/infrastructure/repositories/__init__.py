"""Repositories for module descriptors."""

from .module_catalog_repository import ModuleCatalogRepository

__all__ = ["ModuleCatalogRepository"]
