"""Infrastructure layer for checkstyle-meta.

This layer contains adapters for the filesystem, console output and the
module catalog. It implements the ports defined in the application layer.
"""

__all__ = []
