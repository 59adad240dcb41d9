"""Application layer for checkstyle-meta.

This layer contains the batch generation use case and the ports (interfaces)
it depends on.
"""

from .models import (
    GenerateMetadataRequest,
    GenerationStatus,
    GenerationSummary,
    ModuleGenerationResult,
)

__all__ = [
    "GenerateMetadataRequest",
    "GenerationStatus",
    "GenerationSummary",
    "ModuleGenerationResult",
]
