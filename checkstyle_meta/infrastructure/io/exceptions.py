class MetadataGenerationError(RuntimeError):
    """Base error for metadata generation, tagged with the failing module."""

    def __init__(self, message: str, *, qualified_name: str | None = None) -> None:
        if qualified_name:
            message = f"{qualified_name}: {message}"
        super().__init__(message)
        self.qualified_name = qualified_name


class MetadataConfigurationError(MetadataGenerationError):
    pass


class MetadataWriteError(MetadataGenerationError):
    pass


class InvalidMetadataTreeError(MetadataGenerationError):
    pass


class MetadataReadError(MetadataGenerationError):
    pass


class CatalogLoadError(MetadataGenerationError):
    pass
