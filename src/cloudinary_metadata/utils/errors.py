"""
Unified error handling for Cloudinary metadata params.
"""


class MetadataError(Exception):
    """Base exception for metadata params errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message}. {self.suggestion}"
        return self.message


class InvalidParametersError(MetadataError, ValueError):
    """Request params failed validation in ``check()``."""

    pass


class ConfigurationError(MetadataError):
    """Configuration error."""

    pass
