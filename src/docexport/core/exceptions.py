"""Custom exceptions for document export."""

from typing import Optional, Dict, Any


class DocExportError(Exception):
    """Base exception for all export errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class SerializationError(DocExportError):
    """Raised when the serialized text cannot be encoded to bytes."""
    pass


class InvalidFormatError(DocExportError):
    """Raised when an output format name is not recognized."""
    pass
