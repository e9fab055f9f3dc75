"""Custom exceptions for the DOCX to UDF converter."""

from typing import Optional


class ConverterError(Exception):
    """Base exception for converter errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MalformedPackageError(ConverterError):
    """Raised when the package or its body XML cannot be read."""

    pass


class UnsupportedDocumentError(ConverterError):
    """Raised for any other failure while building the document model."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, str(cause) if cause is not None else None)
        self.cause = cause
