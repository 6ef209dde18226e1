"""Errors raised by the content provider and its storage backend."""
from __future__ import annotations


class ProviderError(Exception):
    """Base class for provider failures."""


class UnsupportedResource(ProviderError):
    """Raised when a URI matches none of the known pet patterns."""

    def __init__(self, uri: str, operation: str = "access"):
        super().__init__(f"Cannot {operation} URI {uri}")
        self.uri = uri
        self.operation = operation


class ValidationFailed(ProviderError):
    """Raised when a payload violates a pet field constraint."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class StorageError(ProviderError):
    """Raised when the storage backend fails a request."""


class StorageWriteFailed(StorageError):
    """Raised when the storage backend rejects or fails a mutation."""
