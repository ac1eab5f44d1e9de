"""
Exception hierarchy for the showcase catalogue.

    ShowcaseError (base)
        ├── PersistenceError            - the store failed or is unreachable
        │     └── ConcurrencyConflictError  - a row changed or vanished under a write
        └── UnknownRelationshipError    - an eager-load path names no relationship

Managers turn ConcurrencyConflictError into an Error status on update; every
other PersistenceError propagates to the caller.
"""

from typing import Any, Dict, Optional


class ShowcaseError(Exception):
    """Base exception for all showcase errors.

    Attributes:
        message: Human-readable error description.
        details: Extra context for logs and API responses.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class PersistenceError(ShowcaseError):
    """Raised when a query or commit against the store fails."""


class ConcurrencyConflictError(PersistenceError):
    """Raised when a commit touches a row that another writer changed or removed."""


class UnknownRelationshipError(ShowcaseError):
    """Raised when an ``include`` path does not name a mapped relationship."""

    def __init__(self, model_name: str, path: str) -> None:
        super().__init__(
            f"{model_name} has no relationship path '{path}'",
            details={"model": model_name, "path": path},
        )
        self.model_name = model_name
        self.path = path
