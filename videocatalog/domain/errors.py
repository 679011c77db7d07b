# videocatalog/domain/errors.py
from __future__ import annotations

from typing import Optional
from uuid import UUID


class CatalogError(Exception):
    """Base class for errors raised by the catalog domain and its adapters."""


class RecordValidationError(CatalogError, ValueError):
    """
    A record broke one of its field rules. `message` is returned to API clients.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError, LookupError):
    """Requested record is absent or soft-deleted."""

    def __init__(self, entity: str, record_id: Optional[UUID | str] = None) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found")


class PersistenceError(CatalogError):
    """Storage failed for a reason other than not-found (constraint, connection...)."""
