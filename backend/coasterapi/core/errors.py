from __future__ import annotations


class CoasterStoreError(Exception):
    """Base class for errors raised by the coaster service."""


class CoasterNotFoundError(CoasterStoreError, KeyError):
    def __init__(self, coaster_id: str | None = None) -> None:
        self.coaster_id = coaster_id
        message = "store is empty" if coaster_id is None else f"coaster not found: {coaster_id}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class ConfigurationError(CoasterStoreError):
    pass
