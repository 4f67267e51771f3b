"""Persistence errors raised past the gateway boundary."""


class StoreError(Exception):
    """A query against the relational store failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


class StoreUnavailableError(StoreError):
    """The store could not be reached at all."""
