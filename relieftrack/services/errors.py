"""Service-layer errors.

Each carries a message fit to show the user; the API layer maps them to HTTP
status codes in ``relieftrack.main``.
"""


class ReliefTrackError(Exception):
    """Base class for errors raised by the services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ReliefTrackError):
    """A required field is missing or out of range."""


class NotFoundError(ReliefTrackError):
    """A referenced row does not exist."""


class DuplicateHouseholdNumber(ReliefTrackError):
    """Another household already uses this household number."""

    def __init__(self, household_number: str):
        super().__init__(
            f"Household number '{household_number}' already exists. "
            "Please use a unique household number."
        )
        self.household_number = household_number


class InsufficientStock(ReliefTrackError):
    """A distribution or decrement asks for more than is on hand."""

    def __init__(self, item_name: str, requested: int, available: int):
        super().__init__(
            f"Insufficient inventory quantity for '{item_name}': "
            f"requested {requested}, available {available}"
        )
        self.item_name = item_name
        self.requested = requested
        self.available = available


class StoreError(ReliefTrackError):
    """The database rejected or failed an operation."""
