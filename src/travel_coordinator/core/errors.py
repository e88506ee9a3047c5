"""Custom exceptions for the travel coordinator."""

class TravelCoordinatorError(Exception):
    """Base error for travel coordinator failures."""


class ValidationError(TravelCoordinatorError):
    """Raised when offers or inputs are invalid or incomplete."""


class ProviderError(TravelCoordinatorError):
    """Raised when a search provider payload cannot be read."""
