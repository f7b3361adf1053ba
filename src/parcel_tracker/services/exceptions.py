"""Service layer exception classes for Parcel Tracker.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── ParcelNotFound
    ├── DatabaseError
    │   └── ParcelDataIntegrityError
    ├── ValidationError
    ├── InvalidStatusTransition
    └── ParcelNotRegistered
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class ParcelNotFound(ServiceError):
    """Raised when a parcel cannot be found by number.

    Args:
        number: The parcel number that was not found

    Example:
        >>> raise ParcelNotFound(123)
        ParcelNotFound: Parcel with number 123 not found
    """

    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Parcel with number {number} not found")


class DatabaseError(ServiceError):
    """Raised when a database operation fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")


class ParcelDataIntegrityError(DatabaseError):
    """Raised when a stored parcel row holds a status outside the known set.

    Args:
        number: Number of the offending parcel
        value: The stored status value
    """

    def __init__(self, number: int, value: str):
        self.number = number
        self.value = value
        super().__init__(f"Parcel {number} has invalid stored status {value!r}")


class ValidationError(ServiceError):
    """Raised when data validation fails."""

    def __init__(self, errors: list):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")


class InvalidStatusTransition(ServiceError):
    """Raised when a parcel cannot move to a further status.

    Example:
        >>> raise InvalidStatusTransition(7, "delivered")
        InvalidStatusTransition: Parcel 7 is already delivered and cannot advance
    """

    def __init__(self, number: int, status: str):
        self.number = number
        self.status = status
        super().__init__(f"Parcel {number} is already {status} and cannot advance")


class ParcelNotRegistered(ServiceError):
    """Raised when an action requires the parcel to still be registered.

    Args:
        number: Parcel number
        status: Current status of the parcel
        action: Short description of the refused action (e.g. "change address")
    """

    def __init__(self, number: int, status: str, action: str):
        self.number = number
        self.status = status
        self.action = action
        super().__init__(
            f"Cannot {action} for parcel {number}: status is '{status}', "
            "only registered parcels allow it"
        )
