"""Services package - persistence and workflow layer for Parcel Tracker.

Architecture:
- ParcelStore: data-access object bound to a caller-owned session
- parcel_service: shipment workflow rules on top of the store
- Transactions: Managed via session_scope() context manager
- Exceptions: Consistent error handling via ServiceError hierarchy

Infrastructure:
- exceptions: Custom exception classes for service layer errors
- database: Session management and database utilities
- logging_utils: Structured operation logging
"""

from . import database, parcel_service
from .dto import Parcel
from .exceptions import (
    DatabaseError,
    InvalidStatusTransition,
    ParcelDataIntegrityError,
    ParcelNotFound,
    ParcelNotRegistered,
    ServiceError,
    ValidationError,
)
from .parcel_store import ParcelStore

__all__ = [
    "database",
    "parcel_service",
    "Parcel",
    "ParcelStore",
    "ServiceError",
    "ParcelNotFound",
    "DatabaseError",
    "ParcelDataIntegrityError",
    "ValidationError",
    "InvalidStatusTransition",
    "ParcelNotRegistered",
]
