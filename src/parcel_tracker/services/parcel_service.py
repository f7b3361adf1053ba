"""
Parcel Service - shipment workflow on top of ParcelStore.

ParcelStore persists whatever it is given; this service is the caller that
applies the shipment rules:
- New parcels always start as registered, stamped with the current UTC time
- Status only moves forward: registered -> sent -> delivered
- Address changes and deletion are allowed only while registered

All functions follow the session pattern: pass ``session`` to run inside the
caller's transaction, or omit it to run in a fresh ``session_scope()``.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..models.parcel_status import ParcelStatus
from ..utils.datetime_utils import format_created_at
from .database import session_scope
from .dto import Parcel
from .exceptions import InvalidStatusTransition, ParcelNotRegistered, ValidationError
from .logging_utils import get_service_logger, log_operation
from .parcel_store import ParcelStore

logger = get_service_logger(__name__)


def _validate_address(address: str) -> str:
    if address is None or not address.strip():
        raise ValidationError(["Address is required"])
    return address.strip()


# ============================================================================
# Registration and lookup
# ============================================================================


def register_parcel(client: int, address: str, session: Optional[Session] = None) -> Parcel:
    """Register a new parcel for a client.

    Args:
        client: Owning client identifier
        address: Delivery address (required, surrounding whitespace trimmed)
        session: Optional database session

    Returns:
        Parcel: The stored parcel, with its number assigned

    Raises:
        ValidationError: If the address is empty
        DatabaseError: If the insert fails

    Example:
        >>> parcel = register_parcel(1000, "Pushkina 10")
        >>> parcel.status
        <ParcelStatus.REGISTERED: 'registered'>
    """
    address = _validate_address(address)
    if session is not None:
        return _register_parcel_impl(client, address, session)
    with session_scope() as session:
        return _register_parcel_impl(client, address, session)


def _register_parcel_impl(client: int, address: str, session: Session) -> Parcel:
    parcel = Parcel(
        client=client,
        status=ParcelStatus.REGISTERED,
        address=address,
        created_at=format_created_at(),
    )
    parcel.number = ParcelStore(session).add(parcel)
    log_operation(logger, "register_parcel", "success", number=parcel.number, client=client)
    return parcel


def get_parcel(number: int, session: Optional[Session] = None) -> Parcel:
    """Get a parcel by number.

    Raises:
        ParcelNotFound: If no parcel has this number
    """
    if session is not None:
        return ParcelStore(session).get(number)
    with session_scope() as session:
        return ParcelStore(session).get(number)


def get_client_parcels(client: int, session: Optional[Session] = None) -> List[Parcel]:
    """Get all parcels of a client, oldest first."""
    if session is not None:
        return ParcelStore(session).get_by_client(client)
    with session_scope() as session:
        return ParcelStore(session).get_by_client(client)


# ============================================================================
# Workflow operations
# ============================================================================


def advance_status(number: int, session: Optional[Session] = None) -> ParcelStatus:
    """Move a parcel to its next status.

    Returns:
        ParcelStatus: The new status

    Raises:
        ParcelNotFound: If no parcel has this number
        InvalidStatusTransition: If the parcel is already delivered
    """
    if session is not None:
        return _advance_status_impl(number, session)
    with session_scope() as session:
        return _advance_status_impl(number, session)


def _advance_status_impl(number: int, session: Session) -> ParcelStatus:
    store = ParcelStore(session)
    parcel = store.get(number)

    next_status = parcel.status.next_status()
    if next_status is None:
        log_operation(logger, "advance_status", "terminal", number=number)
        raise InvalidStatusTransition(number, parcel.status.value)

    store.set_status(number, next_status)
    log_operation(
        logger,
        "advance_status",
        "success",
        number=number,
        old_status=parcel.status.value,
        new_status=next_status.value,
    )
    return next_status


def change_address(number: int, address: str, session: Optional[Session] = None) -> None:
    """Change the delivery address of a registered parcel.

    Raises:
        ValidationError: If the address is empty
        ParcelNotFound: If no parcel has this number
        ParcelNotRegistered: If the parcel has already been sent
    """
    address = _validate_address(address)
    if session is not None:
        return _change_address_impl(number, address, session)
    with session_scope() as session:
        return _change_address_impl(number, address, session)


def _change_address_impl(number: int, address: str, session: Session) -> None:
    store = ParcelStore(session)
    _require_registered(store, number, "change address")
    store.set_address(number, address)
    log_operation(logger, "change_address", "success", number=number)


def delete_parcel(number: int, session: Optional[Session] = None) -> None:
    """Delete a registered parcel.

    Raises:
        ParcelNotFound: If no parcel has this number
        ParcelNotRegistered: If the parcel has already been sent
    """
    if session is not None:
        return _delete_parcel_impl(number, session)
    with session_scope() as session:
        return _delete_parcel_impl(number, session)


def _delete_parcel_impl(number: int, session: Session) -> None:
    store = ParcelStore(session)
    _require_registered(store, number, "delete parcel")
    store.delete(number)
    log_operation(logger, "delete_parcel", "success", number=number)


def _require_registered(store: ParcelStore, number: int, action: str) -> Parcel:
    parcel = store.get(number)
    if parcel.status is not ParcelStatus.REGISTERED:
        log_operation(
            logger, action.replace(" ", "_"), "not_registered", number=number, status=parcel.status.value
        )
        raise ParcelNotRegistered(number, parcel.status.value, action)
    return parcel


# ============================================================================
# Presentation
# ============================================================================


def format_parcel(parcel: Parcel) -> str:
    """Format a parcel as a one-line summary.

    Example:
        >>> format_parcel(Parcel(1000, "sent", "Pushkina 10", "2024-03-01T12:30:00Z", 7))
        'Parcel #7: client 1000, address Pushkina 10, status sent, registered at 2024-03-01T12:30:00Z'
    """
    return (
        f"Parcel #{parcel.number}: client {parcel.client}, address {parcel.address}, "
        f"status {parcel.status.value}, registered at {parcel.created_at}"
    )
