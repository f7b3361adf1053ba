"""
Parcel Store - persistence of parcel records.

ParcelStore is bound to a SQLAlchemy session owned by the caller. It never
commits, closes or opens sessions itself: each operation issues a single
statement inside whatever transaction the caller has open, and the caller
decides when to commit (see ``database.session_scope``).

Policies:
- get() raises ParcelNotFound for an unknown number.
- set_address() and set_status() raise ParcelNotFound when no row matched.
- delete() of an unknown number succeeds; a later get() raises ParcelNotFound.
- get_by_client() returns parcels in insertion order (ascending number).
- No status transition or address-change rules are checked here; those
  belong to parcel_service.

Example:
    >>> with session_scope() as session:
    ...     store = ParcelStore(session)
    ...     number = store.add(parcel)
    ...     store.set_status(number, ParcelStatus.SENT)
"""

import logging
from typing import List, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.parcel import ParcelRecord
from ..models.parcel_status import ParcelStatus
from .dto import Parcel
from .exceptions import DatabaseError, ParcelDataIntegrityError, ParcelNotFound
from .logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


class ParcelStore:
    """Data-access object for parcel records."""

    def __init__(self, session: Session):
        """
        Args:
            session: Open SQLAlchemy session. Its lifecycle stays with the caller.
        """
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def add(self, parcel: Parcel) -> int:
        """
        Insert a new parcel and return its store-assigned number.

        ``parcel.number`` is ignored.

        Raises:
            DatabaseError: If the insert fails
        """
        record = ParcelRecord(
            client=parcel.client,
            status=ParcelStatus(parcel.status).value,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        try:
            self._session.add(record)
            self._session.flush()
        except SQLAlchemyError as e:
            self._fail("add", e, client=parcel.client)
            raise DatabaseError(f"Failed to add parcel: {e}", original_error=e)

        log_operation(
            logger, "add", "success", level=logging.DEBUG, number=record.number, client=record.client
        )
        return record.number

    def get(self, number: int) -> Parcel:
        """
        Get a parcel by number.

        Raises:
            ParcelNotFound: If no parcel has this number
            ParcelDataIntegrityError: If the stored status is not a known status
            DatabaseError: If the query fails
        """
        try:
            record = (
                self._session.query(ParcelRecord)
                .filter(ParcelRecord.number == number)
                .populate_existing()
                .first()
            )
        except SQLAlchemyError as e:
            self._fail("get", e, number=number)
            raise DatabaseError(f"Failed to get parcel {number}: {e}", original_error=e)

        if record is None:
            log_operation(logger, "get", "not_found", level=logging.DEBUG, number=number)
            raise ParcelNotFound(number)

        return self._to_parcel(record)

    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Get every parcel owned by ``client``, oldest first.

        Returns:
            List of parcels, empty when the client has none

        Raises:
            ParcelDataIntegrityError: If a stored status is not a known status
            DatabaseError: If the query fails
        """
        try:
            records = (
                self._session.query(ParcelRecord)
                .filter(ParcelRecord.client == client)
                .order_by(ParcelRecord.number)
                .populate_existing()
                .all()
            )
        except SQLAlchemyError as e:
            self._fail("get_by_client", e, client=client)
            raise DatabaseError(f"Failed to get parcels of client {client}: {e}", original_error=e)

        log_operation(
            logger, "get_by_client", "success", level=logging.DEBUG, client=client, count=len(records)
        )
        return [self._to_parcel(record) for record in records]

    def set_address(self, number: int, address: str) -> None:
        """
        Overwrite the address of a parcel.

        Raises:
            ParcelNotFound: If no parcel has this number
            DatabaseError: If the update fails
        """
        self._update("set_address", number, {ParcelRecord.address: address})

    def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """
        Overwrite the status of a parcel.

        Any status is accepted; transition order is the caller's concern.

        Raises:
            ValueError: If status is not a ParcelStatus value
            ParcelNotFound: If no parcel has this number
            DatabaseError: If the update fails
        """
        status = ParcelStatus(status)
        self._update("set_status", number, {ParcelRecord.status: status.value})

    def delete(self, number: int) -> None:
        """
        Delete a parcel. Deleting an unknown number is not an error.

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            deleted = (
                self._session.query(ParcelRecord).filter(ParcelRecord.number == number).delete()
            )
        except SQLAlchemyError as e:
            self._fail("delete", e, number=number)
            raise DatabaseError(f"Failed to delete parcel {number}: {e}", original_error=e)

        log_operation(
            logger,
            "delete",
            "success" if deleted else "no_rows",
            level=logging.DEBUG,
            number=number,
        )

    def _update(self, operation: str, number: int, values: dict) -> None:
        try:
            updated = (
                self._session.query(ParcelRecord)
                .filter(ParcelRecord.number == number)
                .update(values)
            )
        except SQLAlchemyError as e:
            self._fail(operation, e, number=number)
            raise DatabaseError(f"Failed to update parcel {number}: {e}", original_error=e)

        if updated == 0:
            log_operation(logger, operation, "not_found", level=logging.DEBUG, number=number)
            raise ParcelNotFound(number)

        log_operation(logger, operation, "success", level=logging.DEBUG, number=number)

    @staticmethod
    def _to_parcel(record: ParcelRecord) -> Parcel:
        try:
            return Parcel(**record.to_dict())
        except ValueError:
            raise ParcelDataIntegrityError(record.number, record.status) from None

    @staticmethod
    def _fail(operation: str, error: Exception, **context) -> None:
        log_operation(logger, operation, "error", level=logging.WARNING, error=str(error), **context)
