"""
Parcel status enum for shipment lifecycle tracking.

The string values are the tokens persisted in the ``parcel.status`` column.
They are stored lowercase ("registered", "sent", "delivered"); any other
casing, such as "Registered", is not a valid stored status.
"""

from enum import Enum
from typing import Optional


class ParcelStatus(str, Enum):
    """
    Parcel lifecycle status.

    Status transitions:
        REGISTERED -> SENT (handed over for shipping)
        SENT -> DELIVERED (received by the client)

    Invalid transitions:
        REGISTERED -> DELIVERED (must be sent first)
        SENT -> REGISTERED (no rollback)
        DELIVERED -> * (terminal)
    """

    REGISTERED = "registered"  # Accepted, not yet shipped
    SENT = "sent"  # In transit
    DELIVERED = "delivered"  # Received

    @property
    def is_terminal(self) -> bool:
        return self is ParcelStatus.DELIVERED

    def next_status(self) -> Optional["ParcelStatus"]:
        """Return the status that follows this one, or None if terminal."""
        return _NEXT_STATUS.get(self)


_NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}
