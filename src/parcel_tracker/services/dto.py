"""Data Transfer Objects for service layer.

Records cross the store boundary by value: callers receive a ``Parcel``
copy, never the ORM row, so two parcels compare equal exactly when every
field matches.
"""

from dataclasses import dataclass

from ..models.parcel_status import ParcelStatus


@dataclass
class Parcel:
    """A tracked parcel as seen by callers of the store.

    Attributes:
        client: Identifier of the owning client
        status: Lifecycle status (a raw status token is coerced)
        address: Delivery address
        created_at: UTC creation timestamp, e.g. "2024-03-01T12:30:00Z"
        number: Store-assigned parcel number; 0 until the parcel is added

    Raises:
        ValueError: If status is not one of the ParcelStatus values

    Examples:
        >>> Parcel(client=1000, status="registered", address="test",
        ...        created_at="2024-03-01T12:30:00Z").status
        <ParcelStatus.REGISTERED: 'registered'>
    """

    client: int
    status: ParcelStatus
    address: str
    created_at: str
    number: int = 0

    def __post_init__(self) -> None:
        """Coerce status to the enum."""
        self.status = ParcelStatus(self.status)
