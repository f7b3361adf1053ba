"""
Parcel model for shipment tracking.

This module contains:
- ParcelRecord: ORM mapping of the ``parcel`` table
"""

from sqlalchemy import Column, Integer, String, Text, Index

from .base import BaseModel
from ..utils.constants import MAX_CREATED_AT_LENGTH, MAX_STATUS_LENGTH


class ParcelRecord(BaseModel):
    """
    Stored row of a tracked parcel.

    Attributes:
        number: Store-assigned parcel number (autoincrement primary key)
        client: Identifier of the owning client (not a foreign key)
        status: Status token, one of the ParcelStatus values
        address: Free-form delivery address
        created_at: UTC creation timestamp, e.g. "2024-03-01T12:30:00Z"
    """

    __tablename__ = "parcel"

    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, nullable=False)
    status = Column(String(MAX_STATUS_LENGTH), nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(String(MAX_CREATED_AT_LENGTH), nullable=False)

    __table_args__ = (
        Index("idx_parcel_client", "client"),
        # Never reuse the number of a deleted parcel
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')"
