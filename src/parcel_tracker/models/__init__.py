"""
Database models package.

This package contains the SQLAlchemy ORM models for the application.
"""

from .base import Base, BaseModel
from .parcel import ParcelRecord
from .parcel_status import ParcelStatus

__all__ = [
    "Base",
    "BaseModel",
    "ParcelRecord",
    "ParcelStatus",
]
