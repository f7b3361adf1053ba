"""Parcel Tracker - shipment tracking over a local relational store."""

from .models import ParcelStatus
from .services import Parcel, ParcelStore
from .utils.constants import APP_VERSION

__version__ = APP_VERSION

__all__ = ["Parcel", "ParcelStatus", "ParcelStore", "__version__"]
