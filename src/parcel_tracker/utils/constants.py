"""
Constants for the Parcel Tracker application.

This module defines system-wide constants including:
- Application metadata
- Database file naming
- Timestamp format for parcel creation times
"""

# ============================================================================
# Application Metadata
# ============================================================================

APP_VERSION = "0.1.0"

# ============================================================================
# Database
# ============================================================================

DATABASE_FILENAME = "tracker.db"

# Environment variables
ENV_VAR_ENVIRONMENT = "PARCEL_TRACKER_ENV"
ENV_VAR_DATABASE_URL = "PARCEL_TRACKER_DATABASE_URL"

# ============================================================================
# Parcels
# ============================================================================

# RFC 3339 in UTC, e.g. "2024-03-01T12:30:00Z". Sorts lexicographically.
CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

MAX_STATUS_LENGTH = 20
MAX_CREATED_AT_LENGTH = 32
