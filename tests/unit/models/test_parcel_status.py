"""
Tests for ParcelStatus enum and the Parcel value object.

Tests cover:
- Stored status tokens
- Forward-only transitions and the terminal status
- Status coercion and field-wise equality of Parcel
"""

import pytest

from parcel_tracker.models.parcel_status import ParcelStatus
from parcel_tracker.services.dto import Parcel


class TestParcelStatus:
    """Tests for ParcelStatus."""

    def test_status_tokens(self):
        assert [status.value for status in ParcelStatus] == ["registered", "sent", "delivered"]

    def test_status_is_string(self):
        assert ParcelStatus.SENT == "sent"

    def test_next_status(self):
        assert ParcelStatus.REGISTERED.next_status() is ParcelStatus.SENT
        assert ParcelStatus.SENT.next_status() is ParcelStatus.DELIVERED
        assert ParcelStatus.DELIVERED.next_status() is None

    def test_only_delivered_is_terminal(self):
        assert [status for status in ParcelStatus if status.is_terminal] == [
            ParcelStatus.DELIVERED
        ]

    def test_unknown_token_rejected(self):
        with pytest.raises(ValueError):
            ParcelStatus("Lost")

    @pytest.mark.parametrize("token", ["Registered", "Sent", "Delivered"])
    def test_capitalized_tokens_rejected(self, token):
        with pytest.raises(ValueError):
            ParcelStatus(token)


class TestParcel:
    """Tests for the Parcel dataclass."""

    def test_status_token_coerced(self):
        parcel = Parcel(client=1, status="delivered", address="a", created_at="2024-01-01T00:00:00Z")

        assert parcel.status is ParcelStatus.DELIVERED

    def test_invalid_status_rejected(self):
        with pytest.raises(ValueError):
            Parcel(client=1, status="returned", address="a", created_at="2024-01-01T00:00:00Z")

    def test_number_defaults_to_unassigned(self):
        parcel = Parcel(client=1, status="sent", address="a", created_at="2024-01-01T00:00:00Z")

        assert parcel.number == 0

    def test_equality_is_field_wise(self):
        first = Parcel(1, ParcelStatus.SENT, "a", "2024-01-01T00:00:00Z", 5)
        second = Parcel(1, "sent", "a", "2024-01-01T00:00:00Z", 5)

        assert first == second
        assert first is not second
        assert first != Parcel(1, ParcelStatus.SENT, "b", "2024-01-01T00:00:00Z", 5)
