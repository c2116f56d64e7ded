# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for all Pydantic models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to the wire format properly
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime, timezone
from uuid import UUID

import pytest
from pydantic import ValidationError

from core.models import Envelope, LogCreate, LogEntry, RetrievalCommand


# =============================================================================
# LogCreate Tests
# =============================================================================

class TestLogCreate:
    """Tests for LogCreate model."""

    def test_valid_log(self):
        """Test creating a valid LogCreate."""
        log = LogCreate(name="checkout", data={"cart": 3, "items": [{"sku": "a"}]})

        assert log.name == "checkout"
        assert log.data == {"cart": 3, "items": [{"sku": "a"}]}

    def test_empty_data_allowed(self):
        """Test that an empty object is a valid payload."""
        log = LogCreate(name="ping", data={})

        assert log.data == {}

    def test_empty_name_rejected(self):
        """Test that name must be non-empty."""
        with pytest.raises(ValidationError):
            LogCreate(name="", data={})

    def test_non_object_data_rejected(self):
        """Test that data must be an object."""
        with pytest.raises(ValidationError):
            LogCreate.model_validate({"name": "x", "data": "not an object"})

        with pytest.raises(ValidationError):
            LogCreate.model_validate({"name": "x", "data": [1, 2]})

    def test_name_not_coerced(self):
        """Test that a numeric name is not turned into a string."""
        with pytest.raises(ValidationError):
            LogCreate.model_validate({"name": 5, "data": {}})

    def test_unknown_fields_ignored(self):
        """Test that extra body fields are dropped."""
        log = LogCreate.model_validate({"name": "x", "data": {}, "id": "client-id"})

        assert not hasattr(log, "id")


# =============================================================================
# LogEntry Tests
# =============================================================================

class TestLogEntry:
    """Tests for LogEntry model."""

    def test_to_wire(self):
        """Test the /giveme serialization."""
        entry = LogEntry(
            id=UUID("550e8400-e29b-41d4-a716-446655440000"),
            name="checkout",
            data={"total": 42.5, "note": None},
            created=datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc),
        )

        assert entry.to_wire() == {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "checkout",
            "data": {"total": 42.5, "note": None},
            "created": "2024-01-15T10:30:00.123456+00:00",
        }

    def test_entry_is_immutable(self):
        """Test that stored entries cannot be modified."""
        entry = LogEntry(
            id=UUID(int=1),
            name="a",
            data={},
            created=datetime.now(timezone.utc),
        )

        with pytest.raises(ValidationError):
            entry.name = "b"


# =============================================================================
# RetrievalCommand Tests
# =============================================================================

class TestRetrievalCommand:
    """Tests for RetrievalCommand model."""

    def test_defaults(self):
        """Test that a bare command is a bounded, keyless read."""
        command = RetrievalCommand()

        assert command.key is None
        assert command.unbounded is False


# =============================================================================
# Envelope Tests
# =============================================================================

class TestEnvelope:
    """Tests for the response envelope."""

    def test_without_data(self):
        """Test that data is omitted when absent."""
        envelope = Envelope(status=401, message="Unauthorized")

        assert envelope.to_content() == {"status": 401, "message": "Unauthorized"}

    def test_with_empty_list(self):
        """Test that an empty read still carries data."""
        envelope = Envelope(status=200, message="OK", data=[])

        assert envelope.to_content() == {"status": 200, "message": "OK", "data": []}

    def test_nested_nulls_preserved(self):
        """Test that nulls inside the payload are not stripped."""
        envelope = Envelope(status=200, message="OK", data=[{"data": {"x": None}}])

        assert envelope.to_content()["data"] == [{"data": {"x": None}}]

    def test_status_range(self):
        """Test that status must be an HTTP status code."""
        with pytest.raises(ValidationError):
            Envelope(status=42, message="nope")
