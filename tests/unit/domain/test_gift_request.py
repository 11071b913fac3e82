"""Unit tests for the GiftRequest aggregate."""

from __future__ import annotations

import pytest

from giftflow.domain import (
    GIFT_REQUEST_APPROVED,
    GIFT_REQUEST_REJECTED,
    GIFT_REQUEST_SUBMITTED,
    GiftRequest,
    GiftRequestStatus,
)
from giftflow.kernel.errors import ConflictError, ValidationError
from giftflow.kernel.types import EntityId
from giftflow.testing.fakes import FakeClock


def _submit(**overrides: str) -> GiftRequest:
    fields = {
        "requester_name": "Alice Martin",
        "requester_email": "alice@example.com",
        "requester_phone": "+33600000000",
        "requested_gift": "Teddy bear",
        "motivation": "For my daughter",
    }
    fields.update(overrides)
    return GiftRequest.submit(EntityId("req-1"), clock=FakeClock(), **fields)


class TestSubmit:
    def test_records_submitted(self) -> None:
        request = _submit()
        assert request.status is GiftRequestStatus.PENDING
        assert request.is_pending()
        (event,) = request.pull_domain_events()
        assert event.event_type == GIFT_REQUEST_SUBMITTED
        assert event.payload["requester_email"] == "alice@example.com"
        assert event.payload["requested_gift"] == "Teddy bear"
        assert event.occurred_at == FakeClock().now()

    def test_collects_field_errors(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _submit(requester_name=" ", motivation="")
        assert exc_info.value.fields == {"requester_name", "motivation"}

    def test_rejects_invalid_email(self) -> None:
        with pytest.raises(ValidationError):
            _submit(requester_email="not-an-email")


class TestDecision:
    def test_approve(self) -> None:
        request = _submit()
        request.pull_domain_events()
        request.approve()
        assert request.status is GiftRequestStatus.APPROVED
        (event,) = request.pull_domain_events()
        assert event.event_type == GIFT_REQUEST_APPROVED

    def test_reject(self) -> None:
        request = _submit()
        request.reject()
        assert request.status is GiftRequestStatus.REJECTED
        assert request.pull_domain_events()[-1].event_type == GIFT_REQUEST_REJECTED

    def test_second_decision_conflicts(self) -> None:
        request = _submit()
        request.approve()
        with pytest.raises(ConflictError) as exc_info:
            request.reject()
        assert exc_info.value.current_state == "approved"
        assert request.status is GiftRequestStatus.APPROVED
        assert len(request.pull_domain_events()) == 2
