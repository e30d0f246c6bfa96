from __future__ import annotations

from datetime import datetime

import pytest

from event_contracts.contracts.services import ServiceName
from event_contracts.contracts.streams import EventStream
from event_contracts.contracts.validation import (
    check_envelope_references,
    validate_envelope_dict,
    validate_many,
)
from event_contracts.core.models import EventPriority, new_envelope
from event_contracts.events import HrmServiceEvent, SystemEvent, UserServiceEvent


def _wire(**overrides) -> dict:
    ev = {
        "eventId": "3f1c0f4e-3c43-4a57-8d1f-6f3b1b0c2a10",
        "timestamp": "2025-01-15T10:30:00Z",
        "eventType": "user.business.registered",
        "data": {"businessId": "b-1", "anything": ["is", "opaque"]},
        "metadata": {
            "correlationId": "c-1",
            "sourceService": "user-service",
            "version": "1.0",
            "priority": "normal",
        },
    }
    ev.update(overrides)
    return ev


def test_valid_envelope_passes() -> None:
    validate_envelope_dict(_wire())
    validate_envelope_dict(_wire(), stream="user-service-events")
    validate_envelope_dict(_wire(), stream=EventStream.BUSINESS_VERIFICATION_EVENTS)


def test_data_contents_are_not_inspected() -> None:
    validate_envelope_dict(_wire(data={}))
    validate_envelope_dict(_wire(data={"nested": {"x": None}}))


@pytest.mark.parametrize(
    "overrides",
    [
        {"eventId": ""},
        {"timestamp": "2025-01-15T10:30:00"},
        {"timestamp": "yesterday"},
        {"eventType": "  "},
        {"data": []},
        {"metadata": None},
        {"extra": 1},
    ],
)
def test_invalid_envelopes_raise(overrides: dict) -> None:
    with pytest.raises(ValueError):
        validate_envelope_dict(_wire(**overrides))


def test_metadata_rules() -> None:
    meta = dict(_wire()["metadata"])
    meta["retryCount"] = 2
    meta["originalRequestSource"] = "hrm-service"
    validate_envelope_dict(_wire(metadata=meta))

    with pytest.raises(ValueError, match="priority"):
        validate_envelope_dict(_wire(metadata={**meta, "priority": "extreme"}))
    with pytest.raises(ValueError, match="unknown source service"):
        validate_envelope_dict(_wire(metadata={**meta, "sourceService": "billing-service"}))
    with pytest.raises(ValueError, match="missing keys"):
        validate_envelope_dict(_wire(metadata={"correlationId": "c-1", "sourceService": "user-service"}))


def test_stream_ownership_is_enforced() -> None:
    with pytest.raises(ValueError, match="does not publish to hrm-service-events"):
        validate_envelope_dict(_wire(), stream="hrm-service-events")
    with pytest.raises(ValueError, match="unknown stream"):
        validate_envelope_dict(_wire(), stream="random-stream")


def test_system_streams_are_shared_by_all_services() -> None:
    ev = _wire(
        eventType=SystemEvent.SERVICE_HEARTBEAT.value,
        metadata={"correlationId": "c-2", "sourceService": "payment-service", "version": "1.0"},
    )
    validate_envelope_dict(ev, stream="service-health-events")


def test_event_type_must_match_stream_catalog() -> None:
    with pytest.raises(ValueError, match="not a UserServiceEvent"):
        validate_envelope_dict(_wire(eventType="hrm.bed.allocated"), stream="user-service-events")
    # payment stream has no catalog yet
    ev = _wire(
        eventType="payment.completed",
        metadata={"correlationId": "c-3", "sourceService": "payment-service", "version": "1.0"},
    )
    validate_envelope_dict(ev, stream="payment-service-events")


def test_internal_events_are_never_published() -> None:
    with pytest.raises(ValueError, match="in-process"):
        validate_envelope_dict(_wire(eventType=UserServiceEvent.BUSINESS_DOCUMENTS_SUBMITTED_INTERNAL.value))


def test_validate_many_stops_at_first_invalid() -> None:
    with pytest.raises(ValueError):
        validate_many([_wire(), _wire(eventId="")])


def test_check_envelope_references_on_model() -> None:
    env = new_envelope(
        HrmServiceEvent.BED_ALLOCATED,
        {"bedId": "b-7"},
        source_service=ServiceName.HRM_SERVICE,
        priority=EventPriority.HIGH,
    )
    check_envelope_references(env, stream=EventStream.HRM_SERVICE_EVENTS)
    with pytest.raises(ValueError):
        check_envelope_references(env, stream=EventStream.PAYMENT_SERVICE_EVENTS)


def test_new_envelope_defaults() -> None:
    env = new_envelope("service.started", {}, source_service="gateway-service", correlation_id="c-9")
    assert env.event_type == "service.started"
    assert env.metadata.source_service is ServiceName.GATEWAY_SERVICE
    assert env.metadata.correlation_id == "c-9"
    assert env.metadata.version == "1.0"
    assert env.metadata.priority is EventPriority.NORMAL
    assert env.timestamp.tzinfo is not None
    assert env.event_id

    naive = new_envelope("service.started", {}, source_service="gateway-service", timestamp=datetime(2025, 1, 1))
    assert naive.timestamp.tzinfo is not None

    with pytest.raises(ValueError):
        new_envelope("service.started", {}, source_service="billing-service")


def test_user_service_notification_metadata() -> None:
    meta = {
        "correlationId": "c-4",
        "sourceService": "user-service",
        "version": "1.0",
        "requiresNotification": True,
        "notificationTemplates": ["business-welcome", "verification-pending"],
    }
    validate_envelope_dict(_wire(metadata=meta), stream="user-service-events")

    with pytest.raises(ValueError, match="requiresNotification must be bool"):
        validate_envelope_dict(_wire(metadata={**meta, "requiresNotification": "yes"}))
    with pytest.raises(ValueError, match="notificationTemplates"):
        validate_envelope_dict(_wire(metadata={**meta, "notificationTemplates": "business-welcome"}))
    with pytest.raises(ValueError, match="notificationTemplates"):
        validate_envelope_dict(_wire(metadata={**meta, "notificationTemplates": [""]}))


def test_critical_priority_on_service_error() -> None:
    ev = _wire(
        eventType=SystemEvent.SERVICE_ERROR.value,
        metadata={"correlationId": "c-5", "sourceService": "hrm-service", "version": "1.0", "priority": "critical"},
    )
    validate_envelope_dict(ev, stream="service-health-events")
    assert EventPriority("critical") is EventPriority.CRITICAL


@pytest.mark.parametrize("retry_count", [True, False, "1", 1.5])
def test_retry_count_must_be_a_plain_int(retry_count: object) -> None:
    meta = {"correlationId": "c-6", "sourceService": "user-service", "version": "1.0", "retryCount": retry_count}
    with pytest.raises(ValueError, match="retryCount must be int"):
        validate_envelope_dict(_wire(metadata=meta))


def test_key_errors_name_the_failing_part() -> None:
    with pytest.raises(ValueError, match=r"^envelope: extra keys not allowed: \['extra'\]$"):
        validate_envelope_dict(_wire(extra=1))
    meta = {"correlationId": "c-7", "sourceService": "user-service", "version": "1.0", "traceId": "t-1"}
    with pytest.raises(ValueError, match=r"^metadata: extra keys not allowed: \['traceId'\]$"):
        validate_envelope_dict(_wire(metadata=meta))
    with pytest.raises(ValueError, match=r"^metadata: missing keys: \['version'\]$"):
        validate_envelope_dict(_wire(metadata={"correlationId": "c-7", "sourceService": "user-service"}))


def test_unknown_event_types_without_stream() -> None:
    # Free-form without a stream, but in-process names are still refused.
    validate_envelope_dict(_wire(eventType="user.something.new"))
    env = new_envelope("payment.completed", {}, source_service=ServiceName.PAYMENT_SERVICE)
    check_envelope_references(env)
    check_envelope_references(env, stream="payment-service-events")

    internal = new_envelope(
        UserServiceEvent.BUSINESS_VERIFICATION_APPROVED_INTERNAL, {}, source_service=ServiceName.USER_SERVICE
    )
    with pytest.raises(ValueError, match="in-process"):
        check_envelope_references(internal)
    # The same unknown type is refused once the stream has a catalog.
    with pytest.raises(ValueError, match="not a UserServiceEvent"):
        validate_envelope_dict(_wire(eventType="user.something.new"), stream="user-service-events")
