"""Envelope reference checks.

Only the envelope and its identifiers are checked (event type, source service, stream
ownership). The `data` payload is opaque here and never inspected.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Optional

from event_contracts.core.models import EventEnvelope, EventPriority
from event_contracts.events import EVENT_TYPES_BY_STREAM, INTERNAL_EVENTS, event_type_member

from .catalog import coerce
from .services import ServiceName
from .streams import EventStream, ServiceStreamGroup, get_streams_by_service


ENVELOPE_REQUIRED_KEYS = {"eventId", "timestamp", "eventType", "data", "metadata"}

METADATA_REQUIRED_KEYS = {"correlationId", "sourceService", "version"}
METADATA_OPTIONAL_KEYS = {
    "priority",
    "originalRequestSource",
    "retryCount",
    "entityType",
    "entityId",
    # user-service events
    "requiresNotification",
    "notificationTemplates",
}

PRIORITIES = {p.value for p in EventPriority}


def _require_exact_keys(
    obj: dict[str, Any], *, part: str, required: set[str], optional: set[str] | None = None
) -> None:
    optional = optional or set()
    keys = set(obj.keys())
    missing = required - keys
    extra = keys - required - optional
    if missing:
        raise ValueError(f"{part}: missing keys: {sorted(missing)}")
    if extra:
        raise ValueError(f"{part}: extra keys not allowed: {sorted(extra)}")


def _require_str(d: dict[str, Any], k: str) -> str:
    v = d.get(k)
    if not isinstance(v, str) or not v.strip():
        raise ValueError(f"{k} must be non-empty string")
    return v


def _parse_iso8601(s: str) -> datetime:
    try:
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"invalid ISO8601 timestamp: {s}") from e
    if dt.tzinfo is None:
        raise ValueError("timestamp must include timezone")
    return dt


def _check_references(event_type: str, source_service: object, stream: Optional[object]) -> None:
    service = coerce(ServiceName, source_service)
    if service is None:
        raise ValueError(f"unknown source service: {source_service!r}")

    member = event_type_member(event_type)
    if member in INTERNAL_EVENTS:
        raise ValueError(f"{event_type} is an in-process event and is never published")

    if stream is None:
        return

    s = coerce(EventStream, stream)
    if s is None:
        raise ValueError(f"unknown stream: {stream!r}")

    system_streams = get_streams_by_service(ServiceStreamGroup.SYSTEM)
    if s not in system_streams and s not in get_streams_by_service(service):
        raise ValueError(f"{service.value} does not publish to {s.value}")

    catalog = EVENT_TYPES_BY_STREAM.get(s)
    if catalog is not None and coerce(catalog, event_type) is None:
        raise ValueError(f"event type {event_type!r} is not a {catalog.__name__} on {s.value}")


def check_envelope_references(envelope: EventEnvelope, *, stream: Optional[object] = None) -> None:
    """Raise ValueError if `envelope` names an unknown service or stream, or an in-process event type.

    With `stream`, also require that the source service owns the stream (system streams are
    shared by everyone) and that the event type belongs to the stream's catalog. Event types
    are free-form without `stream`, and on streams that have no catalog (payment, transport,
    audit).
    """
    if not envelope.event_id:
        raise ValueError("event_id must be non-empty string")
    if not envelope.event_type:
        raise ValueError("event_type must be non-empty string")
    if envelope.timestamp.tzinfo is None:
        raise ValueError("timestamp must include timezone")
    _check_references(envelope.event_type, envelope.metadata.source_service, stream)


def validate_envelope_dict(event: dict[str, Any], *, stream: Optional[object] = None) -> None:
    """Strict check of a wire-shaped (camelCase) envelope.

    - no extra envelope keys; metadata allows the documented optional keys
    - `data` must be an object, its contents are not checked
    """
    _require_exact_keys(event, part="envelope", required=ENVELOPE_REQUIRED_KEYS)
    _require_str(event, "eventId")
    _parse_iso8601(_require_str(event, "timestamp"))
    event_type = _require_str(event, "eventType")

    if not isinstance(event.get("data"), dict):
        raise ValueError("data must be object")

    metadata = event.get("metadata")
    if not isinstance(metadata, dict):
        raise ValueError("metadata must be object")
    _require_exact_keys(metadata, part="metadata", required=METADATA_REQUIRED_KEYS, optional=METADATA_OPTIONAL_KEYS)
    _require_str(metadata, "correlationId")
    source_service = _require_str(metadata, "sourceService")
    _require_str(metadata, "version")
    if "priority" in metadata and metadata["priority"] not in PRIORITIES:
        raise ValueError(f"priority must be one of {sorted(PRIORITIES)}")
    retry_count = metadata.get("retryCount", 0)
    if isinstance(retry_count, bool) or not isinstance(retry_count, int):
        raise ValueError("retryCount must be int")
    if "requiresNotification" in metadata and not isinstance(metadata["requiresNotification"], bool):
        raise ValueError("requiresNotification must be bool")
    templates = metadata.get("notificationTemplates", [])
    if not isinstance(templates, list) or not all(isinstance(t, str) and t for t in templates):
        raise ValueError("notificationTemplates must be a list of non-empty strings")

    _check_references(event_type, source_service, stream)


def validate_many(events: Iterable[dict[str, Any]], *, stream: Optional[object] = None) -> None:
    for ev in events:
        validate_envelope_dict(ev, stream=stream)
