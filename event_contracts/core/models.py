from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional
import uuid

from event_contracts.contracts.services import ServiceName


SCHEMA_VERSION = "1.0"


def new_event_id() -> str:
    return str(uuid.uuid4())


def new_correlation_id() -> str:
    return str(uuid.uuid4())


class EventPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"
    # System alerts and service errors.
    CRITICAL = "critical"


@dataclass(frozen=True)
class EventMetadata:
    correlation_id: str
    source_service: ServiceName
    version: str = SCHEMA_VERSION
    priority: EventPriority = EventPriority.NORMAL


@dataclass(frozen=True)
class EventEnvelope:
    """Common shape of every published event. `data` is opaque to this package."""

    event_id: str
    timestamp: datetime
    event_type: str
    metadata: EventMetadata
    data: Mapping[str, Any] = field(default_factory=dict)


def new_envelope(
    event_type: str,
    data: Mapping[str, Any],
    *,
    source_service: ServiceName,
    correlation_id: Optional[str] = None,
    priority: EventPriority = EventPriority.NORMAL,
    timestamp: Optional[datetime] = None,
) -> EventEnvelope:
    ts = timestamp or datetime.now(timezone.utc)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return EventEnvelope(
        event_id=new_event_id(),
        timestamp=ts,
        event_type=str(getattr(event_type, "value", event_type)),
        metadata=EventMetadata(
            correlation_id=correlation_id or new_correlation_id(),
            source_service=ServiceName(source_service),
            priority=EventPriority(priority),
        ),
        data=data,
    )
