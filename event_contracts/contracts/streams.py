"""Redis stream names (phase 1: service-based streams).

These names are the single source of truth for every publisher and consumer.
NAMING: `{service-name}-events`, kebab-case.
"""
from __future__ import annotations

from enum import Enum, unique
from types import MappingProxyType
from typing import Mapping, Tuple

from .catalog import catalog_mapping, coerce
from .errors import UnknownIdentifierError
from .services import ServiceName


@unique
class EventStream(str, Enum):
    # Published by user-service: registration, authentication, agent invitations.
    USER_SERVICE_EVENTS = "user-service-events"
    # Published by hrm-service: hospital profiles, resources, beds, admissions.
    HRM_SERVICE_EVENTS = "hrm-service-events"
    # Published by file-notification-service: email/SMS delivery, file uploads.
    NOTIFICATION_SERVICE_EVENTS = "notification-service-events"
    PAYMENT_SERVICE_EVENTS = "payment-service-events"
    # Ambulance dispatch, route optimization, transport status.
    TRANSPORT_SERVICE_EVENTS = "transport-service-events"
    # Cross-service verification workflow, published mostly by user-service.
    BUSINESS_VERIFICATION_EVENTS = "business-verification-events"

    # System-level streams, published by all services.
    SERVICE_HEALTH_EVENTS = "service-health-events"
    AUDIT_EVENTS = "audit-events"


@unique
class DomainStream(str, Enum):
    """Phase 2 domain-based streams.

    Migration target only: events will be routed to both stream kinds during the
    switch. Until then `is_valid_stream` rejects these names.
    """

    USER_DOMAIN_EVENTS = "user-domain-events"
    HEALTHCARE_DOMAIN_EVENTS = "healthcare-domain-events"
    FINANCIAL_DOMAIN_EVENTS = "financial-domain-events"
    COMMUNICATION_DOMAIN_EVENTS = "communication-domain-events"
    LOGISTICS_DOMAIN_EVENTS = "logistics-domain-events"


@unique
class ServiceStreamGroup(str, Enum):
    """Publishing groups of the ownership table; the value is the symbolic key."""

    USER_SERVICE = "USER_SERVICE"
    HRM_SERVICE = "HRM_SERVICE"
    FILE_NOTIFICATION_SERVICE = "FILE_NOTIFICATION_SERVICE"
    PAYMENT_SERVICE = "PAYMENT_SERVICE"
    TRANSPORT_SERVICE = "TRANSPORT_SERVICE"
    SYSTEM = "SYSTEM"

    @property
    def service(self) -> ServiceName | None:
        """The owning service, or None for `SYSTEM` (shared by all services)."""
        return ServiceName.__members__.get(self.name)


EVENT_STREAMS = catalog_mapping(EventStream)
DOMAIN_STREAMS = catalog_mapping(DomainStream)

# Which streams each group publishes to.
STREAMS_BY_SERVICE: Mapping[ServiceStreamGroup, Tuple[EventStream, ...]] = MappingProxyType(
    {
        ServiceStreamGroup.USER_SERVICE: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.BUSINESS_VERIFICATION_EVENTS,
        ),
        ServiceStreamGroup.HRM_SERVICE: (EventStream.HRM_SERVICE_EVENTS,),
        ServiceStreamGroup.FILE_NOTIFICATION_SERVICE: (EventStream.NOTIFICATION_SERVICE_EVENTS,),
        ServiceStreamGroup.PAYMENT_SERVICE: (EventStream.PAYMENT_SERVICE_EVENTS,),
        ServiceStreamGroup.TRANSPORT_SERVICE: (EventStream.TRANSPORT_SERVICE_EVENTS,),
        ServiceStreamGroup.SYSTEM: (
            EventStream.SERVICE_HEALTH_EVENTS,
            EventStream.AUDIT_EVENTS,
        ),
    }
)


def _resolve_stream_group(value: object) -> ServiceStreamGroup | None:
    group = coerce(ServiceStreamGroup, value)
    if group is not None:
        return group
    service = coerce(ServiceName, value)
    if service is None:
        return None
    return ServiceStreamGroup.__members__.get(service.name)


def get_streams_by_service(service_group: object, *, strict: bool = False) -> Tuple[EventStream, ...]:
    """Streams owned (published) by a service group.

    Accepts a `ServiceStreamGroup` or its symbolic key (`"USER_SERVICE"`), and also a
    `ServiceName` or its canonical value (`"user-service"`). A service that publishes
    nothing of its own (e.g. `gateway-service`) yields `()`.

    Unknown keys yield `()`; with `strict=True` they raise `UnknownIdentifierError`.
    """
    group = _resolve_stream_group(service_group)
    if group is None:
        if strict and coerce(ServiceName, service_group) is None:
            raise UnknownIdentifierError("service group", service_group)
        return ()
    return STREAMS_BY_SERVICE.get(group, ())


def is_valid_stream(candidate: object) -> bool:
    """True iff `candidate` is one of the canonical `EventStream` values.

    Producers/consumers call this before publishing or subscribing to catch typos.
    """
    return coerce(EventStream, candidate) is not None
