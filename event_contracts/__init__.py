"""event-contracts: shared stream, consumer group and service names.

Publishers and consumers import identifiers from here instead of spelling them out, so a
rename propagates everywhere it is used. Nothing in this package performs I/O.
"""
from __future__ import annotations

from types import MappingProxyType

from .contracts.consumers import CONSUMER_GROUPS, ConsumerGroup, is_valid_consumer_group
from .contracts.errors import RoutingIntegrityError, UnknownIdentifierError
from .contracts.integrity import check_routing_integrity, routing_problems
from .contracts.routing import (
    CONSUMER_GROUP_STREAMS,
    SERVICE_CONSUMER_RECOMMENDATIONS,
    consumers_of_stream,
    get_consumer_group_streams,
    get_service_consumer_groups,
)
from .contracts.services import SERVICE_NAMES, ServiceName, is_valid_service
from .contracts.streams import (
    DOMAIN_STREAMS,
    EVENT_STREAMS,
    STREAMS_BY_SERVICE,
    DomainStream,
    EventStream,
    ServiceStreamGroup,
    get_streams_by_service,
    is_valid_stream,
)
from .contracts.subscriptions import (
    GroupSubscription,
    SubscriptionPlan,
    build_subscription_plan,
    streams_for_service,
)
from .contracts.validation import check_envelope_references, validate_envelope_dict
from .core.models import (
    EventEnvelope,
    EventMetadata,
    EventPriority,
    new_correlation_id,
    new_envelope,
    new_event_id,
)
from .events import (
    EVENT_TYPES_BY_STREAM,
    INTERNAL_EVENTS,
    REGISTRATION_EVENTS,
    HrmServiceEvent,
    NotificationServiceEvent,
    SystemEvent,
    UserServiceEvent,
    is_known_event_type,
)


__version__ = "1.0.0"

PACKAGE_INFO = MappingProxyType(
    {
        "name": "event-contracts",
        "version": __version__,
        "description": "Shared event schemas and stream definitions for the medical platform microservices",
        "phase": "Phase 1: Service-Based Streams",
    }
)

__all__ = [
    "CONSUMER_GROUPS",
    "CONSUMER_GROUP_STREAMS",
    "ConsumerGroup",
    "DOMAIN_STREAMS",
    "DomainStream",
    "EVENT_STREAMS",
    "EVENT_TYPES_BY_STREAM",
    "EventEnvelope",
    "EventMetadata",
    "EventPriority",
    "EventStream",
    "GroupSubscription",
    "HrmServiceEvent",
    "INTERNAL_EVENTS",
    "NotificationServiceEvent",
    "PACKAGE_INFO",
    "REGISTRATION_EVENTS",
    "RoutingIntegrityError",
    "SERVICE_CONSUMER_RECOMMENDATIONS",
    "SERVICE_NAMES",
    "STREAMS_BY_SERVICE",
    "ServiceName",
    "ServiceStreamGroup",
    "SubscriptionPlan",
    "SystemEvent",
    "UnknownIdentifierError",
    "UserServiceEvent",
    "build_subscription_plan",
    "check_envelope_references",
    "check_routing_integrity",
    "consumers_of_stream",
    "get_consumer_group_streams",
    "get_service_consumer_groups",
    "get_streams_by_service",
    "is_known_event_type",
    "is_valid_consumer_group",
    "is_valid_service",
    "is_valid_stream",
    "new_correlation_id",
    "new_envelope",
    "new_event_id",
    "routing_problems",
    "streams_for_service",
    "validate_envelope_dict",
]
