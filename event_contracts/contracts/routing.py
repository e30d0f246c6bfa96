"""Consumer group routing.

Static mappings from consumer groups to the streams they read, and from services to the
consumer groups they should typically run. Built once from catalog members only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .catalog import coerce
from .consumers import ConsumerGroup
from .errors import UnknownIdentifierError
from .services import ServiceName
from .streams import EventStream


CONSUMER_GROUP_STREAMS: Mapping[ConsumerGroup, Tuple[EventStream, ...]] = MappingProxyType(
    {
        ConsumerGroup.HRM_PROCESSORS: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.BUSINESS_VERIFICATION_EVENTS,
        ),
        ConsumerGroup.EMAIL_PROCESSORS: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.HRM_SERVICE_EVENTS,
            EventStream.PAYMENT_SERVICE_EVENTS,
            EventStream.TRANSPORT_SERVICE_EVENTS,
        ),
        ConsumerGroup.SMS_PROCESSORS: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.HRM_SERVICE_EVENTS,
            EventStream.TRANSPORT_SERVICE_EVENTS,
        ),
        ConsumerGroup.ANALYTICS_PROCESSORS: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.HRM_SERVICE_EVENTS,
            EventStream.NOTIFICATION_SERVICE_EVENTS,
            EventStream.PAYMENT_SERVICE_EVENTS,
            EventStream.TRANSPORT_SERVICE_EVENTS,
            EventStream.BUSINESS_VERIFICATION_EVENTS,
            EventStream.SERVICE_HEALTH_EVENTS,
        ),
        ConsumerGroup.AUDIT_PROCESSORS: (
            EventStream.USER_SERVICE_EVENTS,
            EventStream.HRM_SERVICE_EVENTS,
            EventStream.NOTIFICATION_SERVICE_EVENTS,
            EventStream.PAYMENT_SERVICE_EVENTS,
            EventStream.TRANSPORT_SERVICE_EVENTS,
            EventStream.BUSINESS_VERIFICATION_EVENTS,
            EventStream.AUDIT_EVENTS,
        ),
        ConsumerGroup.PAYMENT_PROCESSORS: (
            EventStream.PAYMENT_SERVICE_EVENTS,
            EventStream.USER_SERVICE_EVENTS,
        ),
        ConsumerGroup.TRANSPORT_PROCESSORS: (
            EventStream.TRANSPORT_SERVICE_EVENTS,
            EventStream.HRM_SERVICE_EVENTS,
        ),
        ConsumerGroup.HEALTH_PROCESSORS: (
            EventStream.SERVICE_HEALTH_EVENTS,
            EventStream.AUDIT_EVENTS,
        ),
        # Configured per integration needs.
        ConsumerGroup.INTEGRATION_PROCESSORS: (),
        ConsumerGroup.FILE_PROCESSORS: (EventStream.NOTIFICATION_SERVICE_EVENTS,),
    }
)

SERVICE_CONSUMER_RECOMMENDATIONS: Mapping[ServiceName, Tuple[ConsumerGroup, ...]] = MappingProxyType(
    {
        ServiceName.USER_SERVICE: (
            ConsumerGroup.ANALYTICS_PROCESSORS,
            ConsumerGroup.AUDIT_PROCESSORS,
        ),
        ServiceName.HRM_SERVICE: (
            ConsumerGroup.HRM_PROCESSORS,
            ConsumerGroup.ANALYTICS_PROCESSORS,
            ConsumerGroup.AUDIT_PROCESSORS,
        ),
        ServiceName.FILE_NOTIFICATION_SERVICE: (
            ConsumerGroup.EMAIL_PROCESSORS,
            ConsumerGroup.SMS_PROCESSORS,
            ConsumerGroup.FILE_PROCESSORS,
            ConsumerGroup.ANALYTICS_PROCESSORS,
        ),
        ServiceName.PAYMENT_SERVICE: (
            ConsumerGroup.PAYMENT_PROCESSORS,
            ConsumerGroup.ANALYTICS_PROCESSORS,
            ConsumerGroup.AUDIT_PROCESSORS,
        ),
        ServiceName.TRANSPORT_SERVICE: (
            ConsumerGroup.TRANSPORT_PROCESSORS,
            ConsumerGroup.ANALYTICS_PROCESSORS,
        ),
        ServiceName.AGGREGATOR_SERVICE: (ConsumerGroup.ANALYTICS_PROCESSORS,),
        ServiceName.GATEWAY_SERVICE: (ConsumerGroup.AUDIT_PROCESSORS,),
    }
)


def get_consumer_group_streams(consumer_group: object, *, strict: bool = False) -> Tuple[EventStream, ...]:
    """Streams a consumer group should consume.

    Unknown groups mean "no streams configured" and yield `()`. Pass `strict=True` to get
    `UnknownIdentifierError` instead; a known group with no streams still yields `()`.
    """
    group = coerce(ConsumerGroup, consumer_group)
    if group is None:
        if strict:
            raise UnknownIdentifierError("consumer group", consumer_group)
        return ()
    return CONSUMER_GROUP_STREAMS.get(group, ())


def get_service_consumer_groups(service_name: object, *, strict: bool = False) -> Tuple[ConsumerGroup, ...]:
    """Consumer groups recommended for a service. Same unknown-key policy as above."""
    service = coerce(ServiceName, service_name)
    if service is None:
        if strict:
            raise UnknownIdentifierError("service", service_name)
        return ()
    return SERVICE_CONSUMER_RECOMMENDATIONS.get(service, ())


def consumers_of_stream(stream: object) -> Tuple[ConsumerGroup, ...]:
    """Consumer groups subscribed to `stream`, in catalog order. Unknown streams yield `()`."""
    s = coerce(EventStream, stream)
    if s is None:
        return ()
    return tuple(g for g, streams in CONSUMER_GROUP_STREAMS.items() if s in streams)
