"""Event type catalogs, one enum per publishing service.

Streams without a catalog (payment, transport, audit) carry free-form types for now.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Type

from event_contracts.contracts.catalog import coerce
from event_contracts.contracts.streams import EventStream

from .hrm_service import HrmServiceEvent
from .notification_service import NotificationServiceEvent
from .system import HeartbeatStatus, SystemEvent
from .user_service import INTERNAL_EVENTS, REGISTRATION_EVENTS, UserServiceEvent


EVENT_TYPE_CATALOGS: Tuple[Type[Enum], ...] = (
    UserServiceEvent,
    HrmServiceEvent,
    NotificationServiceEvent,
    SystemEvent,
)

EVENT_TYPES_BY_STREAM: Mapping[EventStream, Type[Enum]] = MappingProxyType(
    {
        EventStream.USER_SERVICE_EVENTS: UserServiceEvent,
        EventStream.BUSINESS_VERIFICATION_EVENTS: UserServiceEvent,
        EventStream.HRM_SERVICE_EVENTS: HrmServiceEvent,
        EventStream.NOTIFICATION_SERVICE_EVENTS: NotificationServiceEvent,
        EventStream.SERVICE_HEALTH_EVENTS: SystemEvent,
    }
)


def event_type_member(candidate: object) -> Optional[Enum]:
    """The catalog member whose value is `candidate`, searching every catalog."""
    for enum_cls in EVENT_TYPE_CATALOGS:
        member = coerce(enum_cls, candidate)
        if member is not None:
            return member
    return None


def is_known_event_type(candidate: object) -> bool:
    return event_type_member(candidate) is not None


__all__ = [
    "EVENT_TYPE_CATALOGS",
    "EVENT_TYPES_BY_STREAM",
    "HeartbeatStatus",
    "HrmServiceEvent",
    "INTERNAL_EVENTS",
    "NotificationServiceEvent",
    "REGISTRATION_EVENTS",
    "SystemEvent",
    "UserServiceEvent",
    "event_type_member",
    "is_known_event_type",
]
