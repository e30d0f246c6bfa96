"""Per-service subscription plans derived from the routing table.

A plan answers "which groups does this service run, and which streams does each group
read" so a consumer can create its groups at startup.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .catalog import coerce
from .consumers import ConsumerGroup
from .errors import UnknownIdentifierError
from .routing import get_consumer_group_streams, get_service_consumer_groups
from .services import ServiceName
from .streams import EventStream


@dataclass(frozen=True)
class GroupSubscription:
    group: ConsumerGroup
    streams: Tuple[EventStream, ...]


@dataclass(frozen=True)
class SubscriptionPlan:
    service: ServiceName
    groups: Tuple[GroupSubscription, ...]

    @property
    def streams(self) -> Tuple[EventStream, ...]:
        return _dedupe(s for sub in self.groups for s in sub.streams)

    def pairs(self) -> Iterator[Tuple[ConsumerGroup, EventStream]]:
        for sub in self.groups:
            for stream in sub.streams:
                yield sub.group, stream

    def to_dict(self) -> dict:
        return {
            "service": self.service.value,
            "groups": {sub.group.value: [s.value for s in sub.streams] for sub in self.groups},
        }


def _dedupe(items) -> tuple:
    # dict keeps first-seen order
    return tuple(dict.fromkeys(items))


def streams_for_service(service: object, *, strict: bool = False) -> Tuple[EventStream, ...]:
    """Union of the streams read by every group recommended for `service`, first-seen order."""
    groups = get_service_consumer_groups(service, strict=strict)
    return _dedupe(s for g in groups for s in get_consumer_group_streams(g))


def build_subscription_plan(service: object, *, strict: bool = False) -> SubscriptionPlan | None:
    """Plan for a known service.

    Unknown services yield None (or raise `UnknownIdentifierError` with `strict=True`).
    """
    name = coerce(ServiceName, service)
    if name is None:
        if strict:
            raise UnknownIdentifierError("service", service)
        return None
    groups = tuple(
        GroupSubscription(group=g, streams=get_consumer_group_streams(g))
        for g in get_service_consumer_groups(name)
    )
    return SubscriptionPlan(service=name, groups=groups)
