"""Referential integrity of the routing table.

Run from tests and `tools/contracts/check_routing.py`, never on the lookup path.
"""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Any, Iterable, List, Mapping, Type

from .consumers import ConsumerGroup
from .errors import RoutingIntegrityError
from .routing import CONSUMER_GROUP_STREAMS, SERVICE_CONSUMER_RECOMMENDATIONS
from .services import ServiceName
from .streams import STREAMS_BY_SERVICE, DomainStream, EventStream, ServiceStreamGroup


logger = logging.getLogger(__name__)

KEBAB_CASE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def _check_catalog(enum_cls: Type[Enum]) -> List[str]:
    problems = []
    for m in enum_cls:
        if not KEBAB_CASE.match(m.value):
            problems.append(f"{enum_cls.__name__}.{m.name}: {m.value!r} is not kebab-case")
    return problems


def _check_mapping(
    name: str,
    table: Mapping[Any, Iterable[Any]],
    *,
    key_cls: Type[Enum],
    value_cls: Type[Enum],
) -> List[str]:
    problems = []
    missing = [k.name for k in key_cls if k not in table]
    if missing:
        problems.append(f"{name}: missing keys {missing}")
    for key, values in table.items():
        if not isinstance(key, key_cls):
            problems.append(f"{name}: key {key!r} is not a {key_cls.__name__}")
            continue
        if not isinstance(values, tuple):
            problems.append(f"{name}[{key.name}]: values must be a tuple")
        seen = set()
        for v in values:
            if not isinstance(v, value_cls):
                problems.append(f"{name}[{key.name}]: {v!r} is not a {value_cls.__name__}")
                continue
            if v in seen:
                problems.append(f"{name}[{key.name}]: duplicate {v.value!r}")
            seen.add(v)
    return problems


def routing_problems() -> List[str]:
    """Every inconsistency in the catalogs and routing table (empty when healthy)."""
    problems: List[str] = []
    for enum_cls in (ServiceName, EventStream, DomainStream, ConsumerGroup):
        problems.extend(_check_catalog(enum_cls))

    overlap = {s.value for s in EventStream} & {s.value for s in DomainStream}
    if overlap:
        problems.append(f"domain streams shadow service streams: {sorted(overlap)}")

    problems.extend(
        _check_mapping("STREAMS_BY_SERVICE", STREAMS_BY_SERVICE, key_cls=ServiceStreamGroup, value_cls=EventStream)
    )
    problems.extend(
        _check_mapping("CONSUMER_GROUP_STREAMS", CONSUMER_GROUP_STREAMS, key_cls=ConsumerGroup, value_cls=EventStream)
    )
    problems.extend(
        _check_mapping(
            "SERVICE_CONSUMER_RECOMMENDATIONS",
            SERVICE_CONSUMER_RECOMMENDATIONS,
            key_cls=ServiceName,
            value_cls=ConsumerGroup,
        )
    )

    for group in ServiceStreamGroup:
        if group is not ServiceStreamGroup.SYSTEM and group.service is None:
            problems.append(f"ServiceStreamGroup.{group.name} has no matching ServiceName")

    owned = {s for streams in STREAMS_BY_SERVICE.values() for s in streams}
    unowned = [s.value for s in EventStream if s not in owned]
    if unowned:
        problems.append(f"streams without a publisher: {unowned}")
    return problems


def check_routing_integrity() -> None:
    """Raise `RoutingIntegrityError` listing every problem found."""
    problems = routing_problems()
    if problems:
        raise RoutingIntegrityError(problems)
    logger.debug(
        "routing table ok: %d streams, %d consumer groups, %d services",
        len(EventStream),
        len(ConsumerGroup),
        len(ServiceName),
    )
