"""Service names.

Canonical names for event metadata (`source_service`) and service identification.
"""
from __future__ import annotations

from enum import Enum, unique

from .catalog import catalog_mapping, coerce


@unique
class ServiceName(str, Enum):
    USER_SERVICE = "user-service"
    HRM_SERVICE = "hrm-service"
    FILE_NOTIFICATION_SERVICE = "file-notification-service"
    PAYMENT_SERVICE = "payment-service"
    TRANSPORT_SERVICE = "transport-service"
    AGGREGATOR_SERVICE = "aggregator-service"
    GATEWAY_SERVICE = "gateway-service"


SERVICE_NAMES = catalog_mapping(ServiceName)


def is_valid_service(candidate: object) -> bool:
    return coerce(ServiceName, candidate) is not None
