"""Redis consumer groups.

Each group processes every event of a subscribed stream exactly once; consumers inside
a group share the load. NAMING: `{purpose}-processors`.
"""
from __future__ import annotations

from enum import Enum, unique

from .catalog import catalog_mapping, coerce


@unique
class ConsumerGroup(str, Enum):
    # HRM business logic, e.g. create hospital profiles after business verification.
    HRM_PROCESSORS = "hrm-business-processors"
    EMAIL_PROCESSORS = "email-notification-processors"
    # OTP codes, emergency alerts, appointment reminders.
    SMS_PROCESSORS = "sms-notification-processors"
    ANALYTICS_PROCESSORS = "analytics-processors"
    # Compliance and security audit trail.
    AUDIT_PROCESSORS = "audit-trail-processors"
    PAYMENT_PROCESSORS = "payment-processors"
    # Ambulance dispatch and logistics.
    TRANSPORT_PROCESSORS = "transport-processors"
    HEALTH_PROCESSORS = "health-monitoring-processors"
    # Third-party integrations; streams chosen per integration.
    INTEGRATION_PROCESSORS = "integration-processors"
    # Uploads, transformations, virus scanning.
    FILE_PROCESSORS = "file-processors"


CONSUMER_GROUPS = catalog_mapping(ConsumerGroup)


def is_valid_consumer_group(candidate: object) -> bool:
    return coerce(ConsumerGroup, candidate) is not None
