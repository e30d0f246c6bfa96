"""System event types: service lifecycle, health, alerts, configuration.

Published by every service on `service-health-events`.
"""
from __future__ import annotations

from enum import Enum, unique


@unique
class SystemEvent(str, Enum):
    # Lifecycle
    SERVICE_STARTED = "service.started"
    SERVICE_STOPPED = "service.stopped"
    SERVICE_WELCOME = "service.welcome"
    SERVICE_ACKNOWLEDGMENT = "service.acknowledgment"
    SERVICE_HEARTBEAT = "service.heartbeat"

    # Health and monitoring
    HEALTH_CHECK_PASSED = "health.check.passed"
    HEALTH_CHECK_FAILED = "health.check.failed"
    PERFORMANCE_METRIC = "performance.metric"
    RESOURCE_USAGE = "resource.usage"

    # Errors and alerts
    SERVICE_ERROR = "service.error"
    RATE_LIMIT_EXCEEDED = "rate.limit.exceeded"
    QUOTA_WARNING = "quota.warning"
    PROVIDER_FAILOVER = "provider.failover"

    # Configuration
    CONFIG_CHANGED = "config.changed"
    DATABASE_CONNECTION_CHANGED = "database.connection.changed"
    QUEUE_STATUS_CHANGED = "queue.status.changed"

    # Placeholder type for events published without one.
    EVENT_NOT_SPECIFIED = "system.event.not_specified"


class HeartbeatStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
