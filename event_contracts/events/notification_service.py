from __future__ import annotations

from enum import Enum, unique


@unique
class NotificationServiceEvent(str, Enum):
    """file-notification-service event types (email, SMS, push, files)."""

    EMAIL_REQUESTED = "email.notification.requested"
    EMAIL_SENDING = "email.notification.sending"
    EMAIL_SENT = "email.notification.sent"
    EMAIL_FAILED = "email.notification.failed"
    EMAIL_DELIVERED = "email.notification.delivered"
    EMAIL_BOUNCED = "email.notification.bounced"
    EMAIL_OPENED = "email.notification.opened"
    EMAIL_CLICKED = "email.notification.clicked"

    SMS_REQUESTED = "sms.notification.requested"
    SMS_SENDING = "sms.notification.sending"
    SMS_SENT = "sms.notification.sent"
    SMS_FAILED = "sms.notification.failed"
    SMS_DELIVERED = "sms.notification.delivered"
    SMS_BOUNCED = "sms.notification.bounced"

    PUSH_REQUESTED = "push.notification.requested"
    PUSH_SENT = "push.notification.sent"
    PUSH_FAILED = "push.notification.failed"
    PUSH_DELIVERED = "push.notification.delivered"

    FILE_UPLOADED = "file.uploaded"
    FILE_PROCESSED = "file.processed"
    FILE_DELETED = "file.deleted"
    FILE_ACCESS_GRANTED = "file.access.granted"
    FILE_ACCESS_REVOKED = "file.access.revoked"


# Status values carried in email/SMS `data.status`.
EMAIL_STATUSES = ("requested", "sending", "sent", "failed", "delivered", "bounced", "opened", "clicked")
SMS_STATUSES = ("requested", "sending", "sent", "failed", "delivered", "bounced")
