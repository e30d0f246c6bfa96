"""user-service event types.

Published on `user-service-events` (and `business-verification-events` for the
verification workflow).
"""
from __future__ import annotations

from enum import Enum, unique


@unique
class UserServiceEvent(str, Enum):
    # Registration
    CUSTOMER_REGISTERED = "user.customer.registered"
    BUSINESS_REGISTERED = "user.business.registered"
    ADMIN_CREATED = "user.admin.created"
    AGENT_INVITED = "user.agent.invited"
    AGENT_ACCEPTED = "user.agent.accepted"
    AGENT_REJECTED = "user.agent.rejected"
    AGENT_ACTIVATED = "user.agent.activated"

    # Authentication
    CUSTOMER_LOGGED_IN = "user.customer.logged_in"
    CUSTOMER_LOGGED_OUT = "user.customer.logged_out"
    BUSINESS_LOGGED_IN = "user.business.logged_in"
    BUSINESS_LOGGED_OUT = "user.business.logged_out"
    ADMIN_LOGGED_IN = "user.admin.logged_in"
    ADMIN_LOGGED_OUT = "user.admin.logged_out"
    PASSWORD_RESET_REQUESTED = "user.password.reset_requested"
    PASSWORD_CHANGED = "user.password.changed"

    # Verification
    EMAIL_VERIFIED = "user.email.verified"
    PHONE_VERIFIED = "user.phone.verified"
    BUSINESS_VERIFIED = "user.business.verified"
    BUSINESS_REJECTED = "user.business.rejected"
    BUSINESS_VERIFICATION = "user.business.verification"

    # In-process emitter names; never published to a stream.
    BUSINESS_VERIFICATION_APPROVED_INTERNAL = "business.verification.approved"
    BUSINESS_VERIFICATION_REJECTED_INTERNAL = "business.verification.rejected"
    BUSINESS_DOCUMENTS_SUBMITTED_INTERNAL = "business.documents.submitted"

    # Profile
    PROFILE_UPDATED = "user.profile.updated"
    PREFERENCES_UPDATED = "user.preferences.updated"

    # Hospital approval
    HOSPITAL_READY_FOR_APPROVAL = "user.hospital.ready_for_approval"
    HOSPITAL_APPROVAL_DECISION = "user.hospital.approval_decision"


REGISTRATION_EVENTS = frozenset(
    {
        UserServiceEvent.CUSTOMER_REGISTERED,
        UserServiceEvent.BUSINESS_REGISTERED,
        UserServiceEvent.AGENT_INVITED,
        UserServiceEvent.AGENT_ACCEPTED,
        UserServiceEvent.AGENT_REJECTED,
    }
)

INTERNAL_EVENTS = frozenset(
    {
        UserServiceEvent.BUSINESS_VERIFICATION_APPROVED_INTERNAL,
        UserServiceEvent.BUSINESS_VERIFICATION_REJECTED_INTERNAL,
        UserServiceEvent.BUSINESS_DOCUMENTS_SUBMITTED_INTERNAL,
    }
)
