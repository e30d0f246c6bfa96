"""hrm-service (hospital resource management) event types."""
from __future__ import annotations

from enum import Enum, unique


@unique
class HrmServiceEvent(str, Enum):
    # Hospital onboarding
    HOSPITAL_REGISTERED = "hrm.hospital.registered"
    HOSPITAL_VERIFIED = "hrm.hospital.verified"
    HOSPITAL_APPROVED = "hrm.hospital.approved"
    HOSPITAL_REJECTED = "hrm.hospital.rejected"
    HOSPITAL_SUSPENDED = "hrm.hospital.suspended"

    # Beds
    BED_ALLOCATED = "hrm.bed.allocated"
    BED_RELEASED = "hrm.bed.released"
    BED_STATUS_UPDATED = "hrm.bed.status_updated"
    WARD_CAPACITY_UPDATED = "hrm.ward.capacity_updated"

    # Staff
    STAFF_ASSIGNED = "hrm.staff.assigned"
    STAFF_REMOVED = "hrm.staff.removed"
    SHIFT_SCHEDULED = "hrm.shift.scheduled"
    SHIFT_UPDATED = "hrm.shift.updated"

    # Resources
    RESOURCE_ALLOCATED = "hrm.resource.allocated"
    RESOURCE_REQUESTED = "hrm.resource.requested"
    EQUIPMENT_ASSIGNED = "hrm.equipment.assigned"
    EQUIPMENT_MAINTENANCE = "hrm.equipment.maintenance"

    # Emergency
    EMERGENCY_ALERT = "hrm.emergency.alert"
    CAPACITY_WARNING = "hrm.capacity.warning"
    RESOURCE_SHORTAGE = "hrm.resource.shortage"
