"""
Appointment status transitions

Statuses: pending → confirmed → canceled, or pending → canceled

Note:
- 'pending' is the initial status only, set by the booking flow
- re-confirming a confirmed appointment is accepted as a no-op
- 'canceled' is terminal
"""

from ...models import AppointmentStatus
from .exceptions import InvalidTransitionError

VALID_TRANSITIONS = {
    AppointmentStatus.PENDING.value: {
        AppointmentStatus.CONFIRMED.value,
        AppointmentStatus.CANCELED.value,
    },
    AppointmentStatus.CONFIRMED.value: {
        AppointmentStatus.CONFIRMED.value,
        AppointmentStatus.CANCELED.value,
    },
    AppointmentStatus.CANCELED.value: set(),  # Terminal state
}


def can_transition(current_status: str, new_status: str) -> bool:
    """Check whether an appointment in current_status may move to new_status"""
    return new_status in VALID_TRANSITIONS.get(current_status, set())


def is_noop_transition(current_status: str, new_status: str) -> bool:
    return can_transition(current_status, new_status) and current_status == new_status


def validate_status_transition(current_status: str, new_status: str) -> None:
    """
    Raise InvalidTransitionError unless current_status → new_status is allowed.
    """
    if not can_transition(current_status, new_status):
        raise InvalidTransitionError(current_status, new_status)
