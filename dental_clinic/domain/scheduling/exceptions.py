"""Scheduling errors - expected outcomes of engine operations"""

from datetime import date
from typing import Any


class SchedulingError(Exception):
    """Base class for every error the scheduling engine reports to its caller"""

    code = "scheduling_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message}


class ValidationError(SchedulingError):
    """Malformed input; the caller can correct the field and retry"""

    code = "validation_error"

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "field": self.field, "reason": self.reason}


class SlotConflictError(SchedulingError):
    """The slot is already held by a pending or confirmed appointment"""

    code = "slot_conflict"

    def __init__(self, date: date, time: str):
        super().__init__(f"Slot {time} on {date.isoformat()} is no longer available")
        self.date = date
        self.time = time

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "date": self.date.isoformat(), "time": self.time}


class InvalidTransitionError(SchedulingError):
    """Status change not permitted by the appointment lifecycle"""

    code = "invalid_transition"

    def __init__(self, from_status: str, to_status: str):
        super().__init__(f"Cannot change status from {from_status} to {to_status}")
        self.from_status = from_status
        self.to_status = to_status

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "from": self.from_status, "to": self.to_status}


class NotFoundError(SchedulingError):
    code = "not_found"

    def __init__(self, appointment_id: int):
        super().__init__(f"Appointment {appointment_id} not found")
        self.appointment_id = appointment_id

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "id": self.appointment_id}
