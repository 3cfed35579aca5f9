"""
Availability Service

Derives which catalog slots are still bookable on a given day from the
appointments already stored for that day.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ...models import ACTIVE_STATUSES
from .slots import catalog_slots

SLOT_AVAILABLE = "available"
SLOT_BOOKED = "booked"
SLOT_UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class SlotState:
    time: str
    state: str


def occupied_slots(target_date: date, appointments: Iterable) -> set[str]:
    """Times held by a pending or confirmed appointment on target_date"""
    return {
        appt.time
        for appt in appointments
        if appt.date == target_date and appt.status in ACTIVE_STATUSES
    }


def available_slots(target_date: date, appointments: Iterable, today: date) -> list[str]:
    """
    Catalog slots still free on target_date.

    Args:
        target_date: day being booked
        appointments: appointments stored for that day, any status
        today: current calendar day

    Returns:
        list[str]: free slot times in catalog order. Empty for days before today.

    Canceled appointments do not hold their slot, so a canceled time is offered again.
    """
    if target_date < today:
        return []

    taken = occupied_slots(target_date, appointments)
    return [slot for slot in catalog_slots() if slot not in taken]


def slot_board(target_date: date, appointments: Iterable, today: date) -> list[SlotState]:
    """Every catalog slot of target_date tagged available, booked or unavailable"""
    taken = occupied_slots(target_date, appointments)
    is_past = target_date < today

    board = []
    for slot in catalog_slots():
        if slot in taken:
            state = SLOT_BOOKED
        elif is_past:
            state = SLOT_UNAVAILABLE
        else:
            state = SLOT_AVAILABLE
        board.append(SlotState(time=slot, state=state))
    return board
