"""
Month calendar grid

Builds the 6-week grid of day cells shown by the booking calendar. Grid weeks
start on Sunday.
"""

import enum
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from ...models import AppointmentStatus

GRID_WEEKS = 6
GRID_DAYS = GRID_WEEKS * 7


class DayStatus(str, enum.Enum):
    AVAILABLE = "available"  # no active appointment
    PENDING = "pending"  # only pending appointments
    BOOKED = "booked"  # only confirmed appointments
    MIXED = "mixed"  # pending and confirmed


@dataclass(frozen=True)
class DayCell:
    date: date
    in_month: bool
    is_today: bool
    is_past: bool
    status: DayStatus
    appointment_count: int


def grid_start(anchor: date) -> date:
    """Sunday on or before the first day of anchor's month"""
    first = anchor.replace(day=1)
    # weekday(): Monday=0 ... Sunday=6
    return first - timedelta(days=(first.weekday() + 1) % 7)


def day_status(statuses: Iterable[str]) -> DayStatus:
    statuses = set(statuses)
    has_pending = AppointmentStatus.PENDING.value in statuses
    has_confirmed = AppointmentStatus.CONFIRMED.value in statuses

    if has_pending and has_confirmed:
        return DayStatus.MIXED
    if has_pending:
        return DayStatus.PENDING
    if has_confirmed:
        return DayStatus.BOOKED
    return DayStatus.AVAILABLE


def build_month_grid(anchor: date, appointments: Iterable, today: date) -> list[DayCell]:
    """
    Day cells for the month containing anchor.

    Always returns 42 cells, Sunday through Saturday, padded with days of the
    neighbouring months. Canceled appointments are ignored.
    """
    by_day = defaultdict(list)
    for appt in appointments:
        if appt.status != AppointmentStatus.CANCELED.value:
            by_day[appt.date].append(appt.status)

    start = grid_start(anchor)
    cells = []
    for offset in range(GRID_DAYS):
        day = start + timedelta(days=offset)
        statuses = by_day.get(day, [])
        cells.append(
            DayCell(
                date=day,
                in_month=(day.year, day.month) == (anchor.year, anchor.month),
                is_today=day == today,
                is_past=day < today,
                status=day_status(statuses),
                appointment_count=len(statuses),
            )
        )
    return cells


def grid_bounds(anchor: date) -> tuple[date, date]:
    """First and last day covered by the grid of anchor's month"""
    start = grid_start(anchor)
    return start, start + timedelta(days=GRID_DAYS - 1)
