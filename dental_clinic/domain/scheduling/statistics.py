"""
Appointment statistics for the staff dashboard.

Counts are computed from the appointment snapshot passed in and never cached.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, Union

from ...models import AppointmentStatus


@dataclass(frozen=True)
class AppointmentStatistics:
    today_count: int
    week_count: int
    # Non-canceled appointments from tomorrow on (today too when now is midnight), whatever their status
    pending_count: int
    canceled_count: int


def week_start(day: date) -> date:
    """Monday of the week containing day (a Sunday belongs to the week before it)"""
    return day - timedelta(days=day.weekday())


def _is_upcoming(appt, now: Union[date, datetime]) -> bool:
    """
    Appointment day (taken at midnight, slot time ignored) at or after now.

    With a datetime now past midnight this leaves out every appointment of
    the current day, including slots later that day.
    """
    if isinstance(now, datetime):
        return datetime.combine(appt.date, time.min) >= now
    return appt.date >= now


def compute_statistics(now: Union[date, datetime], appointments: Iterable) -> AppointmentStatistics:
    """
    Aggregate dashboard counters.

    Args:
        now: reference moment; a plain date compares by day only
        appointments: full appointment set

    Returns:
        AppointmentStatistics with:
            today_count: non-canceled appointments on now's day
            week_count: non-canceled appointments in now's Monday-started week
            pending_count: non-canceled appointments whose day starts at or after now
            canceled_count: every canceled appointment
    """
    today = now.date() if isinstance(now, datetime) else now
    monday = week_start(today)
    next_monday = monday + timedelta(days=7)

    today_count = week_count = pending_count = canceled_count = 0

    for appt in appointments:
        if appt.status == AppointmentStatus.CANCELED.value:
            canceled_count += 1
            continue

        if appt.date == today:
            today_count += 1
        if monday <= appt.date < next_monday:
            week_count += 1
        if _is_upcoming(appt, now):
            pending_count += 1

    return AppointmentStatistics(
        today_count=today_count,
        week_count=week_count,
        pending_count=pending_count,
        canceled_count=canceled_count,
    )
