"""
Slot catalog - the fixed set of bookable times of day.

The clinic works a morning block and an afternoon block with a lunch gap in
between. Every day exposes the same slots.
"""

from datetime import datetime, time, timedelta

SLOT_STEP_MINUTES = 30

# (first slot, end of block) - the end is exclusive
MORNING_BLOCK = (time(8, 0), time(12, 0))
AFTERNOON_BLOCK = (time(14, 0), time(18, 0))

TIME_FORMAT = "%H:%M"


def _block_slots(start: time, end: time, step_minutes: int) -> list[str]:
    anchor = datetime.min.date()
    current = datetime.combine(anchor, start)
    stop = datetime.combine(anchor, end)
    step = timedelta(minutes=step_minutes)

    slots = []
    while current < stop:
        slots.append(current.strftime(TIME_FORMAT))
        current += step
    return slots


_CATALOG = tuple(
    _block_slots(MORNING_BLOCK[0], MORNING_BLOCK[1], SLOT_STEP_MINUTES)
    + _block_slots(AFTERNOON_BLOCK[0], AFTERNOON_BLOCK[1], SLOT_STEP_MINUTES)
)


def catalog_slots() -> tuple[str, ...]:
    """Ordered slot times ("HH:MM"), earliest first"""
    return _CATALOG


def is_catalog_slot(value) -> bool:
    return isinstance(value, str) and value in _CATALOG
