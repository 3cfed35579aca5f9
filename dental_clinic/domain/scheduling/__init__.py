"""
Scheduling Domain

Appointment booking for the clinic's single daily slot catalog:
- Slot catalog (slots.py)
- Availability calculation (availability.py)
- Status lifecycle (status.py)
- Dashboard statistics (statistics.py)
- Month calendar grid (calendar_grid.py)
- Booking and status updates (service.py), backed by repository.py
- HTTP endpoints (router.py)
"""

from .router import router

__all__ = ["router"]
