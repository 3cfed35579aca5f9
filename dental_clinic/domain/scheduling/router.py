"""Scheduling router - FastAPI endpoints for appointment operations"""

import logging
from datetime import date, datetime
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AvailableSlotsResponse,
    DayCellResponse,
    MonthGridResponse,
    SlotBoardResponse,
    SlotStateResponse,
    StatisticsResponse,
    StatusUpdate,
)
from .service import SchedulingService
from .slots import catalog_slots

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_clock() -> Callable[[], datetime]:
    """Clock used for "today"/"now"; overridden in tests"""
    return datetime.now


def get_scheduling_service(
    db: Session = Depends(get_db), clock: Callable[[], datetime] = Depends(get_clock)
) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return SchedulingService(db, clock=clock)


# ============================================================================
# QUERIES
# ============================================================================


@router.get("", response_model=list[AppointmentResponse])
async def list_appointments(
    status: Optional[str] = Query(None, description="pending, confirmed, canceled or all"),
    search: Optional[str] = Query(None, description="Patient name or phone"),
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """List appointments ordered by date and time"""
    appointments = service.list_appointments(status, search, date_from, date_to)
    return [AppointmentResponse.from_model(a) for a in appointments]


@router.get("/upcoming", response_model=list[AppointmentResponse])
async def list_upcoming_appointments(service: SchedulingService = Depends(get_scheduling_service)):
    """Non-canceled appointments from today on"""
    return [AppointmentResponse.from_model(a) for a in service.list_upcoming()]


@router.get("/slots", response_model=list[str])
async def get_catalog_slots():
    """Every bookable time of day"""
    return list(catalog_slots())


@router.get("/available", response_model=AvailableSlotsResponse)
async def get_available_slots(
    date: str = Query(..., description="YYYY-MM-DD"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Slots still free on a day"""
    slots = service.get_available_slots(date)
    return AvailableSlotsResponse(date=service.parse_date(date), slots=slots)


@router.get("/slot-board", response_model=SlotBoardResponse)
async def get_slot_board(
    date: str = Query(..., description="YYYY-MM-DD"),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Every slot of a day with its state (available, booked, unavailable)"""
    board = service.get_slot_board(date)
    return SlotBoardResponse(
        date=service.parse_date(date),
        slots=[SlotStateResponse(time=s.time, state=s.state) for s in board],
    )


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(service: SchedulingService = Depends(get_scheduling_service)):
    """Dashboard counters"""
    stats = service.get_statistics()
    return StatisticsResponse(
        todayAppointments=stats.today_count,
        weekAppointments=stats.week_count,
        pendingAppointments=stats.pending_count,
        canceledAppointments=stats.canceled_count,
    )


@router.get("/calendar", response_model=MonthGridResponse)
async def get_month_calendar(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """42-day grid for a month (current month by default)"""
    cells = service.get_month_grid(year, month)
    # Cell 7 always falls inside the requested month
    anchor = cells[7].date
    return MonthGridResponse(
        year=anchor.year,
        month=anchor.month,
        days=[
            DayCellResponse(
                date=c.date,
                inMonth=c.in_month,
                isToday=c.is_today,
                isPast=c.is_past,
                status=c.status.value,
                appointmentCount=c.appointment_count,
            )
            for c in cells
        ],
    )


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: int,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Get a specific appointment"""
    return AppointmentResponse.from_model(service.get_appointment(appointment_id))


# ============================================================================
# COMMANDS
# ============================================================================


@router.post("", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Book an appointment (always created as pending)"""
    return AppointmentResponse.from_model(service.create_appointment(data))


@router.patch("/{appointment_id}/status", response_model=AppointmentResponse)
async def update_appointment_status(
    appointment_id: int,
    data: StatusUpdate,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Confirm or cancel an appointment"""
    return AppointmentResponse.from_model(service.update_status(appointment_id, data.status))


__all__ = [
    "router",
    "get_clock",
    "get_scheduling_service",
]
