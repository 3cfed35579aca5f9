"""Scheduling service - Business logic for appointment booking and lifecycle"""

import logging
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Callable, Optional

from sqlalchemy.orm import Session

from ...models import ACTIVE_STATUSES, Appointment, AppointmentStatus, Specialty
from ...shared.validators import (
    parse_iso_date,
    validate_br_phone,
    validate_cpf,
    validate_patient_name,
)
from .availability import SlotState, available_slots, slot_board
from .calendar_grid import DayCell, build_month_grid, grid_bounds
from .exceptions import NotFoundError, SlotConflictError, ValidationError
from .repository import (
    AppointmentFilter,
    AppointmentRepository,
    RecordNotFound,
    StaleStatus,
    UniquenessViolation,
)
from .schemas import AppointmentCreate
from .slots import is_catalog_slot
from .statistics import AppointmentStatistics, compute_statistics
from .status import is_noop_transition, validate_status_transition

logger = logging.getLogger(__name__)

SPECIALTIES = {s.value for s in Specialty}
STATUSES = {s.value for s in AppointmentStatus}


class SchedulingService:
    """Service layer for appointment scheduling"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now):
        self.db = db
        self.repo = AppointmentRepository()
        self.clock = clock

    def today(self) -> date:
        return self.clock().date()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.repo.get_appointment_by_id(self.db, appointment_id)
        if not appointment:
            raise NotFoundError(appointment_id)
        return appointment

    def list_appointments(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> list[Appointment]:
        """List appointments; status "all" or None disables the status filter"""
        if status and status != "all" and status not in STATUSES:
            raise ValidationError("status", f"Unknown status '{status}'")

        filters = AppointmentFilter(
            status=status if status and status != "all" else None,
            search=search or None,
            date_from=date_from,
            date_to=date_to,
        )
        return self.repo.list_appointments(self.db, filters)

    def list_upcoming(self) -> list[Appointment]:
        """Non-canceled appointments from today on"""
        filters = AppointmentFilter(date_from=self.today(), statuses=ACTIVE_STATUSES)
        return self.repo.list_appointments(self.db, filters)

    def _appointments_on(self, target_date: date) -> list[Appointment]:
        return self.repo.list_appointments(self.db, AppointmentFilter(date=target_date))

    def get_available_slots(self, target_date) -> list[str]:
        target_date = self.parse_date(target_date)
        return available_slots(target_date, self._appointments_on(target_date), self.today())

    def get_slot_board(self, target_date) -> list[SlotState]:
        target_date = self.parse_date(target_date)
        return slot_board(target_date, self._appointments_on(target_date), self.today())

    def get_statistics(self) -> AppointmentStatistics:
        return compute_statistics(self.clock(), self.repo.list_appointments(self.db))

    def get_month_grid(self, year: Optional[int] = None, month: Optional[int] = None) -> list[DayCell]:
        today = self.today()
        year = today.year if year is None else year
        month = today.month if month is None else month
        if not MINYEAR <= year <= MAXYEAR:
            raise ValidationError("year", f"Year must be between {MINYEAR} and {MAXYEAR}")
        try:
            anchor = date(year, month, 1)
        except ValueError as e:
            raise ValidationError("month", str(e)) from None

        try:
            start, end = grid_bounds(anchor)
        except OverflowError:
            # The padding weeks of January 1 / December 9999 fall outside the date range
            raise ValidationError("year", f"{year}-{month:02d} is outside the supported calendar range") from None
        appointments = self.repo.list_appointments(
            self.db, AppointmentFilter(date_from=start, date_to=end)
        )
        return build_month_grid(anchor, appointments, today)

    # ------------------------------------------------------------------
    # Booking
    # ------------------------------------------------------------------

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """
        Book a slot.

        Fields are validated in order (name, CPF, phone, specialty, date, time)
        and the first failure is raised as ValidationError. The slot is then
        re-checked against the stored appointments for the day. The store's
        unique index on active (date, time) pairs backs the check, so a booking
        that loses a race is reported as SlotConflictError as well.
        """
        fields = self._validate_booking(data)
        target_date, slot = fields["date"], fields["time"]

        if slot not in self.get_available_slots(target_date):
            logger.warning(f"⚠️ Slot conflict: {target_date} {slot} already taken")
            raise SlotConflictError(target_date, slot)

        try:
            appointment = self.repo.insert_appointment(
                self.db,
                **fields,
                status=AppointmentStatus.PENDING.value,
                created_at=self.clock(),
            )
        except UniquenessViolation:
            logger.warning(f"⚠️ Slot conflict on insert: {target_date} {slot} taken concurrently")
            raise SlotConflictError(target_date, slot) from None

        logger.info(
            f"📅 Appointment {appointment.id} booked: {appointment.date} {appointment.time} "
            f"({appointment.specialty})"
        )
        return appointment

    def _validate_booking(self, data: AppointmentCreate) -> dict:
        try:
            name = validate_patient_name(data.patientName)
        except ValueError as e:
            raise ValidationError("patientName", str(e)) from None

        try:
            cpf = validate_cpf(data.patientCpf)
        except ValueError as e:
            raise ValidationError("patientCpf", str(e)) from None

        try:
            phone = validate_br_phone(data.patientPhone)
        except ValueError as e:
            raise ValidationError("patientPhone", str(e)) from None

        specialty = (data.specialty or "").strip()
        if specialty not in SPECIALTIES:
            raise ValidationError("specialty", f"Unknown specialty '{specialty}'")

        target_date = self.parse_date(data.date)
        if target_date < self.today():
            raise ValidationError("date", "Date cannot be in the past")

        slot = (data.time or "").strip()
        if not is_catalog_slot(slot):
            raise ValidationError("time", f"'{slot}' is not a bookable time")

        observations = (data.observations or "").strip() or None

        return {
            "patient_name": name,
            "patient_cpf": cpf,
            "patient_phone": phone,
            "specialty": specialty,
            "date": target_date,
            "time": slot,
            "observations": observations,
        }

    @staticmethod
    def parse_date(value) -> date:
        try:
            return parse_iso_date(value)
        except ValueError as e:
            raise ValidationError("date", str(e)) from None

    # ------------------------------------------------------------------
    # Status lifecycle
    # ------------------------------------------------------------------

    def update_status(self, appointment_id: int, new_status: str) -> Appointment:
        """
        Move an appointment to new_status.

        Raises:
            NotFoundError: unknown appointment
            ValidationError: new_status is not a status value
            InvalidTransitionError: the lifecycle forbids the change
        """
        if new_status not in STATUSES:
            raise ValidationError("status", f"Unknown status '{new_status}'")

        appointment = self.get_appointment(appointment_id)
        current_status = appointment.status
        validate_status_transition(current_status, new_status)

        if is_noop_transition(current_status, new_status):
            return appointment

        try:
            appointment = self.repo.update_appointment_status(
                self.db,
                appointment_id,
                new_status,
                updated_at=self.clock(),
                expected_status=current_status,
            )
        except RecordNotFound:
            raise NotFoundError(appointment_id) from None
        except StaleStatus as e:
            # Changed by someone else since our read; judge against what is stored now
            logger.warning(
                f"⚠️ Appointment {appointment_id} moved {current_status} → {e.current_status} concurrently"
            )
            validate_status_transition(e.current_status, new_status)
            return self.update_status(appointment_id, new_status)

        logger.info(f"✅ Appointment {appointment_id} transitioned: {current_status} → {new_status}")
        return appointment
