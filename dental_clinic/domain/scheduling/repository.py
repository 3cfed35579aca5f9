"""Appointment repository - Database operations for appointments"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Appointment

logger = logging.getLogger(__name__)


class UniquenessViolation(Exception):
    """The store refused a row that would double-book a slot"""


class RecordNotFound(Exception):
    pass


class StaleStatus(Exception):
    """The row's status changed between read and write"""

    def __init__(self, current_status: str):
        super().__init__(current_status)
        self.current_status = current_status


def _escape_like(term: str) -> str:
    """Make LIKE wildcards in user input match literally (escape char: backslash)"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass
class AppointmentFilter:
    date: Optional[date] = None
    date_from: Optional[date] = None  # inclusive
    date_to: Optional[date] = None  # inclusive
    status: Optional[str] = None
    statuses: Optional[tuple[str, ...]] = None
    search: Optional[str] = None  # patient name or phone


class AppointmentRepository:
    """Repository for appointment database operations"""

    @staticmethod
    def list_appointments(db: Session, filters: Optional[AppointmentFilter] = None) -> list[Appointment]:
        """Appointments matching filters, ordered by date then time"""
        filters = filters or AppointmentFilter()
        # Rows already in the session are overwritten with what is stored now
        query = db.query(Appointment).populate_existing()

        if filters.date is not None:
            query = query.filter(Appointment.date == filters.date)
        if filters.date_from is not None:
            query = query.filter(Appointment.date >= filters.date_from)
        if filters.date_to is not None:
            query = query.filter(Appointment.date <= filters.date_to)
        if filters.status:
            query = query.filter(Appointment.status == filters.status)
        if filters.statuses:
            query = query.filter(Appointment.status.in_(filters.statuses))

        if filters.search:
            term = filters.search.strip()
            query = query.filter(
                or_(
                    Appointment.patient_name.ilike(f"%{_escape_like(term)}%", escape="\\"),
                    Appointment.patient_phone.contains(term, autoescape=True),
                )
            )

        return query.order_by(Appointment.date, Appointment.time, Appointment.id).all()

    @staticmethod
    def get_appointment_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        return (
            db.query(Appointment)
            .populate_existing()
            .filter(Appointment.id == appointment_id)
            .first()
        )

    @staticmethod
    def insert_appointment(db: Session, **appointment_data) -> Appointment:
        """
        Insert a new appointment.

        Raises:
            UniquenessViolation: another active appointment holds the same (date, time)
        """
        appointment = Appointment(**appointment_data)
        db.add(appointment)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.warning(
                f"⚠️ Insert rejected for {appointment_data.get('date')} {appointment_data.get('time')}: {e.orig}"
            )
            raise UniquenessViolation(str(e.orig)) from e

        db.refresh(appointment)
        return appointment

    @staticmethod
    def update_appointment_status(
        db: Session,
        appointment_id: int,
        status: str,
        updated_at: datetime,
        expected_status: Optional[str] = None,
    ) -> Appointment:
        """
        Write a new status.

        When expected_status is given the row is only updated if it still holds
        that status, so a concurrent change made after the caller's read is not
        overwritten.

        Raises:
            RecordNotFound: no appointment with that id
            StaleStatus: the stored status no longer matches expected_status
        """
        query = db.query(Appointment).filter(Appointment.id == appointment_id)
        if expected_status is not None:
            query = query.filter(Appointment.status == expected_status)

        updated = query.update(
            {Appointment.status: status, Appointment.updated_at: updated_at},
            synchronize_session=False,
        )
        db.commit()

        appointment = AppointmentRepository.get_appointment_by_id(db, appointment_id)
        if appointment is None:
            raise RecordNotFound(appointment_id)

        if not updated:
            raise StaleStatus(appointment.status)
        return appointment
