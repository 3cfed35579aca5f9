"""
Appointment models for the clinic scheduling engine
"""

import enum
import uuid

from sqlalchemy import Column, Date, DateTime, Index, Integer, String, Text, text

from .database import Base


def generate_public_id():
    """Generate a unique public ID for secure public access"""
    return str(uuid.uuid4())


class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELED = "canceled"


class Specialty(str, enum.Enum):
    CLEANING = "cleaning"
    CANAL = "canal"
    ORTHODONTICS = "orthodontics"
    IMPLANT = "implant"
    EXTRACTION = "extraction"
    WHITENING = "whitening"
    EMERGENCY = "emergency"


# Statuses that hold a slot on the calendar
ACTIVE_STATUSES = (AppointmentStatus.PENDING.value, AppointmentStatus.CONFIRMED.value)


class Appointment(Base):
    """A patient's booking of one catalog slot on one day"""

    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    public_id = Column(
        String(36), unique=True, nullable=False, index=True, default=generate_public_id
    )

    # Patient
    patient_name = Column(String(255), nullable=False)
    patient_cpf = Column(String(11), nullable=False, index=True)  # digits only
    patient_phone = Column(String(11), nullable=False)  # digits only

    specialty = Column(String(32), nullable=False)

    # Scheduling
    date = Column(Date, nullable=False, index=True)
    time = Column(String(5), nullable=False)  # HH:MM, one of the catalog slots

    # Status workflow: pending → confirmed → canceled, or pending → canceled
    status = Column(String(16), default=AppointmentStatus.PENDING.value, nullable=False, index=True)

    observations = Column(Text, nullable=True)

    # Timestamps come from the scheduling service clock
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        # At most one pending/confirmed appointment per (date, time)
        Index(
            "uq_appointments_active_slot",
            "date",
            "time",
            unique=True,
            sqlite_where=text("status != 'canceled'"),
            postgresql_where=text("status != 'canceled'"),
        ),
    )

    def __repr__(self):
        return f"<Appointment id={self.id} {self.date} {self.time} status={self.status}>"
