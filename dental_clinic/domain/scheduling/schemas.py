"""Scheduling domain schemas - Pydantic models for requests and responses"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class AppointmentCreate(BaseModel):
    """
    Schema for booking a new appointment.

    Fields are accepted as raw strings; the scheduling service validates them in
    a fixed order and reports the first failing field.
    """

    patientName: Optional[str] = None
    patientCpf: Optional[str] = None
    patientPhone: Optional[str] = None
    specialty: Optional[str] = None
    date: Optional[str] = None  # YYYY-MM-DD
    time: Optional[str] = None  # HH:MM
    observations: Optional[str] = None
    # Ignored: new appointments always start as pending
    status: Optional[str] = None


class StatusUpdate(BaseModel):
    status: str


class AppointmentResponse(BaseModel):
    """Schema for appointment response"""

    id: int
    public_id: Optional[str] = None
    patientName: str
    patientCpf: str
    patientPhone: str
    specialty: str
    date: date
    time: str
    status: str
    observations: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, appointment) -> "AppointmentResponse":
        return cls(
            id=appointment.id,
            public_id=appointment.public_id,
            patientName=appointment.patient_name,
            patientCpf=appointment.patient_cpf,
            patientPhone=appointment.patient_phone,
            specialty=appointment.specialty,
            date=appointment.date,
            time=appointment.time,
            status=appointment.status,
            observations=appointment.observations,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )


class AvailableSlotsResponse(BaseModel):
    date: date
    slots: list[str]


class SlotStateResponse(BaseModel):
    time: str
    state: str


class SlotBoardResponse(BaseModel):
    date: date
    slots: list[SlotStateResponse]


class StatisticsResponse(BaseModel):
    todayAppointments: int
    weekAppointments: int
    # Upcoming non-canceled appointments (not only status == pending)
    pendingAppointments: int
    canceledAppointments: int


class DayCellResponse(BaseModel):
    date: date
    inMonth: bool
    isToday: bool
    isPast: bool
    status: str
    appointmentCount: int


class MonthGridResponse(BaseModel):
    year: int
    month: int
    days: list[DayCellResponse]
