"""
Seed the appointment store with sample bookings
Usage: python seed_appointments.py [days_ahead]
"""
import sys
import logging
from datetime import date, timedelta

from dental_clinic import models  # noqa: F401
from dental_clinic.database import Base, SessionLocal, engine
from dental_clinic.domain.scheduling.exceptions import SchedulingError
from dental_clinic.domain.scheduling.schemas import AppointmentCreate
from dental_clinic.domain.scheduling.service import SchedulingService

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

SAMPLE_BOOKINGS = [
    {
        "patientName": "Maria Souza",
        "patientCpf": "529.982.247-25",
        "patientPhone": "(11) 98765-4321",
        "specialty": "cleaning",
        "time": "14:30",
        "observations": "Consulta inicial e avaliação",
    },
    {
        "patientName": "João Pereira",
        "patientCpf": "111.444.777-35",
        "patientPhone": "(21) 3456-7890",
        "specialty": "orthodontics",
        "time": "09:00",
    },
]


def seed(days_ahead: int = 1) -> int:
    """Book the sample appointments days_ahead from today; returns how many were created"""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    target = date.today() + timedelta(days=days_ahead)

    created = 0
    db = SessionLocal()
    try:
        service = SchedulingService(db)
        for booking in SAMPLE_BOOKINGS:
            try:
                appt = service.create_appointment(
                    AppointmentCreate(**booking, date=target.isoformat())
                )
            except SchedulingError as e:
                logger.warning(f"Skipped {booking['patientName']}: {e.message}")
                continue
            created += 1
            logger.info(f"Booked #{appt.id} {appt.patient_name} on {appt.date} {appt.time}")
    finally:
        db.close()

    logger.info(f"✅ Seed completed: {created} appointment(s) created")
    return created


if __name__ == "__main__":
    try:
        seed(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
    except ValueError:
        logger.error("Usage: python seed_appointments.py [days_ahead]")
        sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Seed failed: {e}")
        sys.exit(1)
