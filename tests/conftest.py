"""Shared fixtures: in-memory SQLite store, fixed clock, service and API client."""

import os

# Must be set before dental_clinic.database builds its module engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from dental_clinic.database import Base, get_db  # noqa: E402
from dental_clinic.domain.scheduling.router import get_clock  # noqa: E402
from dental_clinic.domain.scheduling.schemas import AppointmentCreate  # noqa: E402
from dental_clinic.domain.scheduling.service import SchedulingService  # noqa: E402
from dental_clinic.main import app  # noqa: E402

# Wednesday
NOW = datetime(2024, 6, 12, 10, 0)

VALID_CPF = "529.982.247-25"
OTHER_CPF = "111.444.777-35"


@pytest.fixture
def engine():
    """In-memory database shared by every session of a test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def service(db, clock):
    return SchedulingService(db, clock=clock)


@pytest.fixture
def booking():
    """Factory for valid booking payloads; keyword arguments override fields."""

    def make(**overrides) -> AppointmentCreate:
        payload = {
            "patientName": "Maria Souza",
            "patientCpf": VALID_CPF,
            "patientPhone": "(11) 98765-4321",
            "specialty": "cleaning",
            "date": "2024-06-14",
            "time": "09:00",
            "observations": "Primeira consulta",
        }
        payload.update(overrides)
        return AppointmentCreate(**payload)

    return make


@pytest.fixture
def client(session_factory, clock):
    """API client wired to the test database and clock."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()
