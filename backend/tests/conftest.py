"""Shared fixtures: an isolated in-memory database per test."""
import os

# Must be set before cuentas.core.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cuentas.models.base import Base
from cuentas.models.cuenta import Account, Role
from cuentas.models.cita import Appointment
from cuentas.models.doctor import DoctorProfile
from cuentas.models.historial import MedicalHistoryEntry
from cuentas.core.security import get_password_hash


@pytest.fixture()
def session_factory():
    # StaticPool keeps one connection so every session sees the same in-memory db
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    TestSession = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    yield TestSession
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def make_account(db):
    """Insert an account directly, bypassing the manager's validation."""
    counter = {"n": 0}

    def _make(username=None, email=None, password="secret123", role=Role.PATIENT, **extra):
        counter["n"] += 1
        n = counter["n"]
        account = Account(
            username=username or f"user{n:03d}",
            email=email or f"user{n:03d}@clinic.org",
            password_hash=get_password_hash(password),
            first_name=extra.pop("first_name", "Ana"),
            last_name=extra.pop("last_name", "Lopez"),
            age=extra.pop("age", 30),
            role=role,
            **extra,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        return account

    return _make


@pytest.fixture()
def doctor_with_dependents(db, make_account):
    """
    A doctor account that owns 2 requested appointments, 3 appointments as
    treating doctor (booked by a separate patient) and 1 history entry.
    """
    doctor_account = make_account(username="drhouse", email="house@clinic.org", role=Role.DOCTOR)
    patient = make_account(username="patient1", email="patient1@clinic.org")
    profile = DoctorProfile(account_id=doctor_account.id, specialty="Diagnostics")
    db.add(profile)
    db.commit()

    db.add_all([Appointment(account_id=doctor_account.id, reason="check-up") for _ in range(2)])
    db.add_all([
        Appointment(account_id=patient.id, doctor_id=profile.id, reason="consult") for _ in range(3)
    ])
    db.add(MedicalHistoryEntry(account_id=doctor_account.id, diagnosis="Leg pain"))
    db.commit()
    return doctor_account, patient, profile
