"""
Demo data seeder for the Cuentas service.

Creates an administrator, a doctor (with doctor profile) and a patient with
known credentials so the API can be exercised right after a fresh start.

Credentials (printed to stdout on first run):
  Admin  : admin_demo  / Admin1234!
  Doctor : doctor_demo / Doctor1234!
  Patient: patient_demo / Patient1234!

This seeder is idempotent; it is safe to call on every startup.
"""
import logging

from .models.base import SessionLocal, Base, engine
from .models.cuenta import Account, Role
from .models.doctor import DoctorProfile
from .core.security import get_password_hash

logger = logging.getLogger(__name__)

DEMO_ADMIN_USERNAME = "admin_demo"
DEMO_ADMIN_EMAIL = "admin@cuentas.demo"
DEMO_ADMIN_PASSWORD = "Admin1234!"

DEMO_DOCTOR_USERNAME = "doctor_demo"
DEMO_DOCTOR_EMAIL = "doctor@cuentas.demo"
DEMO_DOCTOR_PASSWORD = "Doctor1234!"

DEMO_PATIENT_USERNAME = "patient_demo"
DEMO_PATIENT_EMAIL = "patient@cuentas.demo"
DEMO_PATIENT_PASSWORD = "Patient1234!"


def seed_demo_data() -> None:
    """Create the demo accounts if they do not already exist."""
    # Ensure tables exist (no-op when already created by main.py)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        _seed_account(db, DEMO_ADMIN_USERNAME, DEMO_ADMIN_EMAIL, DEMO_ADMIN_PASSWORD,
                      "Demo", "Admin", Role.ADMIN)
        doctor = _seed_account(db, DEMO_DOCTOR_USERNAME, DEMO_DOCTOR_EMAIL, DEMO_DOCTOR_PASSWORD,
                               "Demo", "Doctor", Role.DOCTOR)
        _seed_doctor_profile(db, doctor)
        _seed_account(db, DEMO_PATIENT_USERNAME, DEMO_PATIENT_EMAIL, DEMO_PATIENT_PASSWORD,
                      "Demo", "Patient", Role.PATIENT)
    finally:
        db.close()


# ── helpers ──────────────────────────────────────────────────────────────────

def _seed_account(db, username, email, password, first_name, last_name, role) -> Account:
    account = db.query(Account).filter(Account.username == username).first()
    if not account:
        account = Account(
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            age=40,
            role=role,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        print(f"[seed] Created demo account: {username} / {password}")
    return account


def _seed_doctor_profile(db, account: Account) -> None:
    existing = db.query(DoctorProfile).filter(DoctorProfile.account_id == account.id).first()
    if not existing:
        db.add(DoctorProfile(account_id=account.id, specialty="General Medicine", license_number="DEMO-LIC-001"))
        db.commit()
        logger.info("Created demo doctor profile for account %s", account.id)
