"""
Transactional removal of an account and every row that hangs off it.

Order: appointments the account requested, then (for doctors) appointments
booked against its doctor profile and the profile itself, then medical
history, then the account row. All of it commits together or not at all.
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import PersistenceError
from ..models.cita import Appointment
from ..models.cuenta import Account
from ..models.doctor import DoctorProfile
from ..models.historial import MedicalHistoryEntry
from .results import Failure, NotFound, Result, Success

logger = logging.getLogger(__name__)


class CascadeDeletionCoordinator:
    def __init__(self, db: Session):
        self.db = db

    def delete_account_cascade(self, account_id: int) -> Result:
        account = self.db.get(Account, account_id)
        if account is None:
            return NotFound(f"Account {account_id} not found")

        try:
            self._delete_requester_appointments(account_id)
            doctor = self._find_doctor_profile(account_id)
            if doctor is not None:
                self._delete_doctor_appointments(account_id, doctor)
                self._delete_doctor_profile(account_id, doctor)
            self._delete_history_entries(account_id)
            self._delete_account_row(account_id)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Cascade delete of account %s failed, transaction rolled back", account_id)
            return Failure(
                "Account could not be deleted",
                cause=PersistenceError.from_sqlalchemy("Cascade delete failed", exc),
            )
        except Exception:
            self.db.rollback()
            raise

        logger.info("Account %s deleted with all dependent records", account_id)
        return Success(account_id)

    # ── steps ────────────────────────────────────────────────────────────────

    def _delete_requester_appointments(self, account_id: int) -> int:
        count = (
            self.db.query(Appointment)
            .filter(Appointment.account_id == account_id)
            .delete(synchronize_session=False)
        )
        if count:
            logger.info("Deleting %d appointments requested by account %s", count, account_id)
        return count

    def _find_doctor_profile(self, account_id: int) -> Optional[DoctorProfile]:
        return self.db.query(DoctorProfile).filter(DoctorProfile.account_id == account_id).first()

    def _delete_doctor_appointments(self, account_id: int, doctor: DoctorProfile) -> int:
        count = (
            self.db.query(Appointment)
            .filter(Appointment.doctor_id == doctor.id)
            .delete(synchronize_session=False)
        )
        if count:
            logger.info("Deleting %d appointments where account %s is the doctor", count, account_id)
        return count

    def _delete_doctor_profile(self, account_id: int, doctor: DoctorProfile) -> None:
        logger.info("Deleting doctor profile %s for account %s", doctor.id, account_id)
        self.db.query(DoctorProfile).filter(DoctorProfile.id == doctor.id).delete(synchronize_session=False)

    def _delete_history_entries(self, account_id: int) -> int:
        count = (
            self.db.query(MedicalHistoryEntry)
            .filter(MedicalHistoryEntry.account_id == account_id)
            .delete(synchronize_session=False)
        )
        if count:
            logger.info("Deleting %d medical history entries of account %s", count, account_id)
        return count

    def _delete_account_row(self, account_id: int) -> None:
        logger.info("Deleting account %s", account_id)
        self.db.query(Account).filter(Account.id == account_id).delete(synchronize_session=False)
