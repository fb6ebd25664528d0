from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Role:
    ADMIN = 1
    DOCTOR = 2
    PATIENT = 3


class Account(Base, TimestampMixin):
    __tablename__ = "cuentas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(150), nullable=True)
    age = Column(Integer, nullable=True)
    role = Column(Integer, nullable=False, default=Role.PATIENT, index=True)

    # No ORM cascade: dependent rows are removed by CascadeDeletionCoordinator
    appointments = relationship("Appointment", back_populates="account", passive_deletes="all")
    doctor_profile = relationship("DoctorProfile", back_populates="account", uselist=False, passive_deletes="all")
    history_entries = relationship("MedicalHistoryEntry", back_populates="account", passive_deletes="all")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
