from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Appointment(Base, TimestampMixin):
    __tablename__ = "citas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("cuentas.id"), nullable=False, index=True)  # Requesting patient
    doctor_id = Column(Integer, ForeignKey("doctores.id"), nullable=True, index=True)
    scheduled_at = Column(DateTime, nullable=True)
    reason = Column(String(500), nullable=True)

    account = relationship("Account", back_populates="appointments")
    doctor = relationship("DoctorProfile", back_populates="appointments")
