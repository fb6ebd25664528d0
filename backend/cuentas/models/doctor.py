from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class DoctorProfile(Base, TimestampMixin):
    __tablename__ = "doctores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("cuentas.id"), unique=True, nullable=False, index=True)
    specialty = Column(String(100), nullable=True)
    license_number = Column(String(100), nullable=True)

    account = relationship("Account", back_populates="doctor_profile")
    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")
