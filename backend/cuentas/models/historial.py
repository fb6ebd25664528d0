from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class MedicalHistoryEntry(Base, TimestampMixin):
    __tablename__ = "historial_medico"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(Integer, ForeignKey("cuentas.id"), nullable=False, index=True)
    diagnosis = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    recorded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    account = relationship("Account", back_populates="history_entries")
