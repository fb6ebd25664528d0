from .cuenta import Account, Role
from .cita import Appointment
from .doctor import DoctorProfile
from .historial import MedicalHistoryEntry

__all__ = ["Account", "Role", "Appointment", "DoctorProfile", "MedicalHistoryEntry"]
