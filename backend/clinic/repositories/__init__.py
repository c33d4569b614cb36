# Repositories package initialization
# This file makes the repositories directory a Python package

from .appointment_repo import AppointmentRepository
from .base import InMemoryRepository
from .bill_repo import BillRepository
from .doctor_repo import DoctorRepository
from .medication_repo import MedicationRepository
from .patient_repo import PatientRepository
from .prescription_repo import PrescriptionRepository
from .user_repo import UserRepository

__all__ = [
    "InMemoryRepository",
    "PatientRepository",
    "DoctorRepository",
    "AppointmentRepository",
    "MedicationRepository",
    "PrescriptionRepository",
    "BillRepository",
    "UserRepository",
]
