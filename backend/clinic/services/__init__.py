# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from .appointment_service import DEFAULT_TIME_SLOTS, AppointmentService
from .auth_service import AuthenticationService
from .billing_service import BillingService
from .cascade_service import CascadeService
from .doctor_service import DoctorService
from .medication_service import MedicationService
from .patient_service import PatientService
from .prescription_service import PrescriptionService

__all__ = [
    "DEFAULT_TIME_SLOTS",
    "AppointmentService",
    "AuthenticationService",
    "BillingService",
    "CascadeService",
    "DoctorService",
    "MedicationService",
    "PatientService",
    "PrescriptionService",
]
