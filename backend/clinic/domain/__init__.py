"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities with business logic
- interfaces.py: Repository and notification contracts
"""

from .entities import (
    Appointment,
    AppointmentStatus,
    Bill,
    Doctor,
    Medication,
    Patient,
    PaymentStatus,
    Prescription,
    Role,
    User,
)
from .interfaces import (
    IAppointmentRepository,
    IBillRepository,
    IDisplay,
    IDoctorRepository,
    IMedicationRepository,
    INotificationSink,
    IPatientRepository,
    IPrescriptionRepository,
    IReader,
    IRepository,
    IUserRepository,
    IWriter,
)

__all__ = [
    # Domain entities
    "Patient",
    "Doctor",
    "Appointment",
    "Medication",
    "Prescription",
    "Bill",
    "User",
    # Enumerations
    "AppointmentStatus",
    "PaymentStatus",
    "Role",
    # Repository interfaces
    "IRepository",
    "IPatientRepository",
    "IDoctorRepository",
    "IAppointmentRepository",
    "IMedicationRepository",
    "IPrescriptionRepository",
    "IBillRepository",
    "IUserRepository",
    # Segregated interfaces
    "IReader",
    "IWriter",
    # Notification contracts
    "INotificationSink",
    "IDisplay",
]
