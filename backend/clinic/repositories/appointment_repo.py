"""
Appointment repository implementation following SOLID principles.
"""

from typing import List

from ..domain.entities import Appointment, AppointmentStatus
from ..domain.interfaces import IAppointmentRepository
from .base import InMemoryRepository


class AppointmentRepository(InMemoryRepository[Appointment], IAppointmentRepository):
    """Repository for Appointment storage operations."""

    def find_by_date(self, date: str) -> List[Appointment]:
        return self.find(lambda appointment: appointment.date == date)

    def find_by_doctor(self, doctor_id: int) -> List[Appointment]:
        return self.find(lambda appointment: appointment.doctor_id == doctor_id)

    def find_by_patient(self, patient_id: int) -> List[Appointment]:
        return self.find(lambda appointment: appointment.patient_id == patient_id)

    def find_by_status(self, status: AppointmentStatus) -> List[Appointment]:
        status = AppointmentStatus(status)
        return self.find(lambda appointment: appointment.status == status)

    def find_by_doctor_and_date(self, doctor_id: int, date: str) -> List[Appointment]:
        return self.find(
            lambda appointment: appointment.doctor_id == doctor_id
            and appointment.date == date
        )
