"""
Prescription repository implementation following SOLID principles.
"""

from typing import List

from ..domain.entities import Prescription
from ..domain.interfaces import IPrescriptionRepository
from .base import InMemoryRepository


class PrescriptionRepository(
    InMemoryRepository[Prescription], IPrescriptionRepository
):
    """Repository for Prescription storage operations."""

    def find_by_patient(self, patient_id: int) -> List[Prescription]:
        return self.find(lambda prescription: prescription.patient_id == patient_id)

    def find_by_doctor(self, doctor_id: int) -> List[Prescription]:
        return self.find(lambda prescription: prescription.doctor_id == doctor_id)

    def find_by_medication(self, medication_id: int) -> List[Prescription]:
        return self.find(
            lambda prescription: medication_id in prescription.medication_ids
        )
