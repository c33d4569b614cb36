"""
Patient repository implementation following SOLID principles.
"""

from typing import List

from ..domain.entities import Patient
from ..domain.interfaces import IPatientRepository
from .base import InMemoryRepository


class PatientRepository(InMemoryRepository[Patient], IPatientRepository):
    """Repository for Patient storage operations."""

    def find_by_disease(self, disease: str) -> List[Patient]:
        return self.find(lambda patient: patient.disease == disease)

    def find_by_age_range(self, min_age: int, max_age: int) -> List[Patient]:
        """Inclusive on both ends."""
        return self.find(lambda patient: min_age <= patient.age <= max_age)
